# Importing the models registers their tables on Base.metadata
from hotel_api.models.reservation import Reservation
from hotel_api.models.room import Room

__all__ = ["Reservation", "Room"]
