"""
Hotel Reservations Backend — Reservation Request/Response Schemas
===================================================================

What:  Pydantic models for the reservation API contract.
How:   JSON names follow the public API (idRoom, checkInDate, checkOutDate);
       dates are ISO-8601 calendar dates with no time or timezone.

Both dates are optional. A reservation without dates is stored as given and
never blocks availability. Ordering between the two dates is a business
rule checked by ReservationService, not a schema constraint, so it can be
switched off through settings.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class ReservationBase(BaseModel):
    id_room: int = Field(alias="idRoom", description="Identifier of the reserved room")
    check_in_date: Optional[date] = Field(
        default=None,
        alias="checkInDate",
        description="Check-in date (yyyy-MM-dd)",
    )
    check_out_date: Optional[date] = Field(
        default=None,
        alias="checkOutDate",
        description="Check-out date (yyyy-MM-dd)",
    )

    model_config = {"populate_by_name": True}


class ReservationCreate(ReservationBase):
    """Body of POST /api/reservations. The room is not checked for existence."""


class ReservationUpdate(ReservationBase):
    """Body of PUT /api/reservations/{id}; replaces every field."""


class ReservationResponse(ReservationBase):
    id: int = Field(description="Reservation identifier")

    model_config = {"from_attributes": True}
