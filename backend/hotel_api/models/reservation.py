"""
Hotel Reservations Backend — Reservation SQLAlchemy Model
===========================================================

What:  ORM model for the `reservations` table.
Who:   Used by ReservationService for CRUD and as the snapshot the
       availability resolver scans.

Table Design Rationale:
    - id_room is a plain integer, not a foreign key. A reservation may be stored
      before (or without) its room existing. Matching is by value only.
    - check_in_date / check_out_date are nullable. Rows with a missing date
      never block a room (see services/availability.py).
    - idx_reservations_id_room supports per-room lookups.
"""

from datetime import date

from sqlalchemy import Date, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from hotel_api.database import Base


class Reservation(Base):
    """A stay booked against a room identifier."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Reservation identifier, assigned on insert",
    )

    id_room: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Identifier of the reserved room (no FK)",
    )

    check_in_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="First night of the stay",
    )

    check_out_date: Mapped[date | None] = mapped_column(
        Date,
        nullable=True,
        comment="Departure day",
    )

    __table_args__ = (
        Index("idx_reservations_id_room", "id_room"),
    )

    def __repr__(self) -> str:
        return (
            f"<Reservation(id={self.id}, id_room={self.id_room}, "
            f"check_in_date='{self.check_in_date}', check_out_date='{self.check_out_date}')>"
        )
