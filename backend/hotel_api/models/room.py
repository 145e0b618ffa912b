"""
Hotel Reservations Backend — Room SQLAlchemy Model
====================================================

What:  ORM model for the `rooms` table.
Who:   Used by RoomService for CRUD, by the availability search as a
       snapshot source, and by Alembic for schema management.

Column notes:
    - id: integer identity, assigned by the database on insert
    - number_of_person: occupancy capacity, nullable
    - has_private_bathroom: nullable flag (unknown is distinct from False)
    - price: NUMERIC(10, 2), nullable; no arithmetic happens on it here
"""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from hotel_api.database import Base


class Room(Base):
    """A bookable room. Identity is the only invariant, enforced by the PK."""

    __tablename__ = "rooms"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Room identifier, assigned on insert",
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Free-text room description",
    )

    number_of_person: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Occupancy capacity",
    )

    has_private_bathroom: Mapped[bool | None] = mapped_column(
        Boolean,
        nullable=True,
        comment="Whether the room has its own bathroom",
    )

    price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Nightly price",
    )

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, number_of_person={self.number_of_person})>"
