"""
Hotel Reservations Backend — Room Request/Response Schemas
============================================================

What:  Pydantic models defining the room API contract.
How:   JSON uses camelCase names (numberOfPerson, havePrivateBathroom);
       Python code and the ORM use snake_case attributes. populate_by_name
       lets clients send either spelling; responses always use the aliases.

Why schemas separate from the ORM model:
    The API contract (aliases, numeric price in JSON) changes independently
    of the table layout.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


class RoomBase(BaseModel):
    """Mutable room fields shared by create, update and response models."""

    description: Optional[str] = Field(default=None, description="Free-text room description")
    number_of_person: Optional[int] = Field(
        default=None,
        ge=0,
        alias="numberOfPerson",
        description="Occupancy capacity",
    )
    has_private_bathroom: Optional[bool] = Field(
        default=None,
        alias="havePrivateBathroom",
        description="Whether the room has a private bathroom",
    )
    price: Optional[Decimal] = Field(
        default=None,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Nightly price",
    )

    model_config = {"populate_by_name": True}

    @field_serializer("price", when_used="json-unless-none")
    def serialize_price(self, price: Decimal) -> float:
        """Emit price as a JSON number instead of pydantic's default string."""
        return float(price)


class RoomCreate(RoomBase):
    """Body of POST /api/rooms. The identifier is assigned by the store."""


class RoomUpdate(RoomBase):
    """
    Body of PUT /api/rooms/{id}.

    Full replacement: every field not sent is stored as null.
    """


class RoomResponse(RoomBase):
    """A persisted room as returned by every room endpoint and by the search."""

    id: int = Field(description="Room identifier")

    model_config = {"from_attributes": True}
