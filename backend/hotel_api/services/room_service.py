"""
Hotel Reservations Backend — Room Service (Room Store)
========================================================

What:  CRUD operations over the rooms table.
Why:   Keeps persistence and not-found handling out of the route handlers.
How:   Stateless service; each call receives the request's AsyncSession.
       Writes are flushed (IDs assigned) and committed by get_db_session.

Error Handling Strategy:
    NotFoundError propagates as-is (→ 404). SQLAlchemy failures are logged
    with context and wrapped in DatabaseError (→ 500, generic message).
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.exceptions import DatabaseError, NotFoundError
from hotel_api.models.room import Room
from hotel_api.schemas.room import RoomCreate, RoomResponse, RoomUpdate

logger = logging.getLogger(__name__)


class RoomService:
    """
    Business logic layer for room operations.

    Responsibilities:
        - list_rooms() / get_room(): reads returning response models
        - create_room() / update_room() / delete_room(): writes
        - fetch_all(): raw ORM snapshot for the availability search
    """

    async def fetch_all(self, db: AsyncSession) -> List[Room]:
        """All rooms ordered by id, as ORM rows."""
        try:
            result = await db.execute(select(Room).order_by(Room.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing rooms: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve rooms. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def list_rooms(self, db: AsyncSession) -> List[RoomResponse]:
        rooms = await self.fetch_all(db)
        return [RoomResponse.model_validate(room) for room in rooms]

    async def _find(self, db: AsyncSession, room_id: int) -> Optional[Room]:
        try:
            result = await db.execute(select(Room).where(Room.id == room_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching room %s: %s", room_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the room. Please try again.",
                context={"room_id": room_id},
            )

    async def get_room(self, db: AsyncSession, room_id: int) -> RoomResponse:
        """
        Retrieve a single room by ID.

        Raises:
            NotFoundError: Room with given ID does not exist (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        room = await self._find(db, room_id)
        if room is None:
            raise NotFoundError(resource="room", resource_id=str(room_id))
        return RoomResponse.model_validate(room)

    async def create_room(self, db: AsyncSession, payload: RoomCreate) -> RoomResponse:
        """Insert a room; the database assigns its identifier on flush."""
        room = Room(**payload.model_dump())
        try:
            db.add(room)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating room: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the room. Please try again.",
                context={"error_type": type(e).__name__},
            )
        logger.info("Room created: %s", room.id)
        return RoomResponse.model_validate(room)

    async def update_room(
        self,
        db: AsyncSession,
        room_id: int,
        payload: RoomUpdate,
    ) -> RoomResponse:
        """
        Replace every mutable field of an existing room.

        Fields absent from the payload are written as null, matching the
        PUT semantics of the API (no partial update).

        Raises:
            NotFoundError: No room with this ID (→ 404)
        """
        room = await self._find(db, room_id)
        if room is None:
            raise NotFoundError(resource="room", resource_id=str(room_id))

        for field, value in payload.model_dump().items():
            setattr(room, field, value)

        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating room %s: %s", room_id, str(e))
            raise DatabaseError(
                message="Could not update the room. Please try again.",
                context={"room_id": room_id},
            )
        logger.info("Room updated: %s", room_id)
        return RoomResponse.model_validate(room)

    async def delete_room(self, db: AsyncSession, room_id: int) -> None:
        """Delete a room. Deleting an unknown ID is a no-op."""
        room = await self._find(db, room_id)
        if room is None:
            logger.debug("Delete of unknown room %s ignored", room_id)
            return

        try:
            await db.delete(room)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting room %s: %s", room_id, str(e))
            raise DatabaseError(
                message="Could not delete the room. Please try again.",
                context={"room_id": room_id},
            )
        logger.info("Room deleted: %s", room_id)


room_service = RoomService()
