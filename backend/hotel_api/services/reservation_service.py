"""
Hotel Reservations Backend — Reservation Service (Reservation Store + Search)
===============================================================================

What:  CRUD over the reservations table, plus the availability search.
How:   Stateless service receiving the request's AsyncSession per call.

Search Flow (GET /api/reservations/search):
    ┌────────────┐    ┌───────────────────┐    ┌────────────────────┐
    │  Route     │───▶│  Read snapshots   │───▶│  find_available_   │
    │  (parsed   │    │  rooms +          │    │  rooms (pure)      │
    │   dates)   │    │  reservations     │    └────────────────────┘
    └────────────┘    └───────────────────┘

Write rules:
    - The referenced room is not checked for existence.
    - With settings.enforce_reservation_date_order, a write whose check-in
      is not strictly before its check-out is rejected (ValidationError).
      Missing dates are always accepted.
"""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.config import settings
from hotel_api.exceptions import DatabaseError, NotFoundError, ValidationError
from hotel_api.models.reservation import Reservation
from hotel_api.schemas.reservation import (
    ReservationBase,
    ReservationCreate,
    ReservationResponse,
    ReservationUpdate,
)
from hotel_api.schemas.room import RoomResponse
from hotel_api.services.availability import find_available_rooms
from hotel_api.services.room_service import room_service

logger = logging.getLogger(__name__)


class ReservationService:
    """
    Business logic layer for reservations.

    Responsibilities:
        - CRUD with the same not-found / DatabaseError policy as RoomService
        - search_availability(): snapshot reads + availability resolver
    """

    def _check_date_order(self, payload: ReservationBase) -> None:
        if not settings.enforce_reservation_date_order:
            return
        check_in, check_out = payload.check_in_date, payload.check_out_date
        if check_in is not None and check_out is not None and check_in >= check_out:
            raise ValidationError(
                message="checkInDate must be before checkOutDate",
                field="checkOutDate",
                context={
                    "checkInDate": check_in.isoformat(),
                    "checkOutDate": check_out.isoformat(),
                },
            )

    async def fetch_all(self, db: AsyncSession) -> List[Reservation]:
        try:
            result = await db.execute(select(Reservation).order_by(Reservation.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing reservations: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve reservations. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def list_reservations(self, db: AsyncSession) -> List[ReservationResponse]:
        reservations = await self.fetch_all(db)
        return [ReservationResponse.model_validate(r) for r in reservations]

    async def _find(self, db: AsyncSession, reservation_id: int) -> Optional[Reservation]:
        try:
            result = await db.execute(
                select(Reservation).where(Reservation.id == reservation_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching reservation %s: %s", reservation_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the reservation. Please try again.",
                context={"reservation_id": reservation_id},
            )

    async def get_reservation(self, db: AsyncSession, reservation_id: int) -> ReservationResponse:
        reservation = await self._find(db, reservation_id)
        if reservation is None:
            raise NotFoundError(resource="reservation", resource_id=str(reservation_id))
        return ReservationResponse.model_validate(reservation)

    async def create_reservation(
        self,
        db: AsyncSession,
        payload: ReservationCreate,
    ) -> ReservationResponse:
        """
        Store a new reservation.

        Raises:
            ValidationError: check-in not before check-out (when enforced)
            DatabaseError: insert failed
        """
        self._check_date_order(payload)
        reservation = Reservation(**payload.model_dump())
        try:
            db.add(reservation)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating reservation: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the reservation. Please try again.",
                context={"error_type": type(e).__name__},
            )
        logger.info(
            "Reservation created: %s (room=%s, %s..%s)",
            reservation.id,
            reservation.id_room,
            reservation.check_in_date,
            reservation.check_out_date,
        )
        return ReservationResponse.model_validate(reservation)

    async def update_reservation(
        self,
        db: AsyncSession,
        reservation_id: int,
        payload: ReservationUpdate,
    ) -> ReservationResponse:
        """Full replacement of an existing reservation; 404 when it does not exist."""
        self._check_date_order(payload)
        reservation = await self._find(db, reservation_id)
        if reservation is None:
            raise NotFoundError(resource="reservation", resource_id=str(reservation_id))

        for field, value in payload.model_dump().items():
            setattr(reservation, field, value)

        try:
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating reservation %s: %s", reservation_id, str(e))
            raise DatabaseError(
                message="Could not update the reservation. Please try again.",
                context={"reservation_id": reservation_id},
            )
        logger.info("Reservation updated: %s", reservation_id)
        return ReservationResponse.model_validate(reservation)

    async def delete_reservation(self, db: AsyncSession, reservation_id: int) -> None:
        """Delete a reservation; unknown IDs are ignored."""
        reservation = await self._find(db, reservation_id)
        if reservation is None:
            logger.debug("Delete of unknown reservation %s ignored", reservation_id)
            return

        try:
            await db.delete(reservation)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting reservation %s: %s", reservation_id, str(e))
            raise DatabaseError(
                message="Could not delete the reservation. Please try again.",
                context={"reservation_id": reservation_id},
            )
        logger.info("Reservation deleted: %s", reservation_id)

    async def search_availability(
        self,
        db: AsyncSession,
        check_in: date,
        check_out: date,
    ) -> List[RoomResponse]:
        """
        Rooms free for the whole of [check_in, check_out].

        What:    Reads every room and every reservation, then applies the
                 conflict rule in memory.
        Who:     Called by GET /api/reservations/search.

        Both snapshots come from the same session, but no lock is taken:
        a concurrent booking may not be reflected in the answer.
        """
        rooms = await room_service.fetch_all(db)
        reservations = await self.fetch_all(db)

        available = find_available_rooms(check_in, check_out, rooms, reservations)
        logger.info(
            "Availability search %s..%s: %d of %d room(s) free",
            check_in,
            check_out,
            len(available),
            len(rooms),
        )
        return [RoomResponse.model_validate(room) for room in available]


reservation_service = ReservationService()
