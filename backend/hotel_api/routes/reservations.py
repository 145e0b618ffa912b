"""
Hotel Reservations Backend — Reservation Route Handlers
=========================================================

What:  CRUD endpoints under /api/reservations and the availability search.

Endpoints:
    GET    /api/reservations/search?checkIn=yyyy-MM-dd&checkOut=yyyy-MM-dd
    GET    /api/reservations
    GET    /api/reservations/{id}
    POST   /api/reservations          → 201 + Location header
    PUT    /api/reservations/{id}
    DELETE /api/reservations/{id}     → 204

/search is registered before /{reservation_id}; otherwise the literal
"search" would be matched (and rejected) as an integer path parameter.

Search parameter errors are reported as 400, not FastAPI's default 422:
the query parameters are accepted as optional strings and parsed here.
"""

import logging
import re
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.database import get_db_session
from hotel_api.exceptions import ValidationError
from hotel_api.schemas.common import ErrorResponse
from hotel_api.schemas.reservation import (
    ReservationCreate,
    ReservationResponse,
    ReservationUpdate,
)
from hotel_api.schemas.room import RoomResponse
from hotel_api.services.reservation_service import reservation_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reservations", tags=["Reservations"])

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_query_date(name: str, value: str) -> date:
    """
    Parse a strict yyyy-MM-dd query value.

    date.fromisoformat alone also accepts forms like 20240610, so the shape
    is checked first.
    """
    if _ISO_DATE.fullmatch(value):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass  # e.g. 2024-02-30: right shape, not a calendar date
    raise ValidationError(
        message="Invalid date format. Use yyyy-MM-dd",
        field=name,
        context={"value": value},
    )


@router.get(
    "/search",
    response_model=List[RoomResponse],
    responses={400: {"description": "Missing or malformed dates", "model": ErrorResponse}},
    summary="Find rooms free for a date range",
    description=(
        "Returns every room with no reservation overlapping the closed range "
        "[checkIn, checkOut]. A reservation ending on checkIn, or starting on "
        "checkOut, counts as overlapping."
    ),
)
async def search_availability(
    check_in: Optional[str] = Query(default=None, alias="checkIn", description="yyyy-MM-dd"),
    check_out: Optional[str] = Query(default=None, alias="checkOut", description="yyyy-MM-dd"),
    db: AsyncSession = Depends(get_db_session),
) -> List[RoomResponse]:
    missing = [name for name, value in (("checkIn", check_in), ("checkOut", check_out)) if not value]
    if missing:
        raise ValidationError(
            message="Both checkIn and checkOut parameters are required",
            context={"missing": missing},
        )

    return await reservation_service.search_availability(
        db,
        parse_query_date("checkIn", check_in),
        parse_query_date("checkOut", check_out),
    )


@router.get(
    "",
    response_model=List[ReservationResponse],
    summary="List all reservations",
)
async def list_reservations(db: AsyncSession = Depends(get_db_session)) -> List[ReservationResponse]:
    return await reservation_service.list_reservations(db)


@router.get(
    "/{reservation_id}",
    response_model=ReservationResponse,
    responses={404: {"description": "Reservation not found", "model": ErrorResponse}},
    summary="Get a single reservation by ID",
)
async def get_reservation(
    reservation_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> ReservationResponse:
    return await reservation_service.get_reservation(db, reservation_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ReservationResponse,
    responses={400: {"description": "Check-in not before check-out", "model": ErrorResponse}},
    summary="Create a reservation",
)
async def create_reservation(
    payload: ReservationCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> ReservationResponse:
    reservation = await reservation_service.create_reservation(db, payload)
    response.headers["Location"] = str(
        request.url_for("get_reservation", reservation_id=reservation.id)
    )
    return reservation


@router.put(
    "/{reservation_id}",
    response_model=ReservationResponse,
    responses={
        400: {"description": "Check-in not before check-out", "model": ErrorResponse},
        404: {"description": "Reservation not found", "model": ErrorResponse},
    },
    summary="Replace a reservation",
)
async def update_reservation(
    reservation_id: int,
    payload: ReservationUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> ReservationResponse:
    return await reservation_service.update_reservation(db, reservation_id, payload)


@router.delete(
    "/{reservation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a reservation",
)
async def delete_reservation(
    reservation_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await reservation_service.delete_reservation(db, reservation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
