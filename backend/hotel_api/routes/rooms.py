"""
Hotel Reservations Backend — Room Route Handlers
==================================================

What:  CRUD endpoints under /api/rooms.
How:   Thin handlers: parse the request, call RoomService, set status code
       and headers. Errors are raised by the service and formatted by the
       global exception handlers.

Endpoints:
    GET    /api/rooms          → 200 list
    GET    /api/rooms/{id}     → 200 | 404
    POST   /api/rooms          → 201 + Location header
    PUT    /api/rooms/{id}     → 200 | 404 (full replacement)
    DELETE /api/rooms/{id}     → 204 (also for unknown IDs)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_api.database import get_db_session
from hotel_api.schemas.common import ErrorResponse
from hotel_api.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from hotel_api.services.room_service import room_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rooms", tags=["Rooms"])


@router.get(
    "",
    response_model=List[RoomResponse],
    summary="List all rooms",
)
async def list_rooms(db: AsyncSession = Depends(get_db_session)) -> List[RoomResponse]:
    return await room_service.list_rooms(db)


@router.get(
    "/{room_id}",
    response_model=RoomResponse,
    responses={404: {"description": "Room not found", "model": ErrorResponse}},
    summary="Get a single room by ID",
)
async def get_room(room_id: int, db: AsyncSession = Depends(get_db_session)) -> RoomResponse:
    return await room_service.get_room(db, room_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=RoomResponse,
    summary="Create a room",
)
async def create_room(
    payload: RoomCreate,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> RoomResponse:
    """
    Create a room and point the client at it.

    The Location header carries the absolute URL of GET /api/rooms/{id}.
    """
    room = await room_service.create_room(db, payload)
    response.headers["Location"] = str(request.url_for("get_room", room_id=room.id))
    return room


@router.put(
    "/{room_id}",
    response_model=RoomResponse,
    responses={404: {"description": "Room not found", "model": ErrorResponse}},
    summary="Replace a room",
)
async def update_room(
    room_id: int,
    payload: RoomUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> RoomResponse:
    return await room_service.update_room(db, room_id, payload)


@router.delete(
    "/{room_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a room",
)
async def delete_room(room_id: int, db: AsyncSession = Depends(get_db_session)) -> Response:
    await room_service.delete_room(db, room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
