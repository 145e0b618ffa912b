"""
Hotel Reservations Backend — Room Service Unit Tests
======================================================

What:  Tests for RoomService CRUD logic.
How:   Uses a mock AsyncSession (no real database).
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from hotel_api.exceptions import DatabaseError, NotFoundError
from hotel_api.models.room import Room
from hotel_api.schemas.room import RoomCreate, RoomUpdate
from hotel_api.services.room_service import RoomService


def _scalar_result(row):
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    return result


def _scalars_result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


class TestRoomServiceRead:
    """Tests for list_rooms and get_room."""

    def setup_method(self):
        self.service = RoomService()

    @pytest.mark.asyncio
    async def test_list_rooms(self, mock_db_session, make_room):
        mock_db_session.execute.return_value = _scalars_result(
            [make_room(1, description="Single"), make_room(2, description="Double")]
        )

        result = await self.service.list_rooms(mock_db_session)

        assert [room.id for room in result] == [1, 2]
        assert result[0].description == "Single"

    @pytest.mark.asyncio
    async def test_get_room_found(self, mock_db_session, make_room):
        mock_db_session.execute.return_value = _scalar_result(
            make_room(3, number_of_person=2, has_private_bathroom=True, price=Decimal("80.00"))
        )

        result = await self.service.get_room(mock_db_session, 3)

        assert result.id == 3
        assert result.number_of_person == 2
        assert result.has_private_bathroom is True
        assert result.price == Decimal("80.00")

    @pytest.mark.asyncio
    async def test_get_room_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _scalar_result(None)

        with pytest.raises(NotFoundError):
            await self.service.get_room(mock_db_session, 404)

    @pytest.mark.asyncio
    async def test_query_failure_becomes_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=SQLAlchemyError("connection lost"))

        with pytest.raises(DatabaseError):
            await self.service.list_rooms(mock_db_session)


class TestRoomServiceWrite:
    """Tests for create, full-replacement update and delete."""

    def setup_method(self):
        self.service = RoomService()

    @pytest.mark.asyncio
    async def test_create_room_returns_assigned_id(self, mock_db_session):
        def assign_id():
            added = mock_db_session.add.call_args[0][0]
            added.id = 7

        mock_db_session.flush = AsyncMock(side_effect=assign_id)

        result = await self.service.create_room(
            mock_db_session,
            RoomCreate(description="Suite", numberOfPerson=4, price=Decimal("250")),
        )

        assert result.id == 7
        assert result.description == "Suite"
        assert result.number_of_person == 4
        added = mock_db_session.add.call_args[0][0]
        assert isinstance(added, Room)
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_room_replaces_every_field(self, mock_db_session, make_room):
        existing = make_room(
            5,
            description="Old",
            number_of_person=3,
            has_private_bathroom=True,
            price=Decimal("90.00"),
        )
        mock_db_session.execute.return_value = _scalar_result(existing)

        result = await self.service.update_room(
            mock_db_session, 5, RoomUpdate(description="New")
        )

        assert result.id == 5
        assert result.description == "New"
        # Omitted fields are cleared, not kept
        assert existing.number_of_person is None
        assert existing.has_private_bathroom is None
        assert existing.price is None

    @pytest.mark.asyncio
    async def test_update_missing_room_raises(self, mock_db_session):
        mock_db_session.execute.return_value = _scalar_result(None)

        with pytest.raises(NotFoundError):
            await self.service.update_room(mock_db_session, 9, RoomUpdate())
        mock_db_session.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_existing_room(self, mock_db_session, make_room):
        room = make_room(2)
        mock_db_session.execute.return_value = _scalar_result(room)

        await self.service.delete_room(mock_db_session, 2)

        mock_db_session.delete.assert_awaited_once_with(room)

    @pytest.mark.asyncio
    async def test_delete_missing_room_is_noop(self, mock_db_session):
        mock_db_session.execute.return_value = _scalar_result(None)

        await self.service.delete_room(mock_db_session, 2)

        mock_db_session.delete.assert_not_awaited()
