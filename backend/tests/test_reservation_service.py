"""
Hotel Reservations Backend — Reservation Service Unit Tests
=============================================================

What:  Tests for ReservationService: date-order rule, CRUD, and search.
How:   Mock AsyncSession; settings toggled with monkeypatch.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from hotel_api.config import settings
from hotel_api.exceptions import NotFoundError, ValidationError
from hotel_api.schemas.reservation import ReservationCreate, ReservationUpdate
from hotel_api.services.reservation_service import ReservationService


def _scalar_result(row):
    result = MagicMock()
    result.scalar_one_or_none.return_value = row
    return result


def _scalars_result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


class TestReservationDateOrder:
    """Tests for the check-in < check-out rule at the write boundary."""

    def setup_method(self):
        self.service = ReservationService()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "check_in, check_out",
        [("2024-06-15", "2024-06-10"), ("2024-06-10", "2024-06-10")],
    )
    async def test_rejects_check_in_not_before_check_out(self, mock_db_session, check_in, check_out):
        payload = ReservationCreate(idRoom=1, checkInDate=check_in, checkOutDate=check_out)

        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_reservation(mock_db_session, payload)

        assert exc_info.value.field == "checkOutDate"
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_dates_are_accepted(self, mock_db_session):
        def assign_id():
            mock_db_session.add.call_args[0][0].id = 1

        mock_db_session.flush = AsyncMock(side_effect=assign_id)

        result = await self.service.create_reservation(
            mock_db_session, ReservationCreate(idRoom=1, checkInDate="2024-06-10")
        )

        assert result.check_in_date == date(2024, 6, 10)
        assert result.check_out_date is None

    @pytest.mark.asyncio
    async def test_rule_can_be_disabled(self, mock_db_session, monkeypatch):
        monkeypatch.setattr(settings, "enforce_reservation_date_order", False)

        def assign_id():
            mock_db_session.add.call_args[0][0].id = 3

        mock_db_session.flush = AsyncMock(side_effect=assign_id)

        result = await self.service.create_reservation(
            mock_db_session,
            ReservationCreate(idRoom=1, checkInDate="2024-06-15", checkOutDate="2024-06-10"),
        )

        assert result.id == 3
        assert result.check_in_date > result.check_out_date

    @pytest.mark.asyncio
    async def test_update_checks_order_before_lookup(self, mock_db_session):
        with pytest.raises(ValidationError):
            await self.service.update_reservation(
                mock_db_session,
                1,
                ReservationUpdate(idRoom=1, checkInDate="2024-06-15", checkOutDate="2024-06-01"),
            )
        mock_db_session.execute.assert_not_awaited()


class TestReservationServiceCrud:

    def setup_method(self):
        self.service = ReservationService()

    @pytest.mark.asyncio
    async def test_get_reservation_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _scalar_result(None)

        with pytest.raises(NotFoundError):
            await self.service.get_reservation(mock_db_session, 42)

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, mock_db_session, make_reservation):
        existing = make_reservation(4, 1, "2024-06-10", "2024-06-15")
        mock_db_session.execute.return_value = _scalar_result(existing)

        result = await self.service.update_reservation(
            mock_db_session, 4, ReservationUpdate(idRoom=2, checkInDate="2024-07-01")
        )

        assert result.id == 4
        assert result.id_room == 2
        assert existing.check_in_date == date(2024, 7, 1)
        assert existing.check_out_date is None

    @pytest.mark.asyncio
    async def test_delete_missing_reservation_is_noop(self, mock_db_session):
        mock_db_session.execute.return_value = _scalar_result(None)

        await self.service.delete_reservation(mock_db_session, 4)

        mock_db_session.delete.assert_not_awaited()


class TestSearchAvailability:
    """Tests for the snapshot read + resolver orchestration."""

    def setup_method(self):
        self.service = ReservationService()

    @pytest.mark.asyncio
    async def test_search_returns_free_rooms(self, mock_db_session, make_room, make_reservation):
        rooms = [make_room(1, description="Booked"), make_room(2, description="Free")]
        reservations = [make_reservation(10, 1, "2024-07-01", "2024-07-05")]
        # Rooms are read first, then reservations
        mock_db_session.execute = AsyncMock(
            side_effect=[_scalars_result(rooms), _scalars_result(reservations)]
        )

        result = await self.service.search_availability(
            mock_db_session, date(2024, 7, 3), date(2024, 7, 4)
        )

        assert [room.id for room in result] == [2]
        assert result[0].description == "Free"
        assert mock_db_session.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_search_with_no_rooms(self, mock_db_session, make_reservation):
        mock_db_session.execute = AsyncMock(
            side_effect=[
                _scalars_result([]),
                _scalars_result([make_reservation(10, 1, "2024-07-01", "2024-07-05")]),
            ]
        )

        result = await self.service.search_availability(
            mock_db_session, date(2024, 7, 3), date(2024, 7, 4)
        )

        assert result == []
