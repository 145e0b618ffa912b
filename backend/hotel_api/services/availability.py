"""
Hotel Reservations Backend — Availability Resolver
====================================================

What:  Computes which rooms are free for a requested date range.
How:   One pass over the reservation snapshot collects the identifiers of
       rooms with a conflicting stay; the room snapshot is then filtered
       against that set. Nothing is mutated and no I/O happens here.
Who:   Called by ReservationService.search_availability with rows it has
       just read; tests call it directly with in-memory rows.

Conflict rule:
    Two stays conflict when their closed intervals share a calendar day:

        requested      [in ────────── out]
        reserved                 [in ────────── out]     → conflict
        reserved                            [in ── out]  → conflict if it
                                                           starts on `out`

    A reservation ending the day a new stay begins counts as a conflict,
    and vice versa.

Missing dates:
    If any of the four dates is None the pair does not conflict. A broken
    row must never make every room unavailable.

Known race:
    Snapshots are read without locks. A reservation written between the
    read and the response is not reflected in the result.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional, Protocol, Set, TypeVar

logger = logging.getLogger(__name__)


class RoomLike(Protocol):
    id: int


class ReservationLike(Protocol):
    id_room: int
    check_in_date: Optional[date]
    check_out_date: Optional[date]


RoomT = TypeVar("RoomT", bound=RoomLike)


def dates_conflict(
    requested_in: Optional[date],
    requested_out: Optional[date],
    reserved_in: Optional[date],
    reserved_out: Optional[date],
) -> bool:
    """Return True when [requested_in, requested_out] and [reserved_in, reserved_out] share a day."""
    if requested_in is None or requested_out is None or reserved_in is None or reserved_out is None:
        return False
    return not requested_out < reserved_in and not requested_in > reserved_out


def booked_room_ids(
    check_in: date,
    check_out: date,
    reservations: Iterable[ReservationLike],
) -> Set[int]:
    """Identifiers of rooms holding at least one reservation that conflicts with the range."""
    return {
        reservation.id_room
        for reservation in reservations
        if dates_conflict(check_in, check_out, reservation.check_in_date, reservation.check_out_date)
    }


def find_available_rooms(
    check_in: date,
    check_out: date,
    rooms: Iterable[RoomT],
    reservations: Iterable[ReservationLike],
) -> List[RoomT]:
    """
    Rooms with no reservation conflicting with [check_in, check_out].

    Args:
        check_in: First day of the requested stay
        check_out: Last day of the requested stay
        rooms: Snapshot of all known rooms
        reservations: Snapshot of all known reservations

    Returns:
        The input rooms minus every room with a conflicting reservation,
        in input order. Rooms excluded by several reservations are dropped
        once; the result never repeats a room the input did not repeat.

    The range is not checked for ordering. An inverted request is evaluated
    as-is and may match every reservation or none.
    """
    excluded = booked_room_ids(check_in, check_out, reservations)
    available = [room for room in rooms if room.id not in excluded]
    logger.debug(
        "Availability %s..%s: %d room(s) free, %d room id(s) booked",
        check_in,
        check_out,
        len(available),
        len(excluded),
    )
    return available
