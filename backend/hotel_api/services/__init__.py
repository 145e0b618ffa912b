# Services package init
"""
Hotel Reservations Backend — Services Layer
=============================================

What:  Business logic between routes (HTTP) and the database (persistence).

Service Inventory:
    - availability: Pure conflict rule and room filter (no I/O)
    - RoomService: Room store (CRUD over the rooms table)
    - ReservationService: Reservation store plus the availability search

Routes call the module-level singletons (room_service, reservation_service);
tests instantiate the classes directly with a mocked session.
"""
