"""
Hotel Reservations Backend — Application Package
==================================================

What: Rooms and reservations API with a date-range availability search.
Who:  Imported by uvicorn (hotel_api.main:app), Alembic, and pytest.

Layering:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Stores + Availability)  │  ← CRUD and the conflict rule
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

The availability resolver in services/availability.py is pure and has no
dependency on the layers below it; the stores feed it snapshots.
"""

__version__ = "1.0.0"
