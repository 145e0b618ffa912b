"""Request/response schemas for rooms, reservations and service endpoints."""
