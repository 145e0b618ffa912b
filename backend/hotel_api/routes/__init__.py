# Routes package init
"""
Hotel Reservations Backend — API Routes Package
=================================================

Route Inventory:
    - rooms.py:         /api/rooms            (room CRUD)
    - reservations.py:  /api/reservations     (reservation CRUD)
                        /api/reservations/search (availability)
    - health.py:        GET /health

Routes stay thin: extract request data, call a service, set status code and
headers. Business rules live in the services.
"""
