# Routes package init
"""
Foody Backend: API Routes Package
====================================

Route Inventory:
    - dishes.py:       GET  /api/dishes
    - restaurants.py:  GET  /api/restaurants
                       POST /api/restaurants
    - health.py:       GET  /health

Routes are thin: they take the session from get_db_session, call a service,
and let FastAPI serialize the result.
"""
