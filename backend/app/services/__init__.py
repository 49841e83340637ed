# Services package init
"""
Foody Backend: Services Layer
================================

What:  Data access layer sitting between routes (HTTP) and the database.
How:   Services take an AsyncSession, run their query, map rows to schemas,
       and translate SQLAlchemy failures into DatabaseError.

Service Inventory:
    - DishService:       full-table read of `dishes`
    - RestaurantService: full-table read of `restaurants`, single-row insert
"""
