"""
Foody Backend: Restaurant Service
====================================

What:  Lists restaurants and inserts new ones.
Who:   Called by GET and POST /api/restaurants.

Creation semantics:
    create_restaurant() inserts exactly one row and hands back the record it
    was given, not the stored row. The generated primary key is never
    returned, so a client that wants to find its restaurant again has to
    re-read the full list. There is no duplicate detection; identical
    bodies produce distinct rows.

Transactions:
    create_restaurant() commits its own insert so a failed commit surfaces
    as DatabaseError inside the route, where the exception handlers (and
    the CORS and request-ID middleware) still see it.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.restaurant import Restaurant
from app.schemas.restaurant import RestaurantSchema

logger = logging.getLogger(__name__)


class RestaurantService:
    """Stateless data access for the `restaurants` table."""

    async def list_restaurants(self, db: AsyncSession) -> List[RestaurantSchema]:
        """
        Return every restaurant currently stored (name, address, phone).

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Restaurant))
            restaurants = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing restaurants: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve restaurants. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [
            RestaurantSchema(
                name=restaurant.name,
                address=restaurant.address,
                phone=restaurant.phone,
            )
            for restaurant in restaurants
        ]

    async def create_restaurant(
        self,
        db: AsyncSession,
        restaurant: RestaurantSchema,
    ) -> RestaurantSchema:
        """
        Insert one restaurant row and echo the input record.

        Args:
            db: Async database session
            restaurant: Client-supplied record; any field may be None

        Returns:
            The same object that was passed in, unmodified.

        Raises:
            DatabaseError: Insert failed (→ 500)
        """
        row = Restaurant(
            name=restaurant.name,
            address=restaurant.address,
            phone=restaurant.phone,
        )
        try:
            db.add(row)
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating restaurant: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the restaurant. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Restaurant inserted: %r", row)
        return restaurant


restaurant_service = RestaurantService()
