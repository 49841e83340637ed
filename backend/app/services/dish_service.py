"""
Foody Backend: Dish Service
==============================

What:  Reads dishes from the database and maps them to API records.
Who:   Called by GET /api/dishes.

Query:
    SELECT * FROM dishes
    No filter, no ORDER BY, no LIMIT. Callers must not rely on row order.
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.dish import Dish
from app.schemas.dish import DishResponse

logger = logging.getLogger(__name__)


class DishService:
    """Stateless data access for the `dishes` table."""

    async def list_dishes(self, db: AsyncSession) -> List[DishResponse]:
        """
        Return every dish currently stored.

        Args:
            db: Async database session

        Returns:
            One DishResponse per row; an empty list for an empty table.

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Dish))
            dishes = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing dishes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve dishes. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.debug("Fetched %d dishes", len(dishes))
        return [
            DishResponse(
                id=dish.id,
                name=dish.name,
                description=dish.description,
                price=dish.price,
                restaurant_name=dish.restaurant_name,
                category=dish.category,
                calories=dish.calories,
            )
            for dish in dishes
        ]


dish_service = DishService()
