"""
Foody Backend: Restaurant Route Handlers
===========================================

What:  Handles GET /api/restaurants (list) and POST /api/restaurants (create).

Response shape of POST:
    The body the client sent is echoed back as-is. Fields the client left out
    are not filled in (response_model_exclude_unset), so the response equals
    the request. The new row's identifier is not returned.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.restaurant import RestaurantSchema
from app.services.restaurant_service import restaurant_service

router = APIRouter(prefix="/api", tags=["Restaurants"])


@router.get(
    "/restaurants",
    response_model=List[RestaurantSchema],
    responses={
        200: {"description": "Every stored restaurant"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all restaurants",
)
async def list_restaurants(
    db: AsyncSession = Depends(get_db_session),
) -> List[RestaurantSchema]:
    """Full-table read; order is whatever the database returns."""
    return await restaurant_service.list_restaurants(db=db)


@router.post(
    "/restaurants",
    response_model=RestaurantSchema,
    response_model_exclude_unset=True,
    responses={
        200: {"description": "The submitted restaurant, echoed"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a restaurant",
    description=(
        "Inserts one restaurant row. No field is required and nothing is validated. "
        "Posting the same body twice creates two rows."
    ),
)
async def create_restaurant(
    restaurant: RestaurantSchema,
    db: AsyncSession = Depends(get_db_session),
) -> RestaurantSchema:
    return await restaurant_service.create_restaurant(db=db, restaurant=restaurant)
