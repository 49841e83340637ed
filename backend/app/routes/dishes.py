"""
Foody Backend: Dish Route Handlers
=====================================

What:  Handles GET /api/dishes.
Who:   Called by the frontend dish list.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.dish import DishResponse
from app.services.dish_service import dish_service

router = APIRouter(prefix="/api", tags=["Dishes"])


@router.get(
    "/dishes",
    response_model=List[DishResponse],
    responses={
        200: {"description": "Every stored dish"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all dishes",
    description="Returns every row of the dishes table. No filtering, ordering or pagination.",
)
async def list_dishes(
    db: AsyncSession = Depends(get_db_session),
) -> List[DishResponse]:
    return await dish_service.list_dishes(db=db)
