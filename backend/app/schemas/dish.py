"""
Foody Backend: Dish Schemas
==============================

What:  Pydantic model defining the JSON shape of a dish.
Why:   The API uses camelCase (`restaurantName`) while the table and the
       Python attribute use snake_case (`restaurant_name`).
"""

from typing import Optional

from pydantic import BaseModel, Field


class DishResponse(BaseModel):
    """
    What:  One row of the `dishes` table as returned by GET /api/dishes.

    Serialized with aliases, e.g.:
        {
            "id": 1,
            "name": "Margherita",
            "description": "Tomato, mozzarella, basil",
            "price": 9.5,
            "restaurantName": "Luigi's",
            "category": "Pizza",
            "calories": 800
        }
    """
    id: int = Field(description="Database-assigned dish identifier")
    name: Optional[str] = Field(default=None, description="Dish name")
    description: Optional[str] = Field(default=None, description="Free-text description")
    price: Optional[float] = Field(default=None, description="Price as a decimal number")
    restaurant_name: Optional[str] = Field(
        default=None,
        alias="restaurantName",
        description="Name of the restaurant serving the dish (not a reference)",
    )
    category: Optional[str] = Field(default=None, description="Menu category")
    calories: Optional[int] = Field(default=None, description="Calories per serving")

    model_config = {"from_attributes": True, "populate_by_name": True}
