"""
Foody Backend: Restaurant Schemas
====================================

What:  Pydantic model shared by the restaurant request body and responses.

No field is required and no format is checked: an empty name or a malformed
phone number is stored as sent, and a numeric value is stored as its string
form. A missing field is stored as NULL.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RestaurantSchema(BaseModel):
    """
    What:  A restaurant as seen by API clients: name, address, phone.
    Who:   Request body of POST /api/restaurants, item of GET /api/restaurants.

    The table's primary key is not part of this shape; clients never see it.
    """
    name: Optional[str] = Field(default=None, description="Restaurant name")
    address: Optional[str] = Field(default=None, description="Street address")
    phone: Optional[str] = Field(default=None, description="Contact phone number")

    # JSON numbers (e.g. a phone sent as 5551234) are kept as their string form
    model_config = {"from_attributes": True, "coerce_numbers_to_str": True}
