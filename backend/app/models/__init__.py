"""
Foody Backend: ORM Models
============================

Importing this package registers every table on ``Base.metadata``.
"""

from app.models.dish import Dish
from app.models.restaurant import Restaurant

__all__ = ["Dish", "Restaurant"]
