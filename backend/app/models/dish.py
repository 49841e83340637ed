"""
Foody Backend: Dish SQLAlchemy Model
=======================================

What:  ORM model representing the `dishes` table.
Who:   Read by DishService; there is no create path for dishes in the API.

Table Design:
    - id: Database-assigned integer primary key
    - restaurant_name: Denormalized copy of the restaurant's name. It is NOT a
      foreign key; a dish may name a restaurant that does not exist.
    - Every other column is nullable; rows are returned exactly as stored.
"""

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Dish(Base):
    """A dish row, returned by full-table scan only."""

    __tablename__ = "dishes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # asdecimal=False: the API serializes price as a plain JSON number
    price: Mapped[float | None] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=True,
    )

    restaurant_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    category: Mapped[str | None] = mapped_column(String(100), nullable=True)
    calories: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<Dish(id={self.id}, name='{self.name}', restaurant='{self.restaurant_name}')>"
