"""
Foody Backend: Restaurant SQLAlchemy Model
=============================================

What:  ORM model representing the `restaurants` table.

The integer id exists for the table's primary key only; it is never part of
any API response. No uniqueness constraint on name: posting the same
restaurant twice stores two rows.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Restaurant(Base):
    """A restaurant row. Created by POST /api/restaurants, never updated or deleted."""

    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Restaurant(id={self.id}, name='{self.name}')>"
