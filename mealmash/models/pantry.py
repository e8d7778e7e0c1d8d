"""Pantry item model for tracking what a user has at home."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mealmash.database import Base
from mealmash.models.mixins import TimestampMixin


class PantryItem(Base, TimestampMixin):
    """Pantry item owned by a single user."""

    __tablename__ = "pantry_items"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)  # Display name
    normalized_name = Column(String(255), nullable=False)  # Lowercase, trimmed for matching
    category = Column(String(100), nullable=True)
    quantity = Column(String(100), nullable=True)  # Free text: "2", "1 cup", "a handful"
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=True, index=True)

    # Relationships
    user = relationship("User", backref="pantry_items")
    ingredient = relationship("Ingredient")
