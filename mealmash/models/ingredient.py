"""Canonical ingredient catalog model."""

from sqlalchemy import JSON, Boolean, Column, ForeignKey, Integer, String

from mealmash.database import Base
from mealmash.models.mixins import TimestampMixin


class Ingredient(Base, TimestampMixin):
    """Catalog entry giving a food item a stable identity."""

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    category = Column(String(50), nullable=False, default="Other")  # IngredientCategory value
    # Alternate spellings used by search: ["scallion", "spring onion"]
    aliases = Column(JSON, nullable=False, default=list)
    # Disabled entries are hidden from search but never deleted
    is_enabled = Column(Boolean, nullable=False, default=True, index=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
