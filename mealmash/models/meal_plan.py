"""Meal plan entry model."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mealmash.database import Base
from mealmash.models.mixins import TimestampMixin


class MealPlanEntry(Base, TimestampMixin):
    """A recipe scheduled for a meal slot on a given day."""

    __tablename__ = "meal_plan_entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    planned_date = Column(Date, nullable=False, index=True)
    meal_type = Column(String(20), nullable=False)  # MealType value

    # Relationships
    user = relationship("User", backref="meal_plan_entries")
    recipe = relationship("Recipe")
