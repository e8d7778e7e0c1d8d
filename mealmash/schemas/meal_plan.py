"""Meal plan schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from mealmash.models.enums import MealType


class MealPlanEntryCreate(BaseModel):
    """Schedule a recipe."""

    recipe_id: int
    planned_date: date
    meal_type: MealType


class MealPlanEntryResponse(BaseModel):
    """Meal plan entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    recipe_id: int
    planned_date: date
    meal_type: str


class MealPlanWeekResponse(BaseModel):
    """Entries of one Monday-first week."""

    week_start: date
    week_end: date
    entries: list[MealPlanEntryResponse]
