"""Weekly meal plan service."""

import logging
from datetime import date, timedelta

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from mealmash.models.enums import MealType
from mealmash.models.meal_plan import MealPlanEntry
from mealmash.models.recipe import Recipe

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


def week_of(day: date) -> list[date]:
    """Monday-first dates of the week containing ``day``."""
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]


class MealPlanService:
    """Service for scheduling recipes into meal slots."""

    def __init__(self, db: Session):
        self.db = db

    def list_week(self, user_id: int, day: date) -> list[MealPlanEntry]:
        week = week_of(day)
        return (
            self.db.query(MealPlanEntry)
            .filter(
                MealPlanEntry.user_id == user_id,
                MealPlanEntry.planned_date >= week[0],
                MealPlanEntry.planned_date <= week[-1],
            )
            .order_by(MealPlanEntry.planned_date, MealPlanEntry.id)
            .all()
        )

    def add_entry(
        self, user_id: int, recipe_id: int, planned_date: date, meal_type: str
    ) -> MealPlanEntry:
        meal_type = MealType(meal_type).value
        recipe = self.db.query(Recipe).filter(Recipe.id == recipe_id).first()
        if not recipe:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")

        entry = MealPlanEntry(
            user_id=user_id,
            recipe_id=recipe_id,
            planned_date=planned_date,
            meal_type=meal_type,
        )
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        logger.info(f"User {user_id} planned recipe {recipe_id} for {planned_date} {meal_type}")
        return entry

    def remove_entry(self, user_id: int, entry_id: int) -> None:
        entry = (
            self.db.query(MealPlanEntry)
            .filter(MealPlanEntry.id == entry_id, MealPlanEntry.user_id == user_id)
            .first()
        )
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Meal plan entry not found",
            )
        self.db.delete(entry)
        self.db.commit()
