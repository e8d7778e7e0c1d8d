"""Meal plan API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, status

from mealmash.api.dependencies import get_current_user, get_meal_plan_service
from mealmash.models.user import User
from mealmash.schemas.meal_plan import (
    MealPlanEntryCreate,
    MealPlanEntryResponse,
    MealPlanWeekResponse,
)
from mealmash.services.meal_plan_service import MealPlanService, week_of

router = APIRouter(prefix="/api/v1/meal-plan", tags=["meal-plan"])


@router.get("", response_model=MealPlanWeekResponse)
def get_week(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MealPlanService, Depends(get_meal_plan_service)],
    day: date | None = None,
):
    """Entries of the week containing ``day`` (default: today)."""
    day = day or date.today()
    week = week_of(day)
    return MealPlanWeekResponse(
        week_start=week[0],
        week_end=week[-1],
        entries=[
            MealPlanEntryResponse.model_validate(entry)
            for entry in service.list_week(current_user.id, day)
        ],
    )


@router.post("", response_model=MealPlanEntryResponse, status_code=status.HTTP_201_CREATED)
def add_entry(
    data: MealPlanEntryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MealPlanService, Depends(get_meal_plan_service)],
):
    """Schedule a recipe into a meal slot."""
    return service.add_entry(
        current_user.id, data.recipe_id, data.planned_date, data.meal_type.value
    )


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_entry(
    entry_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[MealPlanService, Depends(get_meal_plan_service)],
):
    """Remove a scheduled meal."""
    service.remove_entry(current_user.id, entry_id)
