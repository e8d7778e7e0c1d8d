"""Pydantic schemas for API requests and responses."""

from mealmash.schemas.ingredient import IngredientCreate, IngredientResponse
from mealmash.schemas.meal_plan import MealPlanEntryCreate, MealPlanEntryResponse
from mealmash.schemas.pantry import PantryItemCreate, PantryItemResponse, PantryItemUpdate
from mealmash.schemas.recipe import RecipeResponse, RecipeScoreResponse, SuggestionsResponse
from mealmash.schemas.shopping import ReconcileRequest, ReconcileResponse, ShoppingListItemResponse

__all__ = [
    "IngredientCreate",
    "IngredientResponse",
    "MealPlanEntryCreate",
    "MealPlanEntryResponse",
    "PantryItemCreate",
    "PantryItemUpdate",
    "PantryItemResponse",
    "RecipeResponse",
    "RecipeScoreResponse",
    "SuggestionsResponse",
    "ReconcileRequest",
    "ReconcileResponse",
    "ShoppingListItemResponse",
]
