"""SQLAlchemy models."""

from mealmash.models.ingredient import Ingredient
from mealmash.models.meal_plan import MealPlanEntry
from mealmash.models.pantry import PantryItem
from mealmash.models.recipe import Recipe, RecipeIngredient
from mealmash.models.shopping import ShoppingListItem
from mealmash.models.user import User

__all__ = [
    "User",
    "Ingredient",
    "PantryItem",
    "Recipe",
    "RecipeIngredient",
    "ShoppingListItem",
    "MealPlanEntry",
]
