"""Enums for model fields."""

from enum import Enum


class IngredientCategory(str, Enum):
    """Fixed set of catalog ingredient categories."""

    PRODUCE = "Produce"
    DAIRY = "Dairy"
    MEAT = "Meat"
    SEAFOOD = "Seafood"
    GRAINS = "Grains"
    SPICES = "Spices"
    CONDIMENTS = "Condiments"
    FROZEN = "Frozen"
    CANNED = "Canned"
    OTHER = "Other"


class RecipeCategory(str, Enum):
    """Meal category of a recipe."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    DESSERT = "dessert"


class MealType(str, Enum):
    """Slot in a day of the meal plan."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
