"""Shopping list schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ShoppingListItemResponse(BaseModel):
    """Shopping list item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    item_name: str
    quantity: str
    is_purchased: bool
    ingredient_id: int | None
    created_at: datetime


class MissingIngredient(BaseModel):
    """Ingredient to add to the shopping list."""

    name: str = Field(..., min_length=1, max_length=255)
    ingredient_id: int | None = None
    quantity: str | None = Field(None, max_length=100)
    unit: str | None = Field(None, max_length=50)


class ReconcileRequest(BaseModel):
    """Add missing ingredients, or all missing ingredients of a recipe."""

    ingredients: list[MissingIngredient] = []
    recipe_id: int | None = None


class ReconcileOutcomeResponse(BaseModel):
    """What happened to one ingredient."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    action: str
    item_id: int | None
    quantity: str | None
    error: str | None


class ReconcileResponse(BaseModel):
    """Per-ingredient outcome of a reconcile request."""

    ok: bool
    succeeded: list[ReconcileOutcomeResponse]
    failed: list[ReconcileOutcomeResponse]


class PurchasedUpdate(BaseModel):
    """Mark an item purchased or not."""

    is_purchased: bool


class MoveToPantryResponse(BaseModel):
    """Result of moving purchased items into the pantry."""

    moved: int
