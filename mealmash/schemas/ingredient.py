"""Ingredient catalog schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mealmash.models.enums import IngredientCategory


class IngredientCreate(BaseModel):
    """Submit a new catalog ingredient."""

    name: str = Field(..., min_length=1, max_length=255)
    category: IngredientCategory = IngredientCategory.OTHER
    aliases: list[str] = []


class IngredientAliasCreate(BaseModel):
    """Add an alias to an ingredient."""

    alias: str = Field(..., min_length=1, max_length=255)


class IngredientResponse(BaseModel):
    """Catalog ingredient response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    aliases: list[str]
    is_enabled: bool
    created_by: int | None
    created_at: datetime
