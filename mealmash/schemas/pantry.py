"""Pantry schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PantryItemCreate(BaseModel):
    """Create a pantry item."""

    name: str = Field(..., min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    quantity: str | None = Field(None, max_length=100)
    ingredient_id: int | None = None


class PantryItemUpdate(BaseModel):
    """Update a pantry item."""

    name: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = None
    quantity: str | None = Field(None, max_length=100)
    ingredient_id: int | None = None


class PantryItemResponse(BaseModel):
    """Pantry item response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    normalized_name: str
    category: str | None
    quantity: str | None
    ingredient_id: int | None
    created_at: datetime
    updated_at: datetime
