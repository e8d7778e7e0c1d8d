"""Ingredient catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from mealmash.api.dependencies import get_current_user, get_ingredient_service, require_admin
from mealmash.models.enums import IngredientCategory
from mealmash.models.user import User
from mealmash.schemas.ingredient import (
    IngredientAliasCreate,
    IngredientCreate,
    IngredientResponse,
)
from mealmash.services.ingredient_service import IngredientService

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


@router.get("", response_model=list[IngredientResponse])
def list_ingredients(
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
    q: str | None = None,
    category: IngredientCategory | None = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
):
    """Search the catalog by name/alias, or list it (optionally by category)."""
    if q:
        return service.search(q, limit=limit)
    return service.list_by_category(category.value if category else None)


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
def submit_ingredient(
    data: IngredientCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    """Submit a new catalog ingredient (rate limited per user)."""
    return service.submit(data.name, data.category.value, current_user.id, data.aliases)


@router.post("/{ingredient_id}/aliases", response_model=IngredientResponse)
def add_alias(
    ingredient_id: int,
    data: IngredientAliasCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    """Add an alternate name used by search."""
    return service.add_alias(ingredient_id, data.alias)


@router.post("/{ingredient_id}/disable", response_model=IngredientResponse)
def disable_ingredient(
    ingredient_id: int,
    admin: Annotated[User, Depends(require_admin)],
    service: Annotated[IngredientService, Depends(get_ingredient_service)],
):
    """Hide a flagged ingredient from search."""
    return service.disable(ingredient_id)
