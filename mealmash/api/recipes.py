"""Recipe API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from mealmash.api.dependencies import get_current_user, get_recipe_service, require_admin
from mealmash.models.enums import RecipeCategory
from mealmash.models.user import User
from mealmash.schemas.recipe import LinkCatalogResponse, RecipeResponse, RecipeScoreResponse
from mealmash.services.recipe_service import RecipeService

router = APIRouter(prefix="/api/v1/recipes", tags=["recipes"])


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    category: RecipeCategory | None = None,
):
    """List recipes, optionally filtered by category."""
    return service.list_recipes(category.value if category else None)


@router.get("/random", response_model=RecipeResponse)
def get_random_recipe(
    service: Annotated[RecipeService, Depends(get_recipe_service)],
    category: RecipeCategory | None = None,
):
    """Pick a random recipe for when you can't decide what to cook."""
    return service.random_recipe(category.value if category else None)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: int,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Get a specific recipe."""
    return service.get_recipe(recipe_id)


@router.get("/{recipe_id}/pantry-check", response_model=RecipeScoreResponse | None)
def check_recipe_against_pantry(
    recipe_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Show which of a recipe's ingredients the user has and which are missing."""
    score = service.check_against_pantry(recipe_id, current_user.id)
    if score is None:
        return None
    return RecipeScoreResponse.from_score(score)


@router.post("/{recipe_id}/link-catalog", response_model=LinkCatalogResponse)
def link_catalog_ingredients(
    recipe_id: int,
    admin: Annotated[User, Depends(require_admin)],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Rebuild a recipe's catalog rows from its legacy ingredient list."""
    return service.link_catalog_ingredients(recipe_id)
