"""Shopping list API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from mealmash.api.dependencies import get_current_user, get_recipe_service, get_shopping_service
from mealmash.models.user import User
from mealmash.schemas.shopping import (
    MoveToPantryResponse,
    PurchasedUpdate,
    ReconcileOutcomeResponse,
    ReconcileRequest,
    ReconcileResponse,
    ShoppingListItemResponse,
)
from mealmash.services.recipe_service import RecipeService
from mealmash.services.shopping_service import ShoppingService

router = APIRouter(prefix="/api/v1/shopping-list", tags=["shopping-list"])


@router.get("", response_model=list[ShoppingListItemResponse])
def list_shopping_items(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ShoppingService, Depends(get_shopping_service)],
):
    """List the shopping list, unpurchased first."""
    return service.list_items(current_user.id)


@router.post("/reconcile", response_model=ReconcileResponse)
def reconcile_missing_ingredients(
    request: ReconcileRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ShoppingService, Depends(get_shopping_service)],
    recipe_service: Annotated[RecipeService, Depends(get_recipe_service)],
):
    """Add missing ingredients to the shopping list, merging with existing rows.

    With ``recipe_id`` the missing ingredients of that recipe (against the
    user's pantry) are added as well.
    """
    missing = [ingredient.model_dump() for ingredient in request.ingredients]
    if request.recipe_id is not None:
        score = recipe_service.check_against_pantry(request.recipe_id, current_user.id)
        if score is not None:
            missing.extend(score.missing)

    result = service.reconcile(missing, current_user.id)
    return ReconcileResponse(
        ok=result.ok,
        succeeded=[ReconcileOutcomeResponse.model_validate(o) for o in result.succeeded],
        failed=[ReconcileOutcomeResponse.model_validate(o) for o in result.failed],
    )


@router.patch("/{item_id}", response_model=ShoppingListItemResponse)
def set_purchased(
    item_id: int,
    data: PurchasedUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ShoppingService, Depends(get_shopping_service)],
):
    """Check or uncheck an item.

    Unchecking an item that is already back on the list merges the two rows.
    """
    return service.set_purchased(current_user.id, item_id, data.is_purchased)


@router.post("/move-to-pantry", response_model=MoveToPantryResponse)
def move_purchased_to_pantry(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ShoppingService, Depends(get_shopping_service)],
):
    """Move purchased items into the pantry."""
    return MoveToPantryResponse(moved=service.move_purchased_to_pantry(current_user.id))
