"""Pantry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from mealmash.api.dependencies import get_current_user
from mealmash.database import get_db
from mealmash.models.ingredient import Ingredient
from mealmash.models.pantry import PantryItem
from mealmash.models.user import User
from mealmash.schemas.pantry import PantryItemCreate, PantryItemResponse, PantryItemUpdate
from mealmash.services.data_access import SqlAlchemyDataAccess, normalize_item_name

router = APIRouter(prefix="/api/v1/pantry", tags=["pantry"])


def get_user_pantry_item(db: Session, item_id: int, user: User) -> PantryItem:
    """Get a pantry item that belongs to the user."""
    item = (
        db.query(PantryItem)
        .filter(PantryItem.id == item_id, PantryItem.user_id == user.id)
        .first()
    )
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pantry item not found")
    return item


def ensure_ingredient_exists(db: Session, ingredient_id: int | None) -> None:
    if ingredient_id is None:
        return
    if not db.query(Ingredient).filter(Ingredient.id == ingredient_id).first():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Ingredient not found")


@router.get("", response_model=list[PantryItemResponse])
def list_pantry_items(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """List the current user's pantry, newest first."""
    return SqlAlchemyDataAccess(db).list_pantry_items(current_user.id)


@router.post("", response_model=PantryItemResponse, status_code=status.HTTP_201_CREATED)
def create_pantry_item(
    item_data: PantryItemCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Add an item to the pantry."""
    ensure_ingredient_exists(db, item_data.ingredient_id)
    item = PantryItem(
        user_id=current_user.id,
        name=item_data.name.strip(),
        normalized_name=normalize_item_name(item_data.name),
        category=item_data.category,
        quantity=(item_data.quantity or "").strip() or "1",
        ingredient_id=item_data.ingredient_id,
    )
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@router.put("/{item_id}", response_model=PantryItemResponse)
def update_pantry_item(
    item_id: int,
    item_data: PantryItemUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a pantry item."""
    item = get_user_pantry_item(db, item_id, current_user)

    if item_data.name is not None:
        item.name = item_data.name.strip()
        item.normalized_name = normalize_item_name(item_data.name)
    if item_data.category is not None:
        item.category = item_data.category if item_data.category else None
    if item_data.quantity is not None:
        item.quantity = item_data.quantity
    if item_data.ingredient_id is not None:
        ensure_ingredient_exists(db, item_data.ingredient_id)
        item.ingredient_id = item_data.ingredient_id

    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_item(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Remove an item from the pantry."""
    item = get_user_pantry_item(db, item_id, current_user)
    db.delete(item)
    db.commit()
