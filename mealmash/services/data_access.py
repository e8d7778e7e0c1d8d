"""Data-access interface consumed by the matching engine.

The engine never talks to the database directly; it receives an object
implementing ``DataAccess``. ``SqlAlchemyDataAccess`` is the production
implementation bound to one session.
"""

import logging
from typing import Any, Protocol

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session, selectinload

from mealmash.models.ingredient import Ingredient
from mealmash.models.pantry import PantryItem
from mealmash.models.recipe import Recipe, RecipeIngredient
from mealmash.models.shopping import ShoppingListItem
from mealmash.services.quantity import combine_quantities

logger = logging.getLogger(__name__)


def normalize_item_name(name: str) -> str:
    """Key used for per-owner item identity on lists and in the pantry."""
    return name.lower().strip()


class DataAccess(Protocol):
    """Collaborator interface for pantry, recipes, catalog and shopping list."""

    def list_pantry_items(self, owner_id: int) -> list[Any]: ...

    def list_recipes(self, category: str | None = None) -> list[Any]: ...

    def lookup_ingredient(self, ingredient_id: int) -> Any | None: ...

    def search_ingredients(
        self, query: str, limit: int = 20, include_disabled: bool = False
    ) -> list[Any]: ...

    def find_unpurchased(self, owner_id: int, name: str) -> Any | None: ...

    def insert_shopping_item(
        self, owner_id: int, name: str, quantity: str, ingredient_id: int | None = None
    ) -> Any: ...

    def update_quantity(self, item_id: int, quantity: str) -> Any: ...

    def upsert_pantry_item(
        self,
        owner_id: int,
        ingredient_id: int | None,
        quantity_delta: str,
        name: str | None = None,
    ) -> Any: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


def ingredient_matches_query(ingredient: Ingredient, query: str) -> bool:
    """Case-insensitive substring match on name or any alias."""
    needle = query.lower().strip()
    if needle in ingredient.name.lower():
        return True
    return any(needle in alias.lower() for alias in ingredient.aliases or [])


class SqlAlchemyDataAccess:
    """``DataAccess`` backed by a SQLAlchemy session.

    Writes are flushed but not committed; callers own the transaction boundary.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_pantry_items(self, owner_id: int) -> list[PantryItem]:
        return (
            self.db.query(PantryItem)
            .filter(PantryItem.user_id == owner_id)
            .order_by(PantryItem.created_at.desc(), PantryItem.id.desc())
            .all()
        )

    def list_recipes(self, category: str | None = None) -> list[Recipe]:
        query = self.db.query(Recipe).options(
            selectinload(Recipe.recipe_ingredients).selectinload(RecipeIngredient.ingredient)
        )
        if category:
            query = query.filter(Recipe.category == category)
        return query.order_by(Recipe.id).all()

    def lookup_ingredient(self, ingredient_id: int) -> Ingredient | None:
        return self.db.query(Ingredient).filter(Ingredient.id == ingredient_id).first()

    def search_ingredients(
        self, query: str, limit: int = 20, include_disabled: bool = False
    ) -> list[Ingredient]:
        pattern = f"%{query.strip()}%"
        candidates = self.db.query(Ingredient).filter(
            or_(
                Ingredient.name.ilike(pattern),
                cast(Ingredient.aliases, String).ilike(pattern),
            )
        )
        if not include_disabled:
            candidates = candidates.filter(Ingredient.is_enabled.is_(True))

        # The JSON-as-text filter is coarse; re-check aliases element-wise
        results = [
            ingredient
            for ingredient in candidates.order_by(Ingredient.name).all()
            if ingredient_matches_query(ingredient, query)
        ]
        return results[:limit]

    def find_unpurchased(self, owner_id: int, name: str) -> ShoppingListItem | None:
        return (
            self.db.query(ShoppingListItem)
            .filter(
                ShoppingListItem.user_id == owner_id,
                ShoppingListItem.normalized_name == normalize_item_name(name),
                ShoppingListItem.is_purchased.is_(False),
            )
            .first()
        )

    def insert_shopping_item(
        self, owner_id: int, name: str, quantity: str, ingredient_id: int | None = None
    ) -> ShoppingListItem:
        item = ShoppingListItem(
            user_id=owner_id,
            item_name=name.strip(),
            normalized_name=normalize_item_name(name),
            quantity=quantity,
            ingredient_id=ingredient_id,
            is_purchased=False,
        )
        self.db.add(item)
        self.db.flush()  # Surface unique-index conflicts now, get item.id
        return item

    def update_quantity(self, item_id: int, quantity: str) -> ShoppingListItem:
        item = self.db.query(ShoppingListItem).filter(ShoppingListItem.id == item_id).one()
        item.quantity = quantity
        self.db.flush()
        return item

    def upsert_pantry_item(
        self,
        owner_id: int,
        ingredient_id: int | None,
        quantity_delta: str,
        name: str | None = None,
    ) -> PantryItem:
        """Add a quantity to the owner's pantry, creating the item if needed.

        Existing items are found by catalog id when one is given, otherwise by
        normalized name.
        """
        query = self.db.query(PantryItem).filter(PantryItem.user_id == owner_id)
        if ingredient_id is not None:
            existing = query.filter(PantryItem.ingredient_id == ingredient_id).first()
        else:
            existing = None
        if existing is None and name:
            existing = query.filter(PantryItem.normalized_name == normalize_item_name(name)).first()

        if existing:
            existing.quantity = combine_quantities(existing.quantity, quantity_delta, "sum")
            if existing.ingredient_id is None:
                existing.ingredient_id = ingredient_id
            self.db.flush()
            return existing

        ingredient = self.lookup_ingredient(ingredient_id) if ingredient_id is not None else None
        display_name = name or (ingredient.name if ingredient else None)
        if not display_name:
            raise ValueError("pantry item needs a name or a resolvable ingredient_id")

        item = PantryItem(
            user_id=owner_id,
            name=display_name,
            normalized_name=normalize_item_name(display_name),
            category=ingredient.category if ingredient else None,
            quantity=quantity_delta or "1",
            ingredient_id=ingredient_id,
        )
        self.db.add(item)
        self.db.flush()
        return item

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
