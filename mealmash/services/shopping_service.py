"""Shopping list reconciliation and pantry restocking."""

import logging
import threading
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from mealmash.config import get_settings
from mealmash.models.shopping import ShoppingListItem
from mealmash.services.data_access import DataAccess, SqlAlchemyDataAccess
from mealmash.services.quantity import DEFAULT_QUANTITY, MergePolicy, combine_quantities

logger = logging.getLogger(__name__)


class OwnerLocks:
    """Registry of one lock per owner.

    Reconcile batches for the same owner run one at a time so the
    look-up-then-insert sequence cannot interleave.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[Any, threading.Lock] = defaultdict(threading.Lock)

    def for_owner(self, owner_id: Any) -> threading.Lock:
        with self._guard:
            return self._locks[owner_id]


_owner_locks = OwnerLocks()


@dataclass
class ReconcileOutcome:
    """What happened to one missing ingredient."""

    name: str
    action: str  # "inserted" | "merged" | "failed"
    item_id: int | None = None
    quantity: str | None = None
    error: str | None = None


@dataclass
class ReconcileResult:
    """Per-ingredient outcomes of a reconcile batch."""

    outcomes: list[ReconcileOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[ReconcileOutcome]:
        return [o for o in self.outcomes if o.action != "failed"]

    @property
    def failed(self) -> list[ReconcileOutcome]:
        return [o for o in self.outcomes if o.action == "failed"]

    @property
    def ok(self) -> bool:
        return not self.failed


def _field(ingredient: Any, name: str) -> Any:
    if isinstance(ingredient, dict):
        return ingredient.get(name)
    return getattr(ingredient, name, None)


class ShoppingListReconciler:
    """Merges missing ingredients into an owner's shopping list."""

    def __init__(
        self,
        store: DataAccess,
        merge_policy: MergePolicy | None = None,
        locks: OwnerLocks | None = None,
    ):
        self.store = store
        self.merge_policy = merge_policy or get_settings().quantity_merge_policy
        self.locks = locks or _owner_locks

    def reconcile(self, missing: Iterable[Any], owner_id: int) -> ReconcileResult:
        """Add each missing ingredient to the list, merging into unpurchased rows.

        Every ingredient is committed on its own. A storage failure is rolled
        back, reported in the result and does not stop the batch. Running the
        same batch twice never creates a second row for the same item name.
        """
        if missing is None:
            raise ValueError("missing ingredient list is required")

        result = ReconcileResult()
        with self.locks.for_owner(owner_id):
            for ingredient in missing:
                result.outcomes.append(self._reconcile_one(ingredient, owner_id))

        if result.failed:
            logger.warning(
                f"Reconcile for user {owner_id}: {len(result.succeeded)} ok, "
                f"{len(result.failed)} failed ({', '.join(o.name for o in result.failed)})"
            )
        else:
            logger.info(f"Reconciled {len(result.outcomes)} items for user {owner_id}")
        return result

    def _reconcile_one(self, ingredient: Any, owner_id: int) -> ReconcileOutcome:
        name = (_field(ingredient, "name") or "").strip()
        if not name:
            return ReconcileOutcome(name="", action="failed", error="ingredient has no name")

        quantity = (_field(ingredient, "quantity") or "").strip() or DEFAULT_QUANTITY
        unit = _field(ingredient, "unit")
        if unit and not quantity.lower().endswith(unit.lower()):
            quantity = f"{quantity} {unit}"
        ingredient_id = _field(ingredient, "ingredient_id")
        if ingredient_id is None:
            ingredient_id = _field(ingredient, "id")

        try:
            outcome = self._upsert(name, quantity, ingredient_id, owner_id)
            self.store.commit()
            return outcome
        except IntegrityError:
            # Another writer inserted the row between our lookup and insert
            self.store.rollback()
            try:
                outcome = self._upsert(name, quantity, ingredient_id, owner_id)
                self.store.commit()
                return outcome
            except SQLAlchemyError as e:
                self.store.rollback()
                logger.error(f"Failed to add '{name}' to shopping list for user {owner_id}: {e}")
                return ReconcileOutcome(name=name, action="failed", error=str(e))
        except SQLAlchemyError as e:
            self.store.rollback()
            logger.error(f"Failed to add '{name}' to shopping list for user {owner_id}: {e}")
            return ReconcileOutcome(name=name, action="failed", error=str(e))

    def _upsert(
        self, name: str, quantity: str, ingredient_id: Any, owner_id: int
    ) -> ReconcileOutcome:
        existing = self.store.find_unpurchased(owner_id, name)
        if existing:
            merged = combine_quantities(existing.quantity, quantity, self.merge_policy)
            item = self.store.update_quantity(existing.id, merged)
            return ReconcileOutcome(name=name, action="merged", item_id=item.id, quantity=merged)

        item = self.store.insert_shopping_item(owner_id, name, quantity, ingredient_id)
        return ReconcileOutcome(name=name, action="inserted", item_id=item.id, quantity=quantity)


class ShoppingService:
    """Shopping list operations backed by the database."""

    def __init__(self, db: Session, merge_policy: MergePolicy | None = None):
        self.db = db
        self.store = SqlAlchemyDataAccess(db)
        self.reconciler = ShoppingListReconciler(self.store, merge_policy)

    def list_items(self, user_id: int) -> list[ShoppingListItem]:
        return (
            self.db.query(ShoppingListItem)
            .filter(ShoppingListItem.user_id == user_id)
            .order_by(
                ShoppingListItem.is_purchased,
                ShoppingListItem.created_at.desc(),
                ShoppingListItem.id.desc(),
            )
            .all()
        )

    def reconcile(self, missing: Iterable[Any], user_id: int) -> ReconcileResult:
        return self.reconciler.reconcile(missing, user_id)

    def move_purchased_to_pantry(self, user_id: int) -> int:
        """Move every purchased item into the pantry and drop it from the list.

        Returns the number of items moved.
        """
        purchased = (
            self.db.query(ShoppingListItem)
            .filter(
                ShoppingListItem.user_id == user_id,
                ShoppingListItem.is_purchased.is_(True),
            )
            .order_by(ShoppingListItem.id)
            .all()
        )

        for item in purchased:
            self.store.upsert_pantry_item(
                user_id,
                item.ingredient_id,
                item.quantity,
                name=item.item_name,
            )
            self.db.delete(item)

        self.db.commit()
        logger.info(f"Moved {len(purchased)} purchased items to pantry for user {user_id}")
        return len(purchased)

    def set_purchased(self, user_id: int, item_id: int, is_purchased: bool) -> ShoppingListItem:
        """Check or uncheck an item and return the row that now holds it.

        Unchecking an item whose name is already on the list unpurchased merges
        its quantity into that row and drops this one.
        """
        item = (
            self.db.query(ShoppingListItem)
            .filter(ShoppingListItem.id == item_id, ShoppingListItem.user_id == user_id)
            .first()
        )
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
        name = item.item_name

        with self.reconciler.locks.for_owner(user_id):
            target = item
            if item.is_purchased and not is_purchased:
                existing = self.store.find_unpurchased(user_id, name)
                if existing and existing.id != item.id:
                    existing.quantity = combine_quantities(
                        existing.quantity, item.quantity, self.reconciler.merge_policy
                    )
                    self.db.delete(item)
                    target = existing
                    logger.info(
                        f"Merged unchecked item {item_id} into item {existing.id} "
                        f"for user {user_id}"
                    )
            if target is item:
                item.is_purchased = is_purchased

            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail=f"'{name}' is already on the shopping list",
                ) from None

        self.db.refresh(target)
        return target
