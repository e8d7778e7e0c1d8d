"""Ingredient catalog search, submission and moderation."""

import logging
from datetime import UTC, datetime, timedelta

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mealmash.config import get_settings
from mealmash.models.enums import IngredientCategory
from mealmash.models.ingredient import Ingredient
from mealmash.services.data_access import SqlAlchemyDataAccess
from mealmash.services.matching import normalize

logger = logging.getLogger(__name__)

SUBMISSION_WINDOW = timedelta(hours=1)


class IngredientService:
    """Service for the canonical ingredient catalog."""

    def __init__(self, db: Session):
        self.db = db
        self.store = SqlAlchemyDataAccess(db)

    def get(self, ingredient_id: int) -> Ingredient:
        ingredient = self.store.lookup_ingredient(ingredient_id)
        if not ingredient:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Ingredient not found",
            )
        return ingredient

    def search(
        self, query: str, limit: int = 20, include_disabled: bool = False
    ) -> list[Ingredient]:
        """Case-insensitive substring search over names and aliases."""
        if not query.strip():
            return []
        return self.store.search_ingredients(query, limit, include_disabled)

    def list_by_category(self, category: str | None = None) -> list[Ingredient]:
        query = self.db.query(Ingredient).filter(Ingredient.is_enabled.is_(True))
        if category:
            query = query.filter(Ingredient.category == category)
            return query.order_by(Ingredient.name).all()
        return query.order_by(Ingredient.category, Ingredient.name).all()

    def submit(
        self,
        name: str,
        category: str,
        user_id: int,
        aliases: list[str] | None = None,
    ) -> Ingredient:
        """Add a user-submitted ingredient to the catalog.

        Submissions are limited per user per rolling hour.
        """
        name = name.strip()
        category = IngredientCategory(category).value

        limit = get_settings().ingredient_submissions_per_hour
        since = datetime.now(UTC) - SUBMISSION_WINDOW
        recent = (
            self.db.query(func.count(Ingredient.id))
            .filter(Ingredient.created_by == user_id, Ingredient.created_at >= since)
            .scalar()
        )
        if recent >= limit:
            logger.warning(f"User {user_id} hit the ingredient submission limit ({limit}/hour)")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"At most {limit} ingredient submissions per hour",
            )

        existing = (
            self.db.query(Ingredient).filter(func.lower(Ingredient.name) == name.lower()).first()
        )
        if existing:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Ingredient '{existing.name}' already exists",
            )

        ingredient = Ingredient(
            name=name,
            category=category,
            aliases=[alias.strip() for alias in aliases or [] if alias.strip()],
            is_enabled=True,
            created_by=user_id,
        )
        self.db.add(ingredient)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Ingredient '{name}' already exists",
            ) from None
        self.db.refresh(ingredient)
        logger.info(f"User {user_id} submitted ingredient '{name}' ({category})")
        return ingredient

    def disable(self, ingredient_id: int) -> Ingredient:
        """Hide a flagged ingredient from search. Catalog rows are never deleted."""
        ingredient = self.get(ingredient_id)
        ingredient.is_enabled = False
        self.db.commit()
        self.db.refresh(ingredient)
        logger.info(f"Disabled ingredient {ingredient_id} ('{ingredient.name}')")
        return ingredient

    def add_alias(self, ingredient_id: int, alias: str) -> Ingredient:
        ingredient = self.get(ingredient_id)
        alias = alias.strip()
        current = list(ingredient.aliases or [])
        if alias and alias.lower() not in (a.lower() for a in current):
            # Reassign so the JSON column is flagged dirty
            ingredient.aliases = [*current, alias]
            self.db.commit()
            self.db.refresh(ingredient)
        return ingredient

    def resolve_name(self, text: str) -> Ingredient | None:
        """Best enabled catalog entry for a free-text ingredient line.

        Tries normalized name equality, then alias equality, then the longest
        catalog name contained in the text ("2 cups flour" -> Flour).
        """
        normalized = normalize(text)
        if not normalized:
            return None

        candidates = (
            self.db.query(Ingredient)
            .filter(Ingredient.is_enabled.is_(True))
            .order_by(Ingredient.id)
            .all()
        )

        for ingredient in candidates:
            if normalize(ingredient.name) == normalized:
                return ingredient

        for ingredient in candidates:
            if any(normalize(alias) == normalized for alias in ingredient.aliases or []):
                return ingredient

        contained = [
            ingredient
            for ingredient in candidates
            if normalize(ingredient.name) and normalize(ingredient.name) in normalized
        ]
        if contained:
            return max(contained, key=lambda ingredient: len(ingredient.name))
        return None
