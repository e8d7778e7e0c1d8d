"""Recipe service for catalog linking and per-recipe pantry checks."""

import logging
import random
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, selectinload

from mealmash.models.recipe import Recipe, RecipeIngredient
from mealmash.services.data_access import SqlAlchemyDataAccess
from mealmash.services.ingredient_service import IngredientService
from mealmash.services.matching import extract_ingredient_names
from mealmash.services.scoring import RecipeScore, RecipeScorer

logger = logging.getLogger(__name__)


class RecipeService:
    """Service for recipe-related operations."""

    def __init__(self, db: Session):
        self.db = db
        self.store = SqlAlchemyDataAccess(db)

    def list_recipes(self, category: str | None = None) -> list[Recipe]:
        return self.store.list_recipes(category=category)

    def get_recipe(self, recipe_id: int) -> Recipe:
        recipe = (
            self.db.query(Recipe)
            .options(
                selectinload(Recipe.recipe_ingredients).selectinload(RecipeIngredient.ingredient)
            )
            .filter(Recipe.id == recipe_id)
            .first()
        )
        if not recipe:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe

    def random_recipe(self, category: str | None = None) -> Recipe:
        """Pick one recipe at random, optionally within a category."""
        query = self.db.query(Recipe.id)
        if category:
            query = query.filter(Recipe.category == category)
        recipe_ids = [recipe_id for (recipe_id,) in query.order_by(Recipe.id)]
        if not recipe_ids:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No recipes found")
        return self.get_recipe(random.choice(recipe_ids))

    def check_against_pantry(self, recipe_id: int, user_id: int) -> RecipeScore | None:
        """Score one recipe against the user's pantry.

        Returns None when the recipe has no usable ingredient list.
        """
        recipe = self.get_recipe(recipe_id)
        pantry_items = self.store.list_pantry_items(user_id)
        return RecipeScorer(pantry_items).score(recipe)

    def link_catalog_ingredients(self, recipe_id: int) -> dict[str, Any]:
        """Rebuild a recipe's RecipeIngredient rows from its legacy ingredient field.

        Returns:
            {
                "recipe_id": int,
                "linked": [str],     # catalog names linked
                "unmatched": [str],  # legacy lines with no catalog entry
            }
        """
        recipe = self.get_recipe(recipe_id)
        names = extract_ingredient_names(recipe.ingredients)
        catalog = IngredientService(self.db)

        linked: list[str] = []
        unmatched: list[str] = []
        rows = []
        for name in names:
            ingredient = catalog.resolve_name(name)
            if ingredient is None:
                logger.info(f"Recipe {recipe.id}: no catalog match for '{name}'")
                unmatched.append(name)
                continue
            rows.append(RecipeIngredient(ingredient_id=ingredient.id, ingredient=ingredient))
            linked.append(ingredient.name)

        # Only replace existing rows when something resolved
        if rows:
            recipe.recipe_ingredients = rows
        self.db.commit()

        logger.info(
            f"Linked recipe {recipe.id} '{recipe.name}': "
            f"{len(linked)} linked, {len(unmatched)} unmatched"
        )
        return {"recipe_id": recipe.id, "linked": linked, "unmatched": unmatched}
