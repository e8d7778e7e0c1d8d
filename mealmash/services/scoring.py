"""Recipe scoring against a pantry snapshot."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from mealmash.services.matching import (
    CatalogMatchStrategy,
    IngredientRequirement,
    MatchStrategy,
    TextMatchStrategy,
    extract_ingredient_names,
)

logger = logging.getLogger(__name__)


@dataclass
class RecipeScore:
    """Matched/missing partition of one recipe's requirements."""

    recipe: Any
    mode: str  # "catalog" | "text"
    matched: list[IngredientRequirement] = field(default_factory=list)
    missing: list[IngredientRequirement] = field(default_factory=list)

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def missing_count(self) -> int:
        return len(self.missing)

    @property
    def total_count(self) -> int:
        return len(self.matched) + len(self.missing)

    @property
    def fraction(self) -> float:
        return self.matched_count / self.total_count

    @property
    def percentage(self) -> int:
        """Match fraction as a whole percentage, rounding halves up."""
        value = Decimal(self.matched_count * 100) / Decimal(self.total_count)
        return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def catalog_requirements(recipe: Any) -> list[IngredientRequirement]:
    """Requirements from structured RecipeIngredient rows.

    Rows whose catalog entry does not resolve are dropped: they point at a
    data-integrity problem, not at something the user is missing.
    """
    requirements = []
    for row in recipe.recipe_ingredients or []:
        ingredient = row.ingredient
        if ingredient is None:
            logger.warning(
                f"Recipe {recipe.id} references unknown ingredient {row.ingredient_id}, skipping"
            )
            continue
        requirements.append(
            IngredientRequirement(
                name=ingredient.name,
                ingredient_id=row.ingredient_id,
                quantity=row.quantity,
                unit=row.unit,
                category=ingredient.category,
            )
        )
    return requirements


def text_requirements(recipe: Any) -> list[IngredientRequirement]:
    """Requirements from the legacy free-text ingredient field."""
    names = extract_ingredient_names(recipe.ingredients)
    return [IngredientRequirement(name=name) for name in names]


class RecipeScorer:
    """Scores recipes against one pantry snapshot.

    Both strategies are built once per snapshot; each recipe is scored with the
    catalog strategy when it has structured ingredient rows, otherwise with
    the text strategy.
    """

    def __init__(self, pantry_items: Iterable[Any] | None):
        if pantry_items is None:
            raise ValueError("pantry snapshot is required (use an empty list for an empty pantry)")
        pantry_items = list(pantry_items)
        self.catalog_strategy = CatalogMatchStrategy(pantry_items)
        self.text_strategy = TextMatchStrategy(pantry_items)

    def strategy_for(self, recipe: Any) -> MatchStrategy:
        if recipe.recipe_ingredients:
            return self.catalog_strategy
        return self.text_strategy

    def requirements(self, recipe: Any) -> list[IngredientRequirement]:
        if recipe.recipe_ingredients:
            return catalog_requirements(recipe)
        return text_requirements(recipe)

    def score(self, recipe: Any) -> RecipeScore | None:
        """Partition a recipe's requirements into matched and missing.

        Returns None for recipes without any resolvable requirement; they are
        not candidates at all.
        """
        if recipe is None:
            raise ValueError("recipe is required")

        requirements = self.requirements(recipe)
        if not requirements:
            return None

        strategy = self.strategy_for(recipe)
        result = RecipeScore(recipe=recipe, mode=strategy.mode)
        for requirement in requirements:
            if strategy.matches(requirement):
                result.matched.append(requirement)
            else:
                result.missing.append(requirement)
        return result


def score_recipe(recipe: Any, pantry_items: Iterable[Any] | None) -> RecipeScore | None:
    """Score a single recipe against a pantry snapshot."""
    return RecipeScorer(pantry_items).score(recipe)
