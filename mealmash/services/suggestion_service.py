""""What can I make" suggestions ranked by pantry coverage."""

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

from mealmash.config import get_settings
from mealmash.services.data_access import DataAccess
from mealmash.services.scoring import RecipeScore, RecipeScorer

logger = logging.getLogger(__name__)


class AdmissionPolicy(str, Enum):
    """How a scored recipe qualifies for the suggestion list.

    FRACTION admits at a minimum match percentage and ranks by percentage.
    COUNT admits at a minimum number of matched ingredients and ranks by that
    count, which favours long ingredient lists.
    """

    FRACTION = "fraction"
    COUNT = "count"


class SuggestionService:
    """Ranks a recipe catalog against a pantry snapshot."""

    def __init__(
        self,
        policy: AdmissionPolicy | str | None = None,
        min_match_percentage: int | None = None,
        min_matched_count: int | None = None,
    ):
        settings = get_settings()
        self.policy = AdmissionPolicy(policy or settings.suggestion_policy)
        self.min_match_percentage = (
            settings.min_match_percentage if min_match_percentage is None else min_match_percentage
        )
        self.min_matched_count = (
            settings.min_matched_count if min_matched_count is None else min_matched_count
        )

    def admits(self, score: RecipeScore) -> bool:
        if self.policy == AdmissionPolicy.COUNT:
            return score.matched_count >= self.min_matched_count
        return score.percentage >= self.min_match_percentage

    def sort_key(self, score: RecipeScore) -> int:
        if self.policy == AdmissionPolicy.COUNT:
            return score.matched_count
        return score.percentage

    def suggest(
        self,
        recipes: Iterable[Any] | None,
        pantry_items: Iterable[Any] | None,
        category: str | None = None,
    ) -> list[RecipeScore]:
        """Score every recipe and return the admitted ones, best first.

        Ties keep the order of ``recipes``, so identical input always gives
        identical output.
        """
        if recipes is None:
            raise ValueError("recipe list is required (use an empty list for no recipes)")

        scorer = RecipeScorer(pantry_items)
        suggestions = []
        for recipe in recipes:
            if category and recipe.category != category:
                continue
            score = scorer.score(recipe)
            if score is None:
                continue
            if self.admits(score):
                suggestions.append(score)

        # sorted() is stable, equal keys keep catalog order
        return sorted(suggestions, key=self.sort_key, reverse=True)

    def suggest_for_user(
        self,
        data_access: DataAccess,
        user_id: int,
        category: str | None = None,
    ) -> list[RecipeScore]:
        """Load the user's pantry and the recipe catalog, then rank."""
        pantry_items = data_access.list_pantry_items(user_id)
        recipes = data_access.list_recipes(category=category)
        suggestions = self.suggest(recipes, pantry_items)
        logger.info(
            f"Suggested {len(suggestions)} of {len(recipes)} recipes for user {user_id} "
            f"(policy={self.policy.value})"
        )
        return suggestions
