"""Ingredient matching between a pantry snapshot and recipe requirements.

Two strategies share one interface:

- ``CatalogMatchStrategy`` compares canonical ingredient ids (exact).
- ``TextMatchStrategy`` compares free-text names with normalized
  exact/substring/word-overlap heuristics (approximate, used for legacy data).
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

_NON_WORD_CHARS = re.compile(r"[^a-z0-9\s]")

# Tokens this short ("a", "of", "in") are ignored by word-overlap matching
MIN_TOKEN_LENGTH = 3


def normalize(text: str | None) -> str:
    """Canonicalize an ingredient name for fuzzy comparison.

    Lowercases, drops everything except ``a-z``, digits and whitespace, then trims.
    """
    if not text:
        return ""
    return _NON_WORD_CHARS.sub("", text.lower()).strip()


def _significant_tokens(normalized: str) -> list[str]:
    return [word for word in normalized.split() if len(word) >= MIN_TOKEN_LENGTH]


def is_text_match(pantry_name: str | None, recipe_ingredient_text: str | None) -> bool:
    """Check whether a pantry name and a recipe ingredient line name the same thing.

    Rules, first hit wins:
    1. normalized strings are equal
    2. one normalized string contains the other
    3. any significant token of one side equals, contains or is contained in
       a significant token of the other side

    Examples:
    - "Olive Oil" vs "olive oil!!" -> exact
    - "garlic" vs "3 garlic cloves" -> substring
    - "Green Onions" vs "2 onions, chopped" -> token "onions"
    """
    pantry = normalize(pantry_name)
    recipe = normalize(recipe_ingredient_text)

    # An empty name carries no information and would be a substring of everything
    if not pantry or not recipe:
        return False

    if pantry == recipe:
        return True

    if pantry in recipe or recipe in pantry:
        return True

    recipe_tokens = _significant_tokens(recipe)
    for pantry_word in _significant_tokens(pantry):
        for recipe_word in recipe_tokens:
            if pantry_word in recipe_word or recipe_word in pantry_word:
                return True

    return False


def is_catalog_match(pantry_ingredient_id: Any | None, recipe_ingredient_id: Any) -> bool:
    """Exact identity match on the canonical ingredient catalog."""
    return pantry_ingredient_id is not None and pantry_ingredient_id == recipe_ingredient_id


def _extract_name(entry: Any) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        value = entry.get("item") or entry.get("name")
    else:
        value = getattr(entry, "item", None) or getattr(entry, "name", None)
    return value if isinstance(value, str) else ""


def extract_ingredient_names(raw: Any) -> list[str]:
    """Pull ingredient names out of a legacy recipe ingredient field.

    Accepts a comma separated string or a sequence whose elements are strings
    or objects exposing ``item``/``name``. Anything unrecognised yields an empty
    list so one malformed recipe never breaks a scoring pass.
    """
    if not raw:
        return []

    if isinstance(raw, str):
        names = [piece.strip() for piece in raw.split(",")]
    elif isinstance(raw, (list, tuple)):
        names = [_extract_name(entry).strip() for entry in raw]
    else:
        logger.warning(f"Unrecognised legacy ingredient field of type {type(raw).__name__}")
        return []

    return [name for name in names if name]


@dataclass(frozen=True)
class IngredientRequirement:
    """One ingredient a recipe needs, in either data shape."""

    name: str
    ingredient_id: Any | None = None
    quantity: str | None = None
    unit: str | None = None
    category: str | None = None


class MatchStrategy(ABC):
    """Decides whether a pantry snapshot covers a recipe requirement.

    Instances bind one pantry snapshot so per-snapshot indexes are built once
    and reused for every recipe in a scoring pass.
    """

    mode: str

    @abstractmethod
    def matches(self, requirement: IngredientRequirement) -> bool:
        """Return True if the bound pantry has this requirement."""


class TextMatchStrategy(MatchStrategy):
    """Approximate matching on free-text names."""

    mode = "text"

    def __init__(self, pantry_items: Iterable[Any]):
        self.pantry_names = [item.name for item in pantry_items if item.name]

    def matches(self, requirement: IngredientRequirement) -> bool:
        return any(is_text_match(name, requirement.name) for name in self.pantry_names)


class CatalogMatchStrategy(MatchStrategy):
    """Exact matching on catalog ids.

    Pantry items without a catalog reference can only be compared by name, so
    they fall back to text matching against the requirement's catalog name.
    """

    mode = "catalog"

    def __init__(self, pantry_items: Iterable[Any]):
        self.pantry_ingredient_ids: set[Any] = set()
        untagged = []
        for item in pantry_items:
            if item.ingredient_id is not None:
                self.pantry_ingredient_ids.add(item.ingredient_id)
            else:
                untagged.append(item)
        self.untagged = TextMatchStrategy(untagged)

    def matches(self, requirement: IngredientRequirement) -> bool:
        if requirement.ingredient_id in self.pantry_ingredient_ids:
            return True
        return self.untagged.matches(requirement)
