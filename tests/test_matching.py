"""Tests for ingredient normalization and matching strategies."""

import pytest

from mealmash.models.pantry import PantryItem
from mealmash.services.matching import (
    CatalogMatchStrategy,
    IngredientRequirement,
    TextMatchStrategy,
    extract_ingredient_names,
    is_catalog_match,
    is_text_match,
    normalize,
)


def pantry(name, ingredient_id=None):
    return PantryItem(name=name, ingredient_id=ingredient_id)


# --- normalize ---


def test_normalize_lowercases_and_strips_punctuation():
    assert normalize("Olive Oil!!") == "olive oil"
    assert normalize("  Jalapeño-Peppers (diced) ") == "jalapeopeppers diced"


def test_normalize_is_case_insensitive():
    assert normalize("Olive Oil!!") == normalize("olive oil")


@pytest.mark.parametrize("text", ["Olive Oil!!", "  2 Cups, FLOUR ", "", "¡¡!!", "a  b"])
def test_normalize_is_idempotent(text):
    assert normalize(normalize(text)) == normalize(text)


def test_normalize_handles_none():
    assert normalize(None) == ""


# --- text match ---


def test_text_match_exact_after_normalization():
    assert is_text_match("Olive Oil", "olive oil!")


def test_text_match_substring_either_way():
    assert is_text_match("garlic", "3 garlic cloves")
    assert is_text_match("extra virgin olive oil", "olive oil")


def test_text_match_word_overlap():
    # "green onions" and "2 onions chopped" share the token "onions"
    assert is_text_match("Green Onions", "2 onions, chopped")


def test_text_match_token_containment():
    assert is_text_match("tomatoes", "1 tomato")
    assert is_text_match("chicken breasts", "diced chicken")


def test_text_match_ignores_short_tokens():
    # "of" and "a" are too short to count as overlap
    assert not is_text_match("cup of tea", "a pinch of salt")


def test_text_match_rejects_unrelated():
    assert not is_text_match("Rice", "Black beans")


@pytest.mark.parametrize("name", ["salt", "olive oil", "green onions", "2 eggs"])
def test_text_match_is_reflexive(name):
    assert is_text_match(name, name)


def test_text_match_empty_names_never_match():
    assert not is_text_match("", "salt")
    assert not is_text_match("!!!", "salt")
    assert not is_text_match("salt", None)


# --- catalog match ---


def test_catalog_match_is_exact_identity():
    assert is_catalog_match(7, 7)
    assert not is_catalog_match(7, 8)
    assert not is_catalog_match(None, 7)


def test_catalog_strategy_uses_pantry_ids():
    strategy = CatalogMatchStrategy([pantry("Tomatoes", 1), pantry("Eggs", 3)])
    assert strategy.matches(IngredientRequirement(name="Tomatoes", ingredient_id=1))
    assert not strategy.matches(IngredientRequirement(name="Flour", ingredient_id=2))


def test_catalog_strategy_ignores_names_when_both_sides_have_ids():
    strategy = CatalogMatchStrategy([pantry("Flour tortillas", 9)])
    assert not strategy.matches(IngredientRequirement(name="Flour", ingredient_id=2))


def test_catalog_strategy_falls_back_to_text_for_untagged_pantry_items():
    strategy = CatalogMatchStrategy([pantry("all purpose flour")])
    assert strategy.matches(IngredientRequirement(name="Flour", ingredient_id=2))


def test_text_strategy_matches_any_pantry_name():
    strategy = TextMatchStrategy([pantry("Salt"), pantry("Green Onions")])
    assert strategy.matches(IngredientRequirement(name="2 onions, chopped"))
    assert not strategy.matches(IngredientRequirement(name="1 cup milk"))


# --- extraction ---


def test_extract_from_comma_separated_string():
    assert extract_ingredient_names("2 eggs, 1 cup flour , salt") == [
        "2 eggs",
        "1 cup flour",
        "salt",
    ]


def test_extract_from_mixed_list():
    raw = ["2 eggs", {"item": "flour", "quantity": "1 cup"}, {"name": "salt"}, {"amount": 3}, 42]
    assert extract_ingredient_names(raw) == ["2 eggs", "flour", "salt"]


def test_extract_drops_empty_pieces():
    assert extract_ingredient_names("eggs,, ,salt") == ["eggs", "salt"]


@pytest.mark.parametrize("raw", [None, "", [], 42, {"item": "eggs"}])
def test_extract_degrades_to_empty(raw):
    assert extract_ingredient_names(raw) == []
