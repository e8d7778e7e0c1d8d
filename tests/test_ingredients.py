"""Tests for the ingredient catalog."""

import pytest
from fastapi import HTTPException

from mealmash.models.ingredient import Ingredient
from mealmash.services.ingredient_service import IngredientService


def test_search_matches_name_and_alias(db, catalog):
    service = IngredientService(db)

    assert [i.name for i in service.search("onion")] == ["Green Onions"]
    assert [i.name for i in service.search("SCALLION")] == ["Green Onions"]
    assert [i.name for i in service.search("o")] == [
        "Flour",
        "Green Onions",
        "Olive Oil",
        "Salt",
        "Tomatoes",
    ]


def test_search_with_blank_query_returns_nothing(db, catalog):
    assert IngredientService(db).search("   ") == []


def test_search_respects_limit(db, catalog):
    assert len(IngredientService(db).search("o", limit=2)) == 2


def test_disabled_ingredients_hidden_from_search(db, catalog):
    service = IngredientService(db)
    service.disable(catalog["salt"].id)

    assert service.search("salt") == []
    assert [i.name for i in service.search("salt", include_disabled=True)] == ["Salt"]
    assert db.query(Ingredient).filter_by(name="Salt").one().is_enabled is False


def test_alias_text_does_not_leak_across_entries(db):
    db.add(Ingredient(name="Butter", category="Dairy", aliases=["unsalted butter", "ghee"]))
    db.commit()

    # Matches the JSON text '["unsalted butter", "ghee"]' but no single alias
    assert IngredientService(db).search('r", "g') == []


def test_submit_ingredient(db, user):
    ingredient = IngredientService(db).submit("  Sumac ", "Spices", user.id, ["sumak", " "])

    assert ingredient.name == "Sumac"
    assert ingredient.category == "Spices"
    assert ingredient.aliases == ["sumak"]
    assert ingredient.created_by == user.id
    assert ingredient.is_enabled is True


def test_submit_duplicate_is_conflict(db, user, catalog):
    with pytest.raises(HTTPException) as exc:
        IngredientService(db).submit("flour", "Grains", user.id)
    assert exc.value.status_code == 409


def test_submit_rejects_unknown_category(db, user):
    with pytest.raises(ValueError):
        IngredientService(db).submit("Sumac", "Herbs & Stuff", user.id)


def test_submissions_are_rate_limited(db, user):
    service = IngredientService(db)
    for i in range(10):
        service.submit(f"Spice {i}", "Spices", user.id)

    with pytest.raises(HTTPException) as exc:
        service.submit("Spice 10", "Spices", user.id)
    assert exc.value.status_code == 429


def test_add_alias_is_case_insensitively_unique(db, catalog):
    service = IngredientService(db)
    eggs = catalog["eggs"]

    service.add_alias(eggs.id, "Large eggs")
    service.add_alias(eggs.id, "large EGGS")

    assert db.query(Ingredient).filter_by(id=eggs.id).one().aliases == ["egg", "Large eggs"]
    assert [i.name for i in service.search("large")] == ["Eggs"]


def test_get_unknown_ingredient_is_not_found(db):
    with pytest.raises(HTTPException) as exc:
        IngredientService(db).get(12345)
    assert exc.value.status_code == 404


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Flour", "Flour"),
        ("tomato", "Tomatoes"),
        ("Scallions", "Green Onions"),
        ("2 cups flour, sifted", "Flour"),
        ("1 tbsp olive oil", "Olive Oil"),
        ("saffron", None),
        ("", None),
    ],
)
def test_resolve_name(db, catalog, text, expected):
    resolved = IngredientService(db).resolve_name(text)
    assert (resolved.name if resolved else None) == expected


def test_resolve_name_skips_disabled(db, catalog):
    service = IngredientService(db)
    service.disable(catalog["flour"].id)

    assert service.resolve_name("flour") is None


# --- API ---


def test_search_endpoint(client, catalog):
    response = client.get("/api/v1/ingredients", params={"q": "kosher"})
    assert response.status_code == 200
    assert [i["name"] for i in response.json()] == ["Salt"]


def test_list_by_category_endpoint(client, catalog):
    response = client.get("/api/v1/ingredients", params={"category": "Produce"})
    assert [i["name"] for i in response.json()] == ["Green Onions", "Tomatoes"]


def test_submit_endpoint(client, auth_headers):
    response = client.post(
        "/api/v1/ingredients",
        headers=auth_headers,
        json={"name": "Tahini", "category": "Condiments", "aliases": ["sesame paste"]},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Tahini"
    assert data["created_by"] == auth_headers.user_id

    response = client.post(
        "/api/v1/ingredients", headers=auth_headers, json={"name": "tahini"}
    )
    assert response.status_code == 409


def test_submit_endpoint_requires_auth(client):
    response = client.post("/api/v1/ingredients", json={"name": "Tahini"})
    assert response.status_code in (401, 403)


def test_add_alias_endpoint(client, auth_headers, catalog):
    response = client.post(
        f"/api/v1/ingredients/{catalog['olive oil'].id}/aliases",
        headers=auth_headers,
        json={"alias": "EVOO"},
    )
    assert response.status_code == 200
    assert response.json()["aliases"] == ["EVOO"]


def test_disable_requires_admin(client, auth_headers, admin_headers, catalog):
    url = f"/api/v1/ingredients/{catalog['eggs'].id}/disable"

    assert client.post(url, headers=auth_headers).status_code == 403

    response = client.post(url, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["is_enabled"] is False
    assert client.get("/api/v1/ingredients", params={"q": "egg"}).json() == []
