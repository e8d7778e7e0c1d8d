"""Tests for the weekly meal plan."""

from datetime import date

import pytest

from mealmash.models.recipe import Recipe
from mealmash.services.meal_plan_service import week_of


@pytest.fixture
def recipe(db):
    recipe = Recipe(name="Shakshuka", category="breakfast")
    db.add(recipe)
    db.commit()
    return recipe


def test_week_of_starts_on_monday():
    week = week_of(date(2024, 3, 14))  # Thursday

    assert week[0] == date(2024, 3, 11)
    assert week[-1] == date(2024, 3, 17)
    assert len(week) == 7


def test_week_of_sunday_belongs_to_previous_monday():
    assert week_of(date(2024, 3, 17))[0] == date(2024, 3, 11)


def test_add_list_and_remove_entries(client, auth_headers, recipe):
    response = client.post(
        "/api/v1/meal-plan",
        headers=auth_headers,
        json={"recipe_id": recipe.id, "planned_date": "2024-03-14", "meal_type": "breakfast"},
    )
    assert response.status_code == 201
    entry_id = response.json()["id"]

    client.post(
        "/api/v1/meal-plan",
        headers=auth_headers,
        json={"recipe_id": recipe.id, "planned_date": "2024-03-18", "meal_type": "dinner"},
    )

    week = client.get("/api/v1/meal-plan", headers=auth_headers, params={"day": "2024-03-11"})
    data = week.json()
    assert data["week_start"] == "2024-03-11"
    assert data["week_end"] == "2024-03-17"
    assert [(e["planned_date"], e["meal_type"]) for e in data["entries"]] == [
        ("2024-03-14", "breakfast")
    ]

    response = client.delete(f"/api/v1/meal-plan/{entry_id}", headers=auth_headers)
    assert response.status_code == 204
    week = client.get("/api/v1/meal-plan", headers=auth_headers, params={"day": "2024-03-14"})
    assert week.json()["entries"] == []


def test_add_entry_for_unknown_recipe(client, auth_headers):
    response = client.post(
        "/api/v1/meal-plan",
        headers=auth_headers,
        json={"recipe_id": 999, "planned_date": "2024-03-14", "meal_type": "lunch"},
    )
    assert response.status_code == 404


def test_add_entry_rejects_unknown_meal_type(client, auth_headers, recipe):
    response = client.post(
        "/api/v1/meal-plan",
        headers=auth_headers,
        json={"recipe_id": recipe.id, "planned_date": "2024-03-14", "meal_type": "brunch"},
    )
    assert response.status_code == 422


def test_remove_unknown_entry(client, auth_headers):
    assert client.delete("/api/v1/meal-plan/31337", headers=auth_headers).status_code == 404
