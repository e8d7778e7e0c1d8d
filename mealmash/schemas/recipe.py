"""Recipe and scoring schemas."""

from pydantic import BaseModel, ConfigDict

from mealmash.services.matching import IngredientRequirement
from mealmash.services.scoring import RecipeScore


class RecipeIngredientResponse(BaseModel):
    """Catalog ingredient row of a recipe."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    ingredient_id: int
    quantity: str | None
    unit: str | None


class RecipeResponse(BaseModel):
    """Recipe response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None
    category: str | None
    instructions: list[str] | None
    prep_time_minutes: int | None
    cook_time_minutes: int | None
    servings: int | None
    image_url: str | None
    recipe_ingredients: list[RecipeIngredientResponse]


class RequirementResponse(BaseModel):
    """One required ingredient in a score."""

    name: str
    ingredient_id: int | None
    quantity: str | None
    unit: str | None
    category: str | None

    @classmethod
    def from_requirement(cls, requirement: IngredientRequirement) -> "RequirementResponse":
        return cls(
            name=requirement.name,
            ingredient_id=requirement.ingredient_id,
            quantity=requirement.quantity,
            unit=requirement.unit,
            category=requirement.category,
        )


class RecipeScoreResponse(BaseModel):
    """Pantry coverage of one recipe."""

    recipe_id: int
    recipe_name: str
    category: str | None
    mode: str
    matched: list[RequirementResponse]
    missing: list[RequirementResponse]
    matched_count: int
    total_count: int
    fraction: float
    percentage: int

    @classmethod
    def from_score(cls, score: RecipeScore) -> "RecipeScoreResponse":
        return cls(
            recipe_id=score.recipe.id,
            recipe_name=score.recipe.name,
            category=score.recipe.category,
            mode=score.mode,
            matched=[RequirementResponse.from_requirement(r) for r in score.matched],
            missing=[RequirementResponse.from_requirement(r) for r in score.missing],
            matched_count=score.matched_count,
            total_count=score.total_count,
            fraction=score.fraction,
            percentage=score.percentage,
        )


class SuggestionsResponse(BaseModel):
    """Ranked suggestions; ``available`` is False when they could not be computed."""

    available: bool
    policy: str
    suggestions: list[RecipeScoreResponse]


class LinkCatalogResponse(BaseModel):
    """Result of linking a legacy recipe to the catalog."""

    recipe_id: int
    linked: list[str]
    unmatched: list[str]
