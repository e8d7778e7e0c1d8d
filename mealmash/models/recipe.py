"""Recipe and RecipeIngredient models."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from mealmash.database import Base
from mealmash.models.mixins import TimestampMixin


class Recipe(Base, TimestampMixin):
    """Recipe model, read-only input to the matching engine."""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(20), nullable=True, index=True)  # RecipeCategory value
    instructions = Column(JSON, nullable=True)  # Ordered list of steps
    prep_time_minutes = Column(Integer, nullable=True)
    cook_time_minutes = Column(Integer, nullable=True)
    servings = Column(Integer, nullable=True)
    image_url = Column(String(1000), nullable=True)

    # Legacy free-text ingredients: "a, b, c" or ["a", {"item": "b"}, ...]
    ingredients = Column(JSON, nullable=True)

    # Relationships
    recipe_ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.id",
    )


class RecipeIngredient(Base, TimestampMixin):
    """Catalog ingredient required by a recipe."""

    __tablename__ = "recipe_ingredients"

    id = Column(Integer, primary_key=True, index=True)
    recipe_id = Column(Integer, ForeignKey("recipes.id"), nullable=False, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    quantity = Column(String(100), nullable=True)
    unit = Column(String(50), nullable=True)

    # Relationships
    recipe = relationship("Recipe", back_populates="recipe_ingredients")
    ingredient = relationship("Ingredient")
