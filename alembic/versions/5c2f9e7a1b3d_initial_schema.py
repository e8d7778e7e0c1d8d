"""initial schema

Revision ID: 5c2f9e7a1b3d
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c2f9e7a1b3d"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        *timestamps(),
    )

    op.create_table(
        "ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("category", sa.String(50), nullable=False, server_default="Other"),
        sa.Column("aliases", sa.JSON(), nullable=False),
        sa.Column("is_enabled", sa.Boolean(), nullable=False, server_default=sa.true(), index=True),
        sa.Column("created_by", sa.Integer(), sa.ForeignKey("users.id"), nullable=True, index=True),
        *timestamps(),
    )

    op.create_table(
        "pantry_items",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("normalized_name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("quantity", sa.String(100), nullable=True),
        sa.Column(
            "ingredient_id",
            sa.Integer(),
            sa.ForeignKey("ingredients.id"),
            nullable=True,
            index=True,
        ),
        *timestamps(),
    )

    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category", sa.String(20), nullable=True, index=True),
        sa.Column("instructions", sa.JSON(), nullable=True),
        sa.Column("prep_time_minutes", sa.Integer(), nullable=True),
        sa.Column("cook_time_minutes", sa.Integer(), nullable=True),
        sa.Column("servings", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.String(1000), nullable=True),
        sa.Column("ingredients", sa.JSON(), nullable=True),
        *timestamps(),
    )

    op.create_table(
        "recipe_ingredients",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column(
            "recipe_id", sa.Integer(), sa.ForeignKey("recipes.id"), nullable=False, index=True
        ),
        sa.Column(
            "ingredient_id",
            sa.Integer(),
            sa.ForeignKey("ingredients.id"),
            nullable=False,
            index=True,
        ),
        sa.Column("quantity", sa.String(100), nullable=True),
        sa.Column("unit", sa.String(50), nullable=True),
        *timestamps(),
    )

    op.create_table(
        "shopping_list_items",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("item_name", sa.String(255), nullable=False),
        sa.Column("normalized_name", sa.String(255), nullable=False),
        sa.Column("quantity", sa.String(255), nullable=False, server_default="1"),
        sa.Column(
            "is_purchased", sa.Boolean(), nullable=False, server_default=sa.false(), index=True
        ),
        sa.Column(
            "ingredient_id",
            sa.Integer(),
            sa.ForeignKey("ingredients.id"),
            nullable=True,
            index=True,
        ),
        *timestamps(),
    )
    op.create_index(
        "uq_shopping_user_unpurchased_name",
        "shopping_list_items",
        ["user_id", "normalized_name"],
        unique=True,
        postgresql_where=sa.text("is_purchased = false"),
        sqlite_where=sa.text("is_purchased = 0"),
    )

    op.create_table(
        "meal_plan_entries",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column(
            "recipe_id", sa.Integer(), sa.ForeignKey("recipes.id"), nullable=False, index=True
        ),
        sa.Column("planned_date", sa.Date(), nullable=False, index=True),
        sa.Column("meal_type", sa.String(20), nullable=False),
        *timestamps(),
    )


def downgrade() -> None:
    op.drop_table("meal_plan_entries")
    op.drop_index("uq_shopping_user_unpurchased_name", table_name="shopping_list_items")
    op.drop_table("shopping_list_items")
    op.drop_table("recipe_ingredients")
    op.drop_table("recipes")
    op.drop_table("pantry_items")
    op.drop_table("ingredients")
    op.drop_table("users")
