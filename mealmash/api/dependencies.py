"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from mealmash.database import get_db
from mealmash.models.user import User
from mealmash.services.auth import decode_access_token
from mealmash.services.ingredient_service import IngredientService
from mealmash.services.meal_plan_service import MealPlanService
from mealmash.services.recipe_service import RecipeService
from mealmash.services.shopping_service import ShoppingService
from mealmash.services.suggestion_service import SuggestionService

security = HTTPBearer()


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token.

    The first request from a new identity creates its local user row.
    """
    payload = decode_access_token(credentials.credentials)

    if payload is None or payload.get("sub") is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = int(payload["sub"])
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        email = payload.get("email")
        if not email:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="User not found",
                headers={"WWW-Authenticate": "Bearer"},
            )
        user = User(id=user_id, email=email)
        db.add(user)
        db.commit()
        db.refresh(user)

    return user


def require_admin(current_user: Annotated[User, Depends(get_current_user)]) -> User:
    """Only allow catalog moderators."""
    if not current_user.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin only")
    return current_user


def get_ingredient_service(
    db: Annotated[Session, Depends(get_db)],
) -> IngredientService:
    """Get ingredient catalog service."""
    return IngredientService(db)


def get_recipe_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecipeService:
    """Get recipe service with dependencies."""
    return RecipeService(db)


def get_shopping_service(
    db: Annotated[Session, Depends(get_db)],
) -> ShoppingService:
    """Get shopping list service with dependencies."""
    return ShoppingService(db)


def get_suggestion_service() -> SuggestionService:
    """Get suggestion service configured from settings."""
    return SuggestionService()


def get_meal_plan_service(
    db: Annotated[Session, Depends(get_db)],
) -> MealPlanService:
    """Get meal plan service."""
    return MealPlanService(db)
