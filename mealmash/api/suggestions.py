"""Recipe suggestion endpoints ("what can I make")."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from mealmash.api.dependencies import get_current_user, get_suggestion_service
from mealmash.database import get_db
from mealmash.models.enums import RecipeCategory
from mealmash.models.user import User
from mealmash.schemas.recipe import RecipeScoreResponse, SuggestionsResponse
from mealmash.services.data_access import SqlAlchemyDataAccess
from mealmash.services.suggestion_service import SuggestionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/suggestions", tags=["suggestions"])


@router.get("", response_model=SuggestionsResponse)
def get_suggestions(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
    service: Annotated[SuggestionService, Depends(get_suggestion_service)],
    category: RecipeCategory | None = None,
):
    """Recipes the user can (mostly) make from their pantry, best first.

    A failure while computing suggestions is reported as "none available"
    rather than an error.
    """
    try:
        scores = service.suggest_for_user(
            SqlAlchemyDataAccess(db),
            current_user.id,
            category=category.value if category else None,
        )
    except Exception as e:
        logger.error(f"Suggestion computation failed for user {current_user.id}: {e}")
        return SuggestionsResponse(available=False, policy=service.policy.value, suggestions=[])

    return SuggestionsResponse(
        available=True,
        policy=service.policy.value,
        suggestions=[RecipeScoreResponse.from_score(score) for score in scores],
    )
