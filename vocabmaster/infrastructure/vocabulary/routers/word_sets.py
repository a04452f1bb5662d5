"""API routes for word set browsing, creation and import."""

import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from vocabmaster.application.common.listing import MAX_LIST_LIMIT, ListOptions
from vocabmaster.application.learning.use_cases.review_session_use_case import (
    ReviewSessionUseCase,
)
from vocabmaster.application.vocabulary.use_cases.word_set_use_case import WordSetUseCase
from vocabmaster.application.vocabulary.use_cases.word_use_case import WordUseCase
from vocabmaster.core import container
from vocabmaster.domain.common.exceptions import DomainError
from vocabmaster.domain.vocabulary.entities.word_set import WordSet as WordSetEntity
from vocabmaster.exceptions import VocabMasterError
from vocabmaster.infrastructure.common.di import inject_use_case
from vocabmaster.infrastructure.common.schemas import SuccessResponse
from vocabmaster.infrastructure.identity.dependencies import CurrentUserId
from vocabmaster.infrastructure.learning.routers.review_sessions import to_review_session_schema
from vocabmaster.infrastructure.learning.schemas import ReviewSession
from vocabmaster.infrastructure.vocabulary.routers.words import to_word_schema
from vocabmaster.infrastructure.vocabulary.schemas import (
    WordSet,
    WordSetCreateRequest,
    WordSetImportResponse,
    WordSetImportStatus,
    WordSetsListResponse,
    WordsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/word-sets", tags=["word-sets"])


def to_word_set_schema(word_set: WordSetEntity) -> WordSet:
    return WordSet(
        id=word_set.id.value,
        owner_id=word_set.owner_id.value if word_set.owner_id else None,
        title=word_set.title,
        description=word_set.description,
        category=word_set.category,
        difficulty=word_set.difficulty,
        tags=list(word_set.tags),
        is_public=word_set.is_public,
        word_count=word_set.word_count,
        created_at=word_set.created_at,
        updated_at=word_set.updated_at,
    )


@router.get("", response_model=WordSetsListResponse, status_code=status.HTTP_200_OK)
def list_word_sets(
    current_user_id: CurrentUserId,
    scope: Literal["public", "mine"] = "public",
    category: str | None = None,
    ascending: bool = False,
    limit: Annotated[int | None, Query(ge=1, le=MAX_LIST_LIMIT)] = None,
    use_case: WordSetUseCase = Depends(inject_use_case(container.word_set_use_case)),
) -> WordSetsListResponse:
    """
    List word sets from the public catalogue or the user's collection.

    Args:
        scope: "public" for the catalogue, "mine" for imported sets
        category: Only sets in this category
        ascending: Oldest first instead of newest first
        limit: Maximum number of sets
    """
    word_sets = use_case.list_word_sets(
        user_id=current_user_id,
        scope=scope,
        options=ListOptions(ascending=ascending, limit=limit, category=category),
    )
    return WordSetsListResponse(word_sets=[to_word_set_schema(ws) for ws in word_sets])


@router.post("", response_model=WordSet, status_code=status.HTTP_201_CREATED)
def create_word_set(
    request: WordSetCreateRequest,
    current_user_id: CurrentUserId,
    use_case: WordSetUseCase = Depends(inject_use_case(container.word_set_use_case)),
) -> WordSet:
    """
    Create a word set owned by the current user.

    The new set is added to the creator's collection right away.
    """
    try:
        word_set = use_case.create_word_set(
            user_id=current_user_id,
            title=request.title,
            description=request.description,
            category=request.category,
            difficulty=request.difficulty,
            tags=request.tags,
            is_public=request.is_public,
        )
        return to_word_set_schema(word_set)
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create word set: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{word_set_id}", response_model=WordSet, status_code=status.HTTP_200_OK)
def get_word_set(
    word_set_id: int,
    current_user_id: CurrentUserId,
    use_case: WordSetUseCase = Depends(inject_use_case(container.word_set_use_case)),
) -> WordSet:
    """Get a word set that is public, owned by the user, or in their collection."""
    word_set = use_case.get_word_set(word_set_id=word_set_id, user_id=current_user_id)
    return to_word_set_schema(word_set)


@router.get(
    "/{word_set_id}/words", response_model=WordsListResponse, status_code=status.HTTP_200_OK
)
def get_word_set_words(
    word_set_id: int,
    current_user_id: CurrentUserId,
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> WordsListResponse:
    """Get the words of a word set in deck order."""
    words = use_case.get_words_for_word_set(word_set_id=word_set_id, user_id=current_user_id)
    return WordsListResponse(words=[to_word_schema(word) for word in words])


@router.get(
    "/{word_set_id}/import", response_model=WordSetImportStatus, status_code=status.HTTP_200_OK
)
def get_import_status(
    word_set_id: int,
    current_user_id: CurrentUserId,
    use_case: WordSetUseCase = Depends(inject_use_case(container.word_set_use_case)),
) -> WordSetImportStatus:
    """Check whether the word set is in the user's collection."""
    imported = use_case.is_word_set_imported(word_set_id=word_set_id, user_id=current_user_id)
    return WordSetImportStatus(word_set_id=word_set_id, imported=imported)


@router.post(
    "/{word_set_id}/import", response_model=WordSetImportResponse, status_code=status.HTTP_200_OK
)
def import_word_set(
    word_set_id: int,
    current_user_id: CurrentUserId,
    use_case: WordSetUseCase = Depends(inject_use_case(container.word_set_use_case)),
) -> WordSetImportResponse:
    """
    Import a word set into the user's collection.

    Raises:
        WordSetNotFoundError: If the set is not visible to the user
        WordSetAlreadyImportedError: If the set was imported before
    """
    try:
        word_set = use_case.import_word_set(word_set_id=word_set_id, user_id=current_user_id)
        return WordSetImportResponse(
            success=True,
            message="Word set imported successfully",
            word_set=to_word_set_schema(word_set),
        )
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to import word set {word_set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{word_set_id}/import", response_model=SuccessResponse, status_code=status.HTTP_200_OK
)
def remove_imported_word_set(
    word_set_id: int,
    current_user_id: CurrentUserId,
    use_case: WordSetUseCase = Depends(inject_use_case(container.word_set_use_case)),
) -> SuccessResponse:
    """Remove a word set from the user's collection. Safe to repeat."""
    try:
        use_case.remove_imported_word_set(word_set_id=word_set_id, user_id=current_user_id)
        return SuccessResponse(success=True, message="Word set removed from your collection")
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to remove word set {word_set_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/{word_set_id}/review-sessions",
    response_model=ReviewSession,
    status_code=status.HTTP_201_CREATED,
)
def start_review_session(
    word_set_id: int,
    current_user_id: CurrentUserId,
    use_case: ReviewSessionUseCase = Depends(inject_use_case(container.review_session_use_case)),
) -> ReviewSession:
    """
    Start reviewing a word set.

    The deck holds the set's words oldest first. A set without words gives
    a session whose flip and grade report an empty deck.
    """
    try:
        view = use_case.start_review_session(word_set_id=word_set_id, user_id=current_user_id)
        return to_review_session_schema(view)
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to start review session for word set {word_set_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
