"""API routes for word search and management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from vocabmaster.application.common.listing import MAX_LIST_LIMIT, ListOptions
from vocabmaster.application.vocabulary.use_cases.word_use_case import WordUseCase
from vocabmaster.core import container
from vocabmaster.domain.common.exceptions import DomainError
from vocabmaster.domain.vocabulary.entities.word import Word as WordEntity
from vocabmaster.exceptions import VocabMasterError
from vocabmaster.infrastructure.common.di import inject_use_case
from vocabmaster.infrastructure.common.schemas import SuccessResponse
from vocabmaster.infrastructure.identity.dependencies import CurrentUserId
from vocabmaster.infrastructure.vocabulary.schemas import (
    Word,
    WordCreateRequest,
    WordCreateResponse,
    WordsListResponse,
    WordUpdateRequest,
    WordUpdateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


def to_word_schema(word: WordEntity) -> Word:
    return Word(
        id=word.id.value,
        word_set_id=word.word_set_id.value,
        english=word.english,
        chinese=word.chinese,
        pronunciation=word.pronunciation,
        example=word.example,
        category=word.category,
        created_at=word.created_at,
        updated_at=word.updated_at,
    )


@router.get("", response_model=WordsListResponse, status_code=status.HTTP_200_OK)
def search_words(
    current_user_id: CurrentUserId,
    q: str | None = None,
    category: str | None = None,
    word_set_id: int | None = None,
    ascending: bool = False,
    limit: Annotated[int | None, Query(ge=1, le=MAX_LIST_LIMIT)] = None,
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> WordsListResponse:
    """
    Search words in the word sets visible to the user.

    Args:
        q: Case-insensitive substring of the word, translation or example
        category: Only words in this category
        word_set_id: Only words of this word set
        ascending: Oldest first instead of newest first
        limit: Maximum number of words
    """
    words = use_case.search_words(
        user_id=current_user_id,
        keyword=q,
        word_set_id=word_set_id,
        options=ListOptions(ascending=ascending, limit=limit, category=category),
    )
    return WordsListResponse(words=[to_word_schema(word) for word in words])


@router.post("", response_model=WordCreateResponse, status_code=status.HTTP_201_CREATED)
def create_word(
    request: WordCreateRequest,
    current_user_id: CurrentUserId,
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> WordCreateResponse:
    """
    Add a word to a word set in the user's collection.

    Raises:
        WordSetNotFoundError: If the set is not visible to the user
        WordSetNotInCollectionError: If the set is not owned or imported
    """
    try:
        word = use_case.create_word(
            user_id=current_user_id,
            word_set_id=request.word_set_id,
            english=request.english,
            chinese=request.chinese,
            pronunciation=request.pronunciation,
            example=request.example,
            category=request.category,
        )
        return WordCreateResponse(
            success=True,
            message="Word created successfully",
            word=to_word_schema(word),
        )
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create word: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/{word_id}", response_model=Word, status_code=status.HTTP_200_OK)
def get_word(
    word_id: int,
    current_user_id: CurrentUserId,
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> Word:
    """Get a word from a word set visible to the user."""
    word = use_case.get_word(word_id=word_id, user_id=current_user_id)
    return to_word_schema(word)


@router.put("/{word_id}", response_model=WordUpdateResponse, status_code=status.HTTP_200_OK)
def update_word(
    word_id: int,
    request: WordUpdateRequest,
    current_user_id: CurrentUserId,
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> WordUpdateResponse:
    """
    Replace a word's content.

    Args:
        word_id: ID of the word to update
        request: New content of the word

    Returns:
        Updated word
    """
    try:
        word = use_case.update_word(
            word_id=word_id,
            user_id=current_user_id,
            english=request.english,
            chinese=request.chinese,
            pronunciation=request.pronunciation,
            example=request.example,
            category=request.category,
        )
        return WordUpdateResponse(
            success=True,
            message="Word updated successfully",
            word=to_word_schema(word),
        )
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{word_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def delete_word(
    word_id: int,
    current_user_id: CurrentUserId,
    use_case: WordUseCase = Depends(inject_use_case(container.word_use_case)),
) -> SuccessResponse:
    """Delete a word and decrement its word set's count."""
    try:
        use_case.delete_word(word_id=word_id, user_id=current_user_id)
        return SuccessResponse(success=True, message="Word deleted successfully")
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
