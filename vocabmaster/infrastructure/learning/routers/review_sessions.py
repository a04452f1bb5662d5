"""API routes for driving review sessions."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from vocabmaster.application.learning.use_cases.dtos.review_session_dtos import (
    ReviewActionOutcome,
    ReviewSessionView,
)
from vocabmaster.application.learning.use_cases.review_session_use_case import (
    ReviewSessionUseCase,
)
from vocabmaster.core import container
from vocabmaster.domain.common.exceptions import DomainError
from vocabmaster.exceptions import VocabMasterError
from vocabmaster.infrastructure.common.di import inject_use_case
from vocabmaster.infrastructure.identity.dependencies import CurrentUserId
from vocabmaster.infrastructure.learning.routers.study_records import to_study_record_schema
from vocabmaster.infrastructure.learning.schemas import (
    Card,
    GradeRequest,
    ReviewActionResponse,
    ReviewSession,
    ReviewSessionCloseResponse,
    ReviewSessionState,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/review-sessions", tags=["review-sessions"])


def to_review_session_schema(view: ReviewSessionView) -> ReviewSession:
    state = view.state
    card = state.current_card
    return ReviewSession(
        id=view.id.value,
        word_set_id=view.word_set_id.value,
        word_set_title=view.word_set_title,
        started_at=view.started_at,
        state=ReviewSessionState(
            cursor=state.cursor,
            is_flipped=state.is_flipped,
            correct_count=state.correct_count,
            incorrect_count=state.incorrect_count,
            undo_available=state.undo_available,
            card_count=state.card_count,
            graded_count=state.graded_count,
            current_card=Card(
                id=card.id.value,
                front_text=card.front_text,
                back_text=card.back_text,
                phonetic=card.phonetic,
                example_sentence=card.example_sentence,
                tag=card.tag,
            )
            if card
            else None,
        ),
    )


def _to_action_response(outcome: ReviewActionOutcome) -> ReviewActionResponse:
    return ReviewActionResponse(
        result=outcome.result, session=to_review_session_schema(outcome.view)
    )


@router.get("/{session_id}", response_model=ReviewSession, status_code=status.HTTP_200_OK)
def get_review_session(
    session_id: UUID,
    current_user_id: CurrentUserId,
    use_case: ReviewSessionUseCase = Depends(inject_use_case(container.review_session_use_case)),
) -> ReviewSession:
    """Get the current state of a review session."""
    view = use_case.get_review_session(session_id=session_id, user_id=current_user_id)
    return to_review_session_schema(view)


@router.post(
    "/{session_id}/flip", response_model=ReviewActionResponse, status_code=status.HTTP_200_OK
)
def flip_card(
    session_id: UUID,
    current_user_id: CurrentUserId,
    use_case: ReviewSessionUseCase = Depends(inject_use_case(container.review_session_use_case)),
) -> ReviewActionResponse:
    """Show the other face of the current card."""
    outcome = use_case.flip(session_id=session_id, user_id=current_user_id)
    return _to_action_response(outcome)


@router.post(
    "/{session_id}/grade", response_model=ReviewActionResponse, status_code=status.HTTP_200_OK
)
def grade_card(
    session_id: UUID,
    request: GradeRequest,
    current_user_id: CurrentUserId,
    use_case: ReviewSessionUseCase = Depends(inject_use_case(container.review_session_use_case)),
) -> ReviewActionResponse:
    """
    Grade the current card and move to the next one.

    An empty deck is reported in ``result``, not as an error.
    """
    outcome = use_case.grade(
        session_id=session_id, user_id=current_user_id, outcome=request.outcome
    )
    return _to_action_response(outcome)


@router.post(
    "/{session_id}/undo", response_model=ReviewActionResponse, status_code=status.HTTP_200_OK
)
def undo_grade(
    session_id: UUID,
    current_user_id: CurrentUserId,
    use_case: ReviewSessionUseCase = Depends(inject_use_case(container.review_session_use_case)),
) -> ReviewActionResponse:
    """Reverse the most recent grade. Nothing to undo is reported in ``result``."""
    outcome = use_case.undo(session_id=session_id, user_id=current_user_id)
    return _to_action_response(outcome)


@router.delete(
    "/{session_id}", response_model=ReviewSessionCloseResponse, status_code=status.HTTP_200_OK
)
def close_review_session(
    session_id: UUID,
    current_user_id: CurrentUserId,
    use_case: ReviewSessionUseCase = Depends(inject_use_case(container.review_session_use_case)),
) -> ReviewSessionCloseResponse:
    """
    Close a review session.

    Graded cards and elapsed minutes are added to today's study record.
    """
    try:
        summary = use_case.close_review_session(session_id=session_id, user_id=current_user_id)
        return ReviewSessionCloseResponse(
            success=True,
            message="Review session closed",
            session=to_review_session_schema(summary.view),
            duration_minutes=summary.duration_minutes,
            study_record=to_study_record_schema(summary.study_record)
            if summary.study_record
            else None,
        )
    except (VocabMasterError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to close review session {session_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
