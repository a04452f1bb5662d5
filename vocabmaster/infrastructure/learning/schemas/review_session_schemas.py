"""Pydantic schemas for review session API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from vocabmaster.domain.learning.entities.review_session import Grade, ReviewResult
from vocabmaster.infrastructure.learning.schemas.study_record_schemas import StudyRecord


class Card(BaseModel):
    """Schema for the card under the cursor."""

    id: int
    front_text: str
    back_text: str
    phonetic: str | None
    example_sentence: str | None
    tag: str | None


class ReviewSessionState(BaseModel):
    """Schema for what the review screen renders."""

    cursor: int = Field(..., description="Index of the current card")
    is_flipped: bool = Field(..., description="Whether the back face is showing")
    correct_count: int
    incorrect_count: int
    undo_available: bool
    card_count: int
    graded_count: int
    current_card: Card | None = Field(..., description="None when the deck is empty")


class ReviewSession(BaseModel):
    """Schema for ReviewSession response."""

    id: UUID
    word_set_id: int
    word_set_title: str
    started_at: datetime
    state: ReviewSessionState


class GradeRequest(BaseModel):
    """Schema for grading the current card."""

    outcome: Grade = Field(..., description="How well the card was recalled")


class ReviewActionResponse(BaseModel):
    """Schema for flip, grade and undo responses."""

    result: ReviewResult = Field(..., description="applied, empty_deck or undo_unavailable")
    session: ReviewSession = Field(..., description="Session state after the operation")


class ReviewSessionCloseResponse(BaseModel):
    """Schema for review session close response."""

    success: bool = Field(..., description="Whether the session was closed")
    message: str = Field(..., description="Response message")
    session: ReviewSession = Field(..., description="Final session state")
    duration_minutes: int = Field(..., description="Minutes credited to the study record")
    study_record: StudyRecord | None = Field(
        None, description="Today's study record, when any card was graded"
    )
