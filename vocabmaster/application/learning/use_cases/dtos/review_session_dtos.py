"""DTOs for review session use cases."""

from dataclasses import dataclass
from datetime import datetime

from vocabmaster.domain.common.value_objects.ids import ReviewSessionId, UserId, WordSetId
from vocabmaster.domain.learning.entities.review_session import (
    ReviewResult,
    ReviewSession,
    ReviewSnapshot,
)
from vocabmaster.domain.learning.entities.study_record import StudyRecord


@dataclass
class ActiveReviewSession:
    """A live review session together with who owns it and what it reviews."""

    id: ReviewSessionId
    user_id: UserId
    word_set_id: WordSetId
    word_set_title: str
    started_at: datetime
    session: ReviewSession

    def view(self) -> "ReviewSessionView":
        return ReviewSessionView(
            id=self.id,
            word_set_id=self.word_set_id,
            word_set_title=self.word_set_title,
            started_at=self.started_at,
            state=self.session.snapshot(),
        )


@dataclass(frozen=True)
class ReviewSessionView:
    """State of a review session captured at one moment."""

    id: ReviewSessionId
    word_set_id: WordSetId
    word_set_title: str
    started_at: datetime
    state: ReviewSnapshot


@dataclass(frozen=True)
class ReviewActionOutcome:
    """Result of flip, grade or undo plus the state afterwards."""

    result: ReviewResult
    view: ReviewSessionView


@dataclass(frozen=True)
class ReviewSessionSummary:
    """What a closed review session amounted to."""

    view: ReviewSessionView
    duration_minutes: int
    study_record: StudyRecord | None
