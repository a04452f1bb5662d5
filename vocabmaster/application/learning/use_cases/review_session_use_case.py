"""Use case for driving flashcard review sessions over the API."""

from collections.abc import Callable
from datetime import UTC, date, datetime
from uuid import UUID

import structlog

from vocabmaster.application.common.listing import ListOptions
from vocabmaster.application.learning.protocols.review_session_store import (
    ReviewSessionStoreProtocol,
)
from vocabmaster.application.learning.protocols.study_record_repository import (
    StudyRecordRepositoryProtocol,
)
from vocabmaster.application.learning.use_cases.dtos.review_session_dtos import (
    ActiveReviewSession,
    ReviewActionOutcome,
    ReviewSessionSummary,
    ReviewSessionView,
)
from vocabmaster.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from vocabmaster.application.vocabulary.protocols.word_set_repository import (
    WordSetRepositoryProtocol,
)
from vocabmaster.domain.common.value_objects.ids import ReviewSessionId, UserId, WordSetId
from vocabmaster.domain.learning.entities.card import Card
from vocabmaster.domain.learning.entities.review_session import (
    Grade,
    ReviewResult,
    ReviewSession,
)
from vocabmaster.domain.learning.entities.study_record import StudyRecord
from vocabmaster.domain.vocabulary.entities.word import Word
from vocabmaster.exceptions import ReviewSessionNotFoundError, WordSetNotFoundError

logger = structlog.get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def word_to_card(word: Word) -> Card:
    """Show the English word on the front and its translation on the back."""
    return Card(
        id=word.id,
        front_text=word.english,
        back_text=word.chinese,
        phonetic=word.pronunciation,
        example_sentence=word.example,
        tag=word.category,
    )


class ReviewSessionUseCase:
    """Use case for starting, driving and closing review sessions."""

    def __init__(
        self,
        session_store: ReviewSessionStoreProtocol,
        word_set_repository: WordSetRepositoryProtocol,
        word_repository: WordRepositoryProtocol,
        study_record_repository: StudyRecordRepositoryProtocol,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize use case with the session store and repository protocols."""
        self.session_store = session_store
        self.word_set_repository = word_set_repository
        self.word_repository = word_repository
        self.study_record_repository = study_record_repository
        self.clock = clock

    def start_review_session(self, word_set_id: int, user_id: int) -> ReviewSessionView:
        """
        Open a review session over a word set's words in deck order.

        A word set without words yields a session with an empty deck.

        Raises:
            WordSetNotFoundError: If the set is not visible to the user
        """
        user_id_vo = UserId(user_id)
        word_set = self.word_set_repository.find_visible_by_id(WordSetId(word_set_id), user_id_vo)
        if not word_set:
            raise WordSetNotFoundError(word_set_id)

        words = self.word_repository.find_by_word_set(word_set.id, ListOptions(ascending=True))
        active = ActiveReviewSession(
            id=ReviewSessionId.generate(),
            user_id=user_id_vo,
            word_set_id=word_set.id,
            word_set_title=word_set.title,
            started_at=self.clock(),
            session=ReviewSession(word_to_card(word) for word in words),
        )
        self.session_store.add(active)

        logger.info(
            "started_review_session",
            session_id=str(active.id),
            word_set_id=word_set_id,
            card_count=len(words),
        )
        return active.view()

    def get_review_session(self, session_id: UUID, user_id: int) -> ReviewSessionView:
        """
        Get the current state of a review session.

        Raises:
            ReviewSessionNotFoundError: If the session is unknown or not the user's
        """
        with self.session_store.lease(ReviewSessionId(session_id), UserId(user_id)) as active:
            if active is None:
                raise ReviewSessionNotFoundError(str(session_id))
            return active.view()

    def flip(self, session_id: UUID, user_id: int) -> ReviewActionOutcome:
        """Flip the current card."""
        return self._apply(session_id, user_id, lambda session: session.flip())

    def grade(self, session_id: UUID, user_id: int, outcome: Grade) -> ReviewActionOutcome:
        """Grade the current card and advance."""
        return self._apply(session_id, user_id, lambda session: session.grade(outcome))

    def undo(self, session_id: UUID, user_id: int) -> ReviewActionOutcome:
        """Reverse the most recent grade."""
        return self._apply(session_id, user_id, lambda session: session.undo())

    def close_review_session(self, session_id: UUID, user_id: int) -> ReviewSessionSummary:
        """
        Discard a review session and credit the graded cards to today's study record.

        Cards whose grade was undone do not count. A session with no grades
        leaves the study records untouched. If the record cannot be saved the
        session stays open.

        Raises:
            ReviewSessionNotFoundError: If the session is unknown or not the user's
        """
        user_id_vo = UserId(user_id)
        active = self.session_store.pop(ReviewSessionId(session_id), user_id_vo)
        if active is None:
            raise ReviewSessionNotFoundError(str(session_id))

        now = self.clock()
        view = active.view()
        duration_minutes = max(1, int((now - active.started_at).total_seconds() // 60))
        graded_count = view.state.graded_count

        record: StudyRecord | None = None
        if graded_count > 0:
            try:
                record = self._credit_study_record(
                    user_id_vo, now.date(), graded_count, duration_minutes
                )
            except Exception:
                # Put the session back so the client can retry the close
                self.session_store.add(active)
                logger.warning("close_review_session_failed", session_id=str(session_id))
                raise

        logger.info(
            "closed_review_session",
            session_id=str(session_id),
            graded_count=graded_count,
            correct_count=view.state.correct_count,
            incorrect_count=view.state.incorrect_count,
            duration_minutes=duration_minutes,
        )
        return ReviewSessionSummary(
            view=view, duration_minutes=duration_minutes, study_record=record
        )

    def _credit_study_record(
        self, user_id: UserId, study_date: date, words_count: int, study_time_minutes: int
    ) -> StudyRecord:
        record = self.study_record_repository.find_by_date(user_id, study_date)
        if record is None:
            record = StudyRecord.create(user_id=user_id, study_date=study_date)
        record.add_review(words_count=words_count, study_time_minutes=study_time_minutes)
        return self.study_record_repository.save(record)

    def _apply(
        self,
        session_id: UUID,
        user_id: int,
        operation: Callable[[ReviewSession], ReviewResult],
    ) -> ReviewActionOutcome:
        with self.session_store.lease(ReviewSessionId(session_id), UserId(user_id)) as active:
            if active is None:
                raise ReviewSessionNotFoundError(str(session_id))
            result = operation(active.session)
            view = active.view()

        if result is not ReviewResult.APPLIED:
            logger.debug("review_operation_rejected", session_id=str(session_id), result=result)
        return ReviewActionOutcome(result=result, view=view)
