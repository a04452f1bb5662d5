"""Protocol for the registry of live review sessions."""

from contextlib import AbstractContextManager
from typing import Protocol

from vocabmaster.application.learning.use_cases.dtos.review_session_dtos import (
    ActiveReviewSession,
)
from vocabmaster.domain.common.value_objects.ids import ReviewSessionId, UserId


class ReviewSessionStoreProtocol(Protocol):
    """Holds live review sessions between requests. Nothing is persisted."""

    def add(self, active: ActiveReviewSession) -> None:
        """Register a newly started session."""
        ...

    def lease(
        self, session_id: ReviewSessionId, user_id: UserId
    ) -> AbstractContextManager[ActiveReviewSession | None]:
        """
        Borrow a session for exclusive use.

        No other caller can reach the session until the context exits.

        Args:
            session_id: The session ID
            user_id: The user ID for ownership verification

        Returns:
            Context manager yielding the session, or None if it is unknown
            or owned by another user
        """
        ...

    def pop(self, session_id: ReviewSessionId, user_id: UserId) -> ActiveReviewSession | None:
        """
        Unregister a session.

        Returns:
            The removed session, or None if it is unknown or owned by another user
        """
        ...
