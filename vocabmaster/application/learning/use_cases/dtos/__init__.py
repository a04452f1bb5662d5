from .review_session_dtos import (
    ActiveReviewSession,
    ReviewActionOutcome,
    ReviewSessionSummary,
    ReviewSessionView,
)

__all__ = [
    "ActiveReviewSession",
    "ReviewActionOutcome",
    "ReviewSessionSummary",
    "ReviewSessionView",
]
