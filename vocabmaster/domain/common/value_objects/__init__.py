"""Common value objects shared across all domain modules."""

from .ids import ReviewSessionId, StudyRecordId, UserId, WordId, WordSetId

__all__ = [
    "ReviewSessionId",
    "StudyRecordId",
    "UserId",
    "WordId",
    "WordSetId",
]
