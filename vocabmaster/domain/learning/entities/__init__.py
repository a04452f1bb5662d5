from .card import Card
from .review_session import (
    Grade,
    PositionSnapshot,
    ReviewResult,
    ReviewSession,
    ReviewSnapshot,
)
from .study_record import StudyRecord

__all__ = [
    "Card",
    "Grade",
    "PositionSnapshot",
    "ReviewResult",
    "ReviewSession",
    "ReviewSnapshot",
    "StudyRecord",
]
