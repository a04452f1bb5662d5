from .review_session_schemas import (
    Card,
    GradeRequest,
    ReviewActionResponse,
    ReviewSession,
    ReviewSessionCloseResponse,
    ReviewSessionState,
)
from .study_record_schemas import StudyRecord, StudyRecordsListResponse, StudyStats

__all__ = [
    "Card",
    "GradeRequest",
    "ReviewActionResponse",
    "ReviewSession",
    "ReviewSessionCloseResponse",
    "ReviewSessionState",
    "StudyRecord",
    "StudyRecordsListResponse",
    "StudyStats",
]
