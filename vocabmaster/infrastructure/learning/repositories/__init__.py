from .review_session_store import InMemoryReviewSessionStore
from .study_record_repository import StudyRecordRepository

__all__ = ["InMemoryReviewSessionStore", "StudyRecordRepository"]
