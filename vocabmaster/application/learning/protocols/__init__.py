from .review_session_store import ReviewSessionStoreProtocol
from .study_record_repository import StudyRecordRepositoryProtocol

__all__ = ["ReviewSessionStoreProtocol", "StudyRecordRepositoryProtocol"]
