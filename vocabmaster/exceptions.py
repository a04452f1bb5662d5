"""Custom exception hierarchy for VocabMaster application."""

from datetime import date

from fastapi import HTTPException
from starlette import status


class VocabMasterError(Exception):
    """Base exception for all VocabMaster errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(VocabMasterError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class WordSetNotFoundError(NotFoundError):
    """Word set not found, or not visible to the current user."""

    def __init__(self, word_set_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with word set ID or custom message."""
        self.word_set_id = word_set_id
        if message:
            super().__init__(message)
        elif word_set_id is not None:
            super().__init__(f"Word set with id {word_set_id} not found")
        else:
            super().__init__("Word set not found")


class WordNotFoundError(NotFoundError):
    """Word not found error."""

    def __init__(self, word_id: int) -> None:
        """Initialize with word ID."""
        self.word_id = word_id
        super().__init__(f"Word with id {word_id} not found")


class ReviewSessionNotFoundError(NotFoundError):
    """Review session not found, already closed, or owned by someone else."""

    def __init__(self, session_id: str) -> None:
        """Initialize with session ID."""
        self.session_id = session_id
        super().__init__(f"Review session {session_id} not found")


class StudyRecordNotFoundError(NotFoundError):
    """No study record for the requested day."""

    def __init__(self, study_date: date) -> None:
        """Initialize with the requested date."""
        self.study_date = study_date
        super().__init__(f"No study record for {study_date.isoformat()}")


class ValidationError(VocabMasterError):
    """Validation error."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        """Initialize with message and 400 status code."""
        super().__init__(message, status_code=status_code)


class WordSetAlreadyImportedError(ValidationError):
    """The word set is already in the user's collection."""

    def __init__(self, word_set_id: int) -> None:
        """Initialize with word set ID."""
        self.word_set_id = word_set_id
        super().__init__(f"Word set {word_set_id} is already in your collection")


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
