"""Protocol for StudyRecord repository in learning context."""

from datetime import date
from typing import Protocol

from vocabmaster.domain.common.value_objects.ids import UserId
from vocabmaster.domain.learning.entities.study_record import StudyRecord


class StudyRecordRepositoryProtocol(Protocol):
    """Protocol for StudyRecord repository operations in learning context."""

    def find_by_date(self, user_id: UserId, study_date: date) -> StudyRecord | None:
        """
        Find the user's record for one day.

        Returns:
            StudyRecord entity if the user studied that day, None otherwise
        """
        ...

    def find_by_user(
        self,
        user_id: UserId,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int | None = None,
    ) -> list[StudyRecord]:
        """
        Get a user's records, newest day first.

        Args:
            user_id: The user ID
            start_date: Earliest day to include
            end_date: Latest day to include
            limit: Maximum number of records

        Returns:
            List of study record entities ordered by study_date DESC
        """
        ...

    def save(self, record: StudyRecord) -> StudyRecord:
        """
        Save a study record entity (create or update).

        Returns:
            Saved study record entity with database-generated values
        """
        ...
