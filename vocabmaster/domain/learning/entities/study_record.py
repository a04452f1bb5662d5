"""Study record entity: one user's study tally for one day."""

from dataclasses import dataclass
from datetime import date, datetime

from vocabmaster.domain.common.entity import Entity
from vocabmaster.domain.common.exceptions import ValidationError
from vocabmaster.domain.common.value_objects import StudyRecordId, UserId


@dataclass
class StudyRecord(Entity[StudyRecordId]):
    """
    Daily study tally.

    Business Rules:
    - At most one record per user and day (enforced at repository level)
    - Word count and study minutes never go negative
    """

    id: StudyRecordId
    user_id: UserId
    study_date: date
    words_count: int = 0
    study_time_minutes: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.words_count < 0:
            raise ValidationError("Words count cannot be negative", field="words_count")
        if self.study_time_minutes < 0:
            raise ValidationError(
                "Study time cannot be negative", field="study_time_minutes"
            )

    def add_review(self, words_count: int, study_time_minutes: int) -> None:
        """
        Add the outcome of one finished review session to this day.

        Args:
            words_count: Number of cards graded in the session
            study_time_minutes: Minutes the session lasted

        Raises:
            ValidationError: If either amount is negative
        """
        if words_count < 0 or study_time_minutes < 0:
            raise ValidationError("Study amounts cannot be negative")
        self.words_count += words_count
        self.study_time_minutes += study_time_minutes

    @classmethod
    def create(cls, user_id: UserId, study_date: date) -> "StudyRecord":
        """Start an empty record for a day (ID will be 0 until persisted)."""
        return cls(id=StudyRecordId.generate(), user_id=user_id, study_date=study_date)

    @classmethod
    def create_with_id(
        cls,
        id: StudyRecordId,
        user_id: UserId,
        study_date: date,
        words_count: int,
        study_time_minutes: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "StudyRecord":
        """Reconstitute a study record from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            study_date=study_date,
            words_count=words_count,
            study_time_minutes=study_time_minutes,
            created_at=created_at,
            updated_at=updated_at,
        )
