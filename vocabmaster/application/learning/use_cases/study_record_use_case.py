"""Use case for reading study records and statistics."""

from collections.abc import Callable
from datetime import UTC, date, datetime

from vocabmaster.application.learning.protocols.study_record_repository import (
    StudyRecordRepositoryProtocol,
)
from vocabmaster.domain.common.value_objects.ids import UserId
from vocabmaster.domain.learning.entities.study_record import StudyRecord
from vocabmaster.domain.learning.services.study_stats_calculator import (
    StudyStats,
    StudyStatsCalculator,
)
from vocabmaster.exceptions import StudyRecordNotFoundError, ValidationError


def _utc_today() -> date:
    return datetime.now(UTC).date()


class StudyRecordUseCase:
    """Use case for study record queries."""

    def __init__(
        self,
        study_record_repository: StudyRecordRepositoryProtocol,
        stats_calculator: StudyStatsCalculator,
        today: Callable[[], date] = _utc_today,
    ) -> None:
        """Initialize use case with repository protocol and stats service."""
        self.study_record_repository = study_record_repository
        self.stats_calculator = stats_calculator
        self.today = today

    def get_study_records(
        self,
        user_id: int,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int | None = None,
    ) -> list[StudyRecord]:
        """
        Get the user's study records, newest day first.

        Raises:
            ValidationError: If start_date is after end_date
        """
        if start_date and end_date and start_date > end_date:
            raise ValidationError("start_date must not be after end_date")
        return self.study_record_repository.find_by_user(
            UserId(user_id), start_date=start_date, end_date=end_date, limit=limit
        )

    def get_study_record_by_date(self, user_id: int, study_date: date) -> StudyRecord:
        """
        Get the user's record for one day.

        Raises:
            StudyRecordNotFoundError: If the user did not study that day
        """
        record = self.study_record_repository.find_by_date(UserId(user_id), study_date)
        if record is None:
            raise StudyRecordNotFoundError(study_date)
        return record

    def get_study_stats(self, user_id: int) -> StudyStats:
        """Summarize today, the past week, the overall total and the current streak."""
        records = self.study_record_repository.find_by_user(UserId(user_id))
        return self.stats_calculator.calculate(records, self.today())
