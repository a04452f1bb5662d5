"""Domain service that summarizes a user's study records."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from vocabmaster.domain.learning.entities.study_record import StudyRecord

WEEK_WINDOW_DAYS = 7


@dataclass(frozen=True)
class StudyStats:
    """Aggregated study numbers shown on the dashboard."""

    today_words_count: int
    week_words_count: int
    total_words_count: int
    streak_count: int


class StudyStatsCalculator:
    """Computes dashboard statistics from daily study records.

    The week covers the seven days before today plus today itself. A streak
    is the run of consecutive studied days ending today; if nothing has been
    studied yet today, a run ending yesterday still counts.
    """

    def calculate(self, records: Sequence[StudyRecord], today: date) -> StudyStats:
        by_date: dict[date, int] = {}
        for record in records:
            by_date[record.study_date] = by_date.get(record.study_date, 0) + record.words_count

        week_start = today - timedelta(days=WEEK_WINDOW_DAYS)
        return StudyStats(
            today_words_count=by_date.get(today, 0),
            week_words_count=sum(
                count for day, count in by_date.items() if week_start <= day <= today
            ),
            total_words_count=sum(by_date.values()),
            streak_count=self._streak(by_date, today),
        )

    def _streak(self, by_date: dict[date, int], today: date) -> int:
        studied = {day for day, count in by_date.items() if count > 0}
        day = today if today in studied else today - timedelta(days=1)
        streak = 0
        while day in studied:
            streak += 1
            day -= timedelta(days=1)
        return streak
