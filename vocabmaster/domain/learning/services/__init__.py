from .study_stats_calculator import StudyStats, StudyStatsCalculator

__all__ = ["StudyStats", "StudyStatsCalculator"]
