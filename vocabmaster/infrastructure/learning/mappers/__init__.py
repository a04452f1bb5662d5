from .study_record_mapper import StudyRecordMapper

__all__ = ["StudyRecordMapper"]
