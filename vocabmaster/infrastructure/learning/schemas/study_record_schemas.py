"""Pydantic schemas for study record API responses."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class StudyRecord(BaseModel):
    """Schema for StudyRecord response."""

    id: int
    study_date: date
    words_count: int
    study_time_minutes: int
    created_at: datetime | None
    updated_at: datetime | None


class StudyRecordsListResponse(BaseModel):
    """Schema for list of study records response."""

    records: list[StudyRecord] = Field(..., description="Study records, newest day first")


class StudyStats(BaseModel):
    """Schema for study statistics response."""

    today_words_count: int = Field(..., description="Words reviewed today")
    week_words_count: int = Field(..., description="Words reviewed over the past week")
    total_words_count: int = Field(..., description="Words reviewed overall")
    streak_count: int = Field(..., description="Consecutive days with study")
