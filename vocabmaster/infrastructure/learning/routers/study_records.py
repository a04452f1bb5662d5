"""API routes for study records and statistics."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from vocabmaster.application.common.listing import MAX_LIST_LIMIT
from vocabmaster.application.learning.use_cases.study_record_use_case import StudyRecordUseCase
from vocabmaster.core import container
from vocabmaster.domain.learning.entities.study_record import StudyRecord as StudyRecordEntity
from vocabmaster.infrastructure.common.di import inject_use_case
from vocabmaster.infrastructure.identity.dependencies import CurrentUserId
from vocabmaster.infrastructure.learning.schemas import (
    StudyRecord,
    StudyRecordsListResponse,
    StudyStats,
)

router = APIRouter(prefix="/study-records", tags=["study-records"])


def to_study_record_schema(record: StudyRecordEntity) -> StudyRecord:
    return StudyRecord(
        id=record.id.value,
        study_date=record.study_date,
        words_count=record.words_count,
        study_time_minutes=record.study_time_minutes,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


@router.get("", response_model=StudyRecordsListResponse, status_code=status.HTTP_200_OK)
def get_study_records(
    current_user_id: CurrentUserId,
    start_date: date | None = None,
    end_date: date | None = None,
    limit: Annotated[int | None, Query(ge=1, le=MAX_LIST_LIMIT)] = None,
    use_case: StudyRecordUseCase = Depends(inject_use_case(container.study_record_use_case)),
) -> StudyRecordsListResponse:
    """Get the user's study records, newest day first."""
    records = use_case.get_study_records(
        user_id=current_user_id, start_date=start_date, end_date=end_date, limit=limit
    )
    return StudyRecordsListResponse(records=[to_study_record_schema(r) for r in records])


# Declared before /{study_date} so "stats" is not parsed as a date
@router.get("/stats", response_model=StudyStats, status_code=status.HTTP_200_OK)
def get_study_stats(
    current_user_id: CurrentUserId,
    use_case: StudyRecordUseCase = Depends(inject_use_case(container.study_record_use_case)),
) -> StudyStats:
    """Get today's, this week's and overall word counts plus the current streak."""
    stats = use_case.get_study_stats(user_id=current_user_id)
    return StudyStats(
        today_words_count=stats.today_words_count,
        week_words_count=stats.week_words_count,
        total_words_count=stats.total_words_count,
        streak_count=stats.streak_count,
    )


@router.get("/{study_date}", response_model=StudyRecord, status_code=status.HTTP_200_OK)
def get_study_record_by_date(
    study_date: date,
    current_user_id: CurrentUserId,
    use_case: StudyRecordUseCase = Depends(inject_use_case(container.study_record_use_case)),
) -> StudyRecord:
    """Get the user's study record for one day."""
    record = use_case.get_study_record_by_date(user_id=current_user_id, study_date=study_date)
    return to_study_record_schema(record)
