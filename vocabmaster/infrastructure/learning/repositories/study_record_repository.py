"""Repository for StudyRecord domain entities."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vocabmaster.domain.common.value_objects.ids import UserId
from vocabmaster.domain.learning.entities.study_record import StudyRecord
from vocabmaster.infrastructure.learning.mappers.study_record_mapper import StudyRecordMapper
from vocabmaster.models import StudyRecord as StudyRecordORM


class StudyRecordRepository:
    """Repository for StudyRecord domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudyRecordMapper()

    def find_by_date(self, user_id: UserId, study_date: date) -> StudyRecord | None:
        """Find the user's record for one day."""
        stmt = select(StudyRecordORM).where(
            StudyRecordORM.user_id == user_id.value,
            StudyRecordORM.study_date == study_date,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user(
        self,
        user_id: UserId,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int | None = None,
    ) -> list[StudyRecord]:
        """Get a user's records, newest day first."""
        stmt = select(StudyRecordORM).where(StudyRecordORM.user_id == user_id.value)
        if start_date is not None:
            stmt = stmt.where(StudyRecordORM.study_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(StudyRecordORM.study_date <= end_date)
        stmt = stmt.order_by(StudyRecordORM.study_date.desc())
        if limit:
            stmt = stmt.limit(limit)

        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, record: StudyRecord) -> StudyRecord:
        """
        Save a study record entity (create or update).

        Args:
            record: The study record entity to save

        Returns:
            Saved study record entity with database-generated values
        """
        if record.id.value == 0:
            # Create new
            orm_model = self.mapper.to_orm(record)
            self.db.add(orm_model)
            try:
                self.db.commit()
            except IntegrityError:
                # Another close created the day's record first
                self.db.rollback()
                raise
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
        # Update existing
        orm_model = self.db.get(StudyRecordORM, record.id.value)
        if not orm_model:
            raise ValueError(f"StudyRecord {record.id.value} not found")
        self.mapper.to_orm(record, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
