"""Mapper for StudyRecord ORM ↔ Domain conversion."""

from vocabmaster.domain.common.value_objects import StudyRecordId, UserId
from vocabmaster.domain.learning.entities.study_record import StudyRecord
from vocabmaster.models import StudyRecord as StudyRecordORM


class StudyRecordMapper:
    """Mapper for StudyRecord ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: StudyRecordORM) -> StudyRecord:
        """Convert ORM model to domain entity."""
        return StudyRecord.create_with_id(
            id=StudyRecordId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            study_date=orm_model.study_date,
            words_count=orm_model.words_count,
            study_time_minutes=orm_model.study_time_minutes,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: StudyRecord, orm_model: StudyRecordORM | None = None
    ) -> StudyRecordORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Only the tallies change after creation
            orm_model.words_count = domain_entity.words_count
            orm_model.study_time_minutes = domain_entity.study_time_minutes
            return orm_model

        return StudyRecordORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            study_date=domain_entity.study_date,
            words_count=domain_entity.words_count,
            study_time_minutes=domain_entity.study_time_minutes,
        )
