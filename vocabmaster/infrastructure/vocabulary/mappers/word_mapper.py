"""Mapper for Word ORM ↔ Domain conversion."""

from vocabmaster.domain.common.value_objects import WordId, WordSetId
from vocabmaster.domain.vocabulary.entities.word import Word
from vocabmaster.models import Word as WordORM


class WordMapper:
    """Mapper for Word ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: WordORM) -> Word:
        """Convert ORM model to domain entity."""
        return Word.create_with_id(
            id=WordId(orm_model.id),
            word_set_id=WordSetId(orm_model.word_set_id),
            english=orm_model.english,
            chinese=orm_model.chinese,
            pronunciation=orm_model.pronunciation,
            example=orm_model.example,
            category=orm_model.category,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Word, orm_model: WordORM | None = None) -> WordORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing; the word set never changes
            orm_model.english = domain_entity.english
            orm_model.chinese = domain_entity.chinese
            orm_model.pronunciation = domain_entity.pronunciation
            orm_model.example = domain_entity.example
            orm_model.category = domain_entity.category
            return orm_model

        # Create new
        return WordORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            word_set_id=domain_entity.word_set_id.value,
            english=domain_entity.english,
            chinese=domain_entity.chinese,
            pronunciation=domain_entity.pronunciation,
            example=domain_entity.example,
            category=domain_entity.category,
        )
