"""Mapper for WordSet ORM ↔ Domain conversion."""

from vocabmaster.domain.common.value_objects import UserId, WordSetId
from vocabmaster.domain.vocabulary.entities.word_set import Difficulty, WordSet
from vocabmaster.models import WordSet as WordSetORM


class WordSetMapper:
    """Mapper for WordSet ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: WordSetORM) -> WordSet:
        """Convert ORM model to domain entity."""
        return WordSet.create_with_id(
            id=WordSetId(orm_model.id),
            title=orm_model.title,
            owner_id=UserId(orm_model.owner_id) if orm_model.owner_id else None,
            description=orm_model.description,
            category=orm_model.category,
            difficulty=Difficulty(orm_model.difficulty) if orm_model.difficulty else None,
            tags=list(orm_model.tags or []),
            is_public=orm_model.is_public,
            word_count=orm_model.word_count,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: WordSet, orm_model: WordSetORM | None = None) -> WordSetORM:
        """Convert domain entity to ORM model."""
        owner_id = domain_entity.owner_id.value if domain_entity.owner_id else None
        difficulty = domain_entity.difficulty.value if domain_entity.difficulty else None
        tags = list(domain_entity.tags) or None

        if orm_model:
            # Update existing
            orm_model.owner_id = owner_id
            orm_model.title = domain_entity.title
            orm_model.description = domain_entity.description
            orm_model.category = domain_entity.category
            orm_model.difficulty = difficulty
            orm_model.tags = tags
            orm_model.is_public = domain_entity.is_public
            orm_model.word_count = domain_entity.word_count
            return orm_model

        # Create new
        return WordSetORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            owner_id=owner_id,
            title=domain_entity.title,
            description=domain_entity.description,
            category=domain_entity.category,
            difficulty=difficulty,
            tags=tags,
            is_public=domain_entity.is_public,
            word_count=domain_entity.word_count,
        )
