"""Repository for WordSet domain entities."""

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vocabmaster.application.common.listing import ListOptions
from vocabmaster.domain.common.value_objects.ids import UserId, WordSetId
from vocabmaster.domain.vocabulary.entities.word_set import WordSet
from vocabmaster.exceptions import WordSetAlreadyImportedError
from vocabmaster.infrastructure.vocabulary.mappers.word_set_mapper import WordSetMapper
from vocabmaster.infrastructure.vocabulary.repositories.visibility import (
    in_collection,
    visible_to,
)
from vocabmaster.models import UserWordSet as UserWordSetORM
from vocabmaster.models import WordSet as WordSetORM


class WordSetRepository:
    """Repository for WordSet domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordSetMapper()

    def find_visible_by_id(self, word_set_id: WordSetId, user_id: UserId) -> WordSet | None:
        """Find a word set the user may see: public, owned, or imported."""
        stmt = select(WordSetORM).where(
            WordSetORM.id == word_set_id.value,
            visible_to(user_id),
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_public(self, options: ListOptions) -> list[WordSet]:
        """List public word sets ordered by created_at."""
        stmt = self._apply_options(
            select(WordSetORM).where(WordSetORM.is_public.is_(True)), options
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_in_collection(self, user_id: UserId, options: ListOptions) -> list[WordSet]:
        """List the word sets a user has imported, ordered by created_at."""
        stmt = self._apply_options(select(WordSetORM).where(in_collection(user_id)), options)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def is_in_collection(self, word_set_id: WordSetId, user_id: UserId) -> bool:
        """Check whether the user has imported the word set."""
        stmt = select(UserWordSetORM.id).where(
            UserWordSetORM.word_set_id == word_set_id.value,
            UserWordSetORM.user_id == user_id.value,
        )
        return self.db.execute(stmt).first() is not None

    def add_to_collection(self, word_set_id: WordSetId, user_id: UserId) -> None:
        """
        Import a word set into the user's collection.

        Raises:
            WordSetAlreadyImportedError: If the link already exists, including
                when a concurrent request created it first
        """
        self.db.add(UserWordSetORM(user_id=user_id.value, word_set_id=word_set_id.value))
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise WordSetAlreadyImportedError(word_set_id.value) from e

    def remove_from_collection(self, word_set_id: WordSetId, user_id: UserId) -> bool:
        """Remove a word set from the user's collection."""
        stmt = delete(UserWordSetORM).where(
            UserWordSetORM.word_set_id == word_set_id.value,
            UserWordSetORM.user_id == user_id.value,
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return bool(result.rowcount)

    def save(self, word_set: WordSet) -> WordSet:
        """
        Save a word set entity (create or update).

        Args:
            word_set: The word set entity to save

        Returns:
            Saved word set entity with database-generated values
        """
        if word_set.id.value == 0:
            # Create new
            orm_model = self.mapper.to_orm(word_set)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
        # Update existing
        orm_model = self.db.get(WordSetORM, word_set.id.value)
        if not orm_model:
            raise ValueError(f"WordSet {word_set.id.value} not found")
        self.mapper.to_orm(word_set, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def _apply_options(
        self, stmt: Select[tuple[WordSetORM]], options: ListOptions
    ) -> Select[tuple[WordSetORM]]:
        if options.category:
            stmt = stmt.where(WordSetORM.category == options.category)
        if options.ascending:
            stmt = stmt.order_by(WordSetORM.created_at.asc(), WordSetORM.id.asc())
        else:
            stmt = stmt.order_by(WordSetORM.created_at.desc(), WordSetORM.id.desc())
        if options.limit:
            stmt = stmt.limit(options.limit)
        return stmt
