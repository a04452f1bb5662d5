"""Repository for Word domain entities."""

from sqlalchemy import Select, or_, select
from sqlalchemy.orm import Session

from vocabmaster.application.common.listing import ListOptions
from vocabmaster.domain.common.value_objects.ids import UserId, WordId, WordSetId
from vocabmaster.domain.vocabulary.entities.word import Word
from vocabmaster.infrastructure.vocabulary.mappers.word_mapper import WordMapper
from vocabmaster.infrastructure.vocabulary.repositories.visibility import visible_to
from vocabmaster.models import Word as WordORM
from vocabmaster.models import WordSet as WordSetORM


def _like_pattern(keyword: str) -> str:
    escaped = keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class WordRepository:
    """Repository for Word domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WordMapper()

    def find_by_id(self, word_id: WordId) -> Word | None:
        """Find a word by ID."""
        orm_model = self.db.get(WordORM, word_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_word_set(self, word_set_id: WordSetId, options: ListOptions) -> list[Word]:
        """
        Get the words of a word set.

        Args:
            word_set_id: The word set ID
            options: Ordering by created_at and limit

        Returns:
            List of word entities
        """
        stmt = self._apply_options(
            select(WordORM).where(WordORM.word_set_id == word_set_id.value), options
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def search(
        self,
        user_id: UserId,
        keyword: str | None,
        word_set_id: WordSetId | None,
        options: ListOptions,
    ) -> list[Word]:
        """
        Search words in word sets visible to the user.

        Args:
            user_id: The user ID for the visibility check
            keyword: Case-insensitive substring of english, chinese or example
            word_set_id: Restrict to one word set
            options: Category filter, ordering by created_at and limit

        Returns:
            List of matching word entities
        """
        stmt = select(WordORM).join(WordSetORM, WordORM.word_set_id == WordSetORM.id)
        stmt = stmt.where(visible_to(user_id))
        if word_set_id is not None:
            stmt = stmt.where(WordORM.word_set_id == word_set_id.value)
        if keyword:
            pattern = _like_pattern(keyword)
            stmt = stmt.where(
                or_(
                    WordORM.english.ilike(pattern, escape="\\"),
                    WordORM.chinese.ilike(pattern, escape="\\"),
                    WordORM.example.ilike(pattern, escape="\\"),
                )
            )
        stmt = self._apply_options(stmt, options)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, word: Word) -> Word:
        """
        Save a word entity (create or update).

        Args:
            word: The word entity to save

        Returns:
            Saved word entity with database-generated values
        """
        if word.id.value == 0:
            # Create new
            orm_model = self.mapper.to_orm(word)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            return self.mapper.to_domain(orm_model)
        # Update existing
        orm_model = self.db.get(WordORM, word.id.value)
        if not orm_model:
            raise ValueError(f"Word {word.id.value} not found")
        self.mapper.to_orm(word, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, word_id: WordId) -> bool:
        """
        Delete a word.

        Args:
            word_id: The word ID

        Returns:
            True if deleted, False if not found
        """
        orm_model = self.db.get(WordORM, word_id.value)
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        return True

    def _apply_options(
        self, stmt: Select[tuple[WordORM]], options: ListOptions
    ) -> Select[tuple[WordORM]]:
        if options.category:
            stmt = stmt.where(WordORM.category == options.category)
        if options.ascending:
            stmt = stmt.order_by(WordORM.created_at.asc(), WordORM.id.asc())
        else:
            stmt = stmt.order_by(WordORM.created_at.desc(), WordORM.id.desc())
        if options.limit:
            stmt = stmt.limit(options.limit)
        return stmt
