"""
Word entity: one vocabulary entry in a word set.
"""

from dataclasses import dataclass
from datetime import datetime

from vocabmaster.domain.common.entity import Entity
from vocabmaster.domain.common.exceptions import ValidationError
from vocabmaster.domain.common.value_objects import WordId, WordSetId

# Domain constraints
MAX_ENGLISH_LENGTH = 100
MAX_CHINESE_LENGTH = 500


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def _validate_text(english: str, chinese: str) -> None:
    if not english or not english.strip():
        raise ValidationError("English word cannot be empty", field="english")
    if len(english) > MAX_ENGLISH_LENGTH:
        raise ValidationError(
            f"English word cannot exceed {MAX_ENGLISH_LENGTH} characters", field="english"
        )
    if not chinese or not chinese.strip():
        raise ValidationError("Translation cannot be empty", field="chinese")
    if len(chinese) > MAX_CHINESE_LENGTH:
        raise ValidationError(
            f"Translation cannot exceed {MAX_CHINESE_LENGTH} characters", field="chinese"
        )


@dataclass
class Word(Entity[WordId]):
    """
    A word with its translation.

    Business Rules:
    - English word and translation cannot be empty and are length limited
    - Pronunciation, example and category are optional; blanks become None
    - A word never moves to another word set
    """

    id: WordId
    word_set_id: WordSetId
    english: str
    chinese: str
    pronunciation: str | None = None
    example: str | None = None
    category: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_text(self.english, self.chinese)

    def update_content(
        self,
        english: str,
        chinese: str,
        pronunciation: str | None = None,
        example: str | None = None,
        category: str | None = None,
    ) -> None:
        """
        Replace the word's content.

        Raises:
            ValidationError: If english or chinese is empty or too long
        """
        _validate_text(english, chinese)
        self.english = english.strip()
        self.chinese = chinese.strip()
        self.pronunciation = _blank_to_none(pronunciation)
        self.example = _blank_to_none(example)
        self.category = _blank_to_none(category)

    @classmethod
    def create(
        cls,
        word_set_id: WordSetId,
        english: str,
        chinese: str,
        pronunciation: str | None = None,
        example: str | None = None,
        category: str | None = None,
    ) -> "Word":
        """Create a new word (ID will be 0 until persisted)."""
        _validate_text(english, chinese)
        return cls(
            id=WordId.generate(),
            word_set_id=word_set_id,
            english=english.strip(),
            chinese=chinese.strip(),
            pronunciation=_blank_to_none(pronunciation),
            example=_blank_to_none(example),
            category=_blank_to_none(category),
        )

    @classmethod
    def create_with_id(
        cls,
        id: WordId,
        word_set_id: WordSetId,
        english: str,
        chinese: str,
        pronunciation: str | None,
        example: str | None,
        category: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Word":
        """Reconstitute a word from persistence."""
        return cls(
            id=id,
            word_set_id=word_set_id,
            english=english,
            chinese=chinese,
            pronunciation=pronunciation,
            example=example,
            category=category,
            created_at=created_at,
            updated_at=updated_at,
        )
