"""Word set entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from vocabmaster.domain.common.entity import Entity
from vocabmaster.domain.common.exceptions import ValidationError
from vocabmaster.domain.common.value_objects import UserId, WordSetId

# Domain constraints
MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_CATEGORY_LENGTH = 50


class Difficulty(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass
class WordSet(Entity[WordSetId]):
    """
    A titled collection of words.

    Business Rules:
    - Title cannot be empty and is at most MAX_TITLE_LENGTH characters
    - Description and category are optional and length limited
    - word_count mirrors the number of words and never goes negative
    - Public sets are visible to everyone; private sets only to their
      owner and to users who imported them
    """

    id: WordSetId
    title: str
    owner_id: UserId | None = None
    description: str | None = None
    category: str | None = None
    difficulty: Difficulty | None = None
    tags: list[str] = field(default_factory=list)
    is_public: bool = True
    word_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Title cannot be empty", field="title")
        if len(self.title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Title cannot exceed {MAX_TITLE_LENGTH} characters", field="title"
            )
        if self.description and len(self.description) > MAX_DESCRIPTION_LENGTH:
            raise ValidationError(
                f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters",
                field="description",
            )
        if self.category and len(self.category) > MAX_CATEGORY_LENGTH:
            raise ValidationError(
                f"Category cannot exceed {MAX_CATEGORY_LENGTH} characters", field="category"
            )
        if self.word_count < 0:
            raise ValidationError("Word count cannot be negative", field="word_count")

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id is not None and self.owner_id == user_id

    def word_added(self) -> None:
        self.word_count += 1

    def word_removed(self) -> None:
        self.word_count = max(0, self.word_count - 1)

    @classmethod
    def create(
        cls,
        owner_id: UserId,
        title: str,
        description: str | None = None,
        category: str | None = None,
        difficulty: Difficulty | None = None,
        tags: list[str] | None = None,
        is_public: bool = True,
    ) -> "WordSet":
        """Create a new, empty word set (ID will be 0 until persisted)."""
        return cls(
            id=WordSetId.generate(),
            owner_id=owner_id,
            title=title.strip(),
            description=_blank_to_none(description),
            category=_blank_to_none(category),
            difficulty=difficulty,
            tags=[tag.strip() for tag in tags or [] if tag.strip()],
            is_public=is_public,
            word_count=0,
        )

    @classmethod
    def create_with_id(
        cls,
        id: WordSetId,
        title: str,
        owner_id: UserId | None,
        description: str | None,
        category: str | None,
        difficulty: Difficulty | None,
        tags: list[str],
        is_public: bool,
        word_count: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "WordSet":
        """Reconstitute a word set from persistence."""
        return cls(
            id=id,
            title=title,
            owner_id=owner_id,
            description=description,
            category=category,
            difficulty=difficulty,
            tags=tags,
            is_public=is_public,
            word_count=word_count,
            created_at=created_at,
            updated_at=updated_at,
        )
