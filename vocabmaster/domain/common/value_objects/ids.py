from dataclasses import dataclass
from uuid import UUID, uuid4

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier, issued by the external auth provider."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("UserId must be non-negative")


@dataclass(frozen=True)
class WordSetId(EntityId):
    """Strongly-typed word set identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("WordSetId must be non-negative")


@dataclass(frozen=True)
class WordId(EntityId):
    """Strongly-typed word identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("WordId must be non-negative")


@dataclass(frozen=True)
class StudyRecordId(EntityId):
    """Strongly-typed study record identifier."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("StudyRecordId must be non-negative")


@dataclass(frozen=True)
class ReviewSessionId(EntityId):
    """Identifier of a live review session. Never stored in the database."""

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise ValueError("ReviewSessionId must wrap a UUID")

    @classmethod
    def generate(cls) -> "ReviewSessionId":
        return cls(uuid4())
