"""
Base class for Entities.

Entities keep their identity while their attributes change: a word whose
translation is edited is still the same word. Two entities are equal when
their ids are equal.

Example:
    @dataclass
    class Word(Entity[WordId]):
        id: WordId
        english: str

        def rename(self, english: str) -> None:
            self.english = english
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Wraps a database integer or a UUID so that a ``WordId`` can never be
    passed where a ``WordSetId`` is expected.
    """

    value: int | UUID

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and self.value <= 0:
            raise ValueError(f"{self.__class__.__name__} must be positive")

    def __int__(self) -> int:
        if isinstance(self.value, int):
            return self.value
        raise TypeError(f"Cannot convert UUID-based {self.__class__.__name__} to int")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id for entities the database has not stored yet."""
        return cls(0)

    def to_primitive(self) -> int | str:
        """Convert to primitive for serialization."""
        if isinstance(self.value, int):
            return self.value
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an ``id`` attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
