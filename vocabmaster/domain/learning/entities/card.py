"""Flashcard value object shown during a review session."""

from dataclasses import dataclass

from vocabmaster.domain.common.exceptions import ValidationError
from vocabmaster.domain.common.value_object import ValueObject
from vocabmaster.domain.common.value_objects import WordId


@dataclass(frozen=True)
class Card(ValueObject):
    """
    One vocabulary entry as the review session sees it.

    The front shows the word, the back its translation. Cards are
    immutable; a review session never changes their content.
    """

    id: WordId
    front_text: str
    back_text: str
    phonetic: str | None = None
    example_sentence: str | None = None
    tag: str | None = None

    def __post_init__(self) -> None:
        if not self.front_text or not self.front_text.strip():
            raise ValidationError("Card front cannot be empty", field="front_text")
        if not self.back_text or not self.back_text.strip():
            raise ValidationError("Card back cannot be empty", field="back_text")
