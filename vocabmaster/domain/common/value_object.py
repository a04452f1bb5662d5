"""
Base class for Value Objects.

A value object has no identity: two instances holding the same attributes
are interchangeable. Flashcards handed to a review session are value
objects, so a session can compare and hash them freely.

Example:
    @dataclass(frozen=True)
    class Phonetic(ValueObject):
        value: str

        def __post_init__(self) -> None:
            if not self.value.strip():
                raise ValidationError("Phonetic cannot be blank")
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Subclasses are frozen dataclasses and validate themselves in
    ``__post_init__``.
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Convert to a primitive Python type for serialization.

        Single-attribute value objects collapse to that attribute.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
