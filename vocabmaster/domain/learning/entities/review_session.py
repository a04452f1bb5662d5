"""
Review session state machine.

A review session walks a fixed deck of cards. The user flips the current
card, grades their own recall as correct or incorrect, and may undo the
last grade. Two logs move in lockstep:

- ``grade_log``: one grade per ``grade()`` call
- ``position_log``: one ``(cursor, is_flipped)`` entry per visited card,
  starting with the initial card, so it is always one longer than
  ``grade_log``

``undo()`` pops one entry off each log and restores the cursor and flip
state the previous card was left in. Reaching the end of the deck wraps
back to the first card; the session never ends by itself.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import StrEnum

from vocabmaster.domain.learning.entities.card import Card


class Grade(StrEnum):
    """User's self-assessment of recall for one card."""

    CORRECT = "correct"
    INCORRECT = "incorrect"


class ReviewResult(StrEnum):
    """Outcome of a review operation.

    Rejected operations are routine UI states (a disabled undo button, an
    empty word set), so they are returned instead of raised.
    """

    APPLIED = "applied"
    EMPTY_DECK = "empty_deck"
    UNDO_UNAVAILABLE = "undo_unavailable"


@dataclass(frozen=True)
class PositionSnapshot:
    """Cursor and flip state of one visited card."""

    cursor: int
    is_flipped: bool


@dataclass(frozen=True)
class ReviewSnapshot:
    """Read-only view of a review session for rendering."""

    cursor: int
    is_flipped: bool
    correct_count: int
    incorrect_count: int
    undo_available: bool
    card_count: int
    graded_count: int
    current_card: Card | None


ReviewListener = Callable[[ReviewSnapshot], None]


class ReviewSession:
    """Flip, grade and undo over an ordered deck of cards."""

    def __init__(self, cards: Iterable[Card]) -> None:
        self._cards: tuple[Card, ...] = tuple(cards)
        self._cursor = 0
        self._is_flipped = False
        self._grade_log: list[Grade] = []
        self._position_log: list[PositionSnapshot] = [PositionSnapshot(0, False)]
        self._correct_count = 0
        self._incorrect_count = 0
        self._listeners: list[ReviewListener] = []

    @property
    def cards(self) -> tuple[Card, ...]:
        return self._cards

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def is_flipped(self) -> bool:
        return self._is_flipped

    @property
    def correct_count(self) -> int:
        return self._correct_count

    @property
    def incorrect_count(self) -> int:
        return self._incorrect_count

    @property
    def grade_log(self) -> tuple[Grade, ...]:
        return tuple(self._grade_log)

    @property
    def position_log(self) -> tuple[PositionSnapshot, ...]:
        return tuple(self._position_log)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def undo_available(self) -> bool:
        return bool(self._grade_log) and len(self._position_log) > 1

    @property
    def current_card(self) -> Card | None:
        """Card under the cursor, or None for an empty deck."""
        if self.is_empty:
            return None
        return self._cards[self._cursor]

    def snapshot(self) -> ReviewSnapshot:
        """Capture the state the UI renders."""
        return ReviewSnapshot(
            cursor=self._cursor,
            is_flipped=self._is_flipped,
            correct_count=self._correct_count,
            incorrect_count=self._incorrect_count,
            undo_available=self.undo_available,
            card_count=len(self._cards),
            graded_count=len(self._grade_log),
            current_card=self.current_card,
        )

    def subscribe(self, listener: ReviewListener) -> Callable[[], None]:
        """
        Call ``listener`` with a fresh snapshot after every applied change.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def flip(self) -> ReviewResult:
        """Show the other face of the current card."""
        if self.is_empty:
            return ReviewResult.EMPTY_DECK

        self._is_flipped = not self._is_flipped
        self._position_log[-1] = PositionSnapshot(self._cursor, self._is_flipped)
        self._notify()
        return ReviewResult.APPLIED

    def grade(self, outcome: Grade) -> ReviewResult:
        """
        Record how well the current card was recalled and move to the next one.

        The position the card was left in (including its flip state) is kept
        so that ``undo()`` can return to it exactly.
        """
        if self.is_empty:
            return ReviewResult.EMPTY_DECK

        self._grade_log.append(outcome)
        if outcome == Grade.CORRECT:
            self._correct_count += 1
        else:
            self._incorrect_count += 1

        self._position_log[-1] = PositionSnapshot(self._cursor, self._is_flipped)
        self._cursor = (self._cursor + 1) % len(self._cards)
        self._is_flipped = False
        self._position_log.append(PositionSnapshot(self._cursor, False))
        self._notify()
        return ReviewResult.APPLIED

    def undo(self) -> ReviewResult:
        """Reverse the most recent ``grade()`` call. There is no redo."""
        if not self.undo_available:
            return ReviewResult.UNDO_UNAVAILABLE

        last_grade = self._grade_log.pop()
        # Counts are floored at zero even if they drifted from the log.
        if last_grade == Grade.CORRECT:
            self._correct_count = max(0, self._correct_count - 1)
        else:
            self._incorrect_count = max(0, self._incorrect_count - 1)

        self._position_log.pop()
        previous = self._position_log[-1]
        self._cursor = previous.cursor
        self._is_flipped = previous.is_flipped
        self._notify()
        return ReviewResult.APPLIED

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
