"""Protocol for WordSet repository in vocabulary context."""

from typing import Protocol

from vocabmaster.application.common.listing import ListOptions
from vocabmaster.domain.common.value_objects.ids import UserId, WordSetId
from vocabmaster.domain.vocabulary.entities.word_set import WordSet


class WordSetRepositoryProtocol(Protocol):
    """Protocol for WordSet repository operations in vocabulary context."""

    def find_visible_by_id(self, word_set_id: WordSetId, user_id: UserId) -> WordSet | None:
        """
        Find a word set the user may see: public, owned, or imported.

        Args:
            word_set_id: The word set ID
            user_id: The user ID for the visibility check

        Returns:
            WordSet entity if found and visible, None otherwise
        """
        ...

    def find_public(self, options: ListOptions) -> list[WordSet]:
        """
        List public word sets.

        Args:
            options: Category filter, ordering by created_at and limit

        Returns:
            List of word set entities
        """
        ...

    def find_in_collection(self, user_id: UserId, options: ListOptions) -> list[WordSet]:
        """
        List the word sets a user has imported.

        Args:
            user_id: The user ID
            options: Category filter, ordering by created_at and limit

        Returns:
            List of word set entities
        """
        ...

    def is_in_collection(self, word_set_id: WordSetId, user_id: UserId) -> bool:
        """Check whether the user has imported the word set."""
        ...

    def add_to_collection(self, word_set_id: WordSetId, user_id: UserId) -> None:
        """Import a word set; raises WordSetAlreadyImportedError if already linked."""
        ...

    def remove_from_collection(self, word_set_id: WordSetId, user_id: UserId) -> bool:
        """
        Remove a word set from the user's collection.

        Returns:
            True if a link was removed, False if there was none
        """
        ...

    def save(self, word_set: WordSet) -> WordSet:
        """
        Save a word set entity (create or update).

        Args:
            word_set: The word set entity to save

        Returns:
            Saved word set entity with database-generated values
        """
        ...
