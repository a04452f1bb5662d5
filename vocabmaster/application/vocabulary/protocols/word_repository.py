"""Protocol for Word repository in vocabulary context."""

from typing import Protocol

from vocabmaster.application.common.listing import ListOptions
from vocabmaster.domain.common.value_objects.ids import UserId, WordId, WordSetId
from vocabmaster.domain.vocabulary.entities.word import Word


class WordRepositoryProtocol(Protocol):
    """Protocol for Word repository operations in vocabulary context."""

    def find_by_id(self, word_id: WordId) -> Word | None:
        """
        Find a word by ID.

        Args:
            word_id: The word ID

        Returns:
            Word entity if found, None otherwise
        """
        ...

    def find_by_word_set(self, word_set_id: WordSetId, options: ListOptions) -> list[Word]:
        """
        Get the words of a word set.

        Args:
            word_set_id: The word set ID
            options: Ordering by created_at and limit

        Returns:
            List of word entities
        """
        ...

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
        ...

    def save(self, word: Word) -> Word:
        """
        Save a word entity (create or update).

        Args:
            word: The word entity to save

        Returns:
            Saved word entity with database-generated values
        """
        ...

    def delete(self, word_id: WordId) -> bool:
        """
        Delete a word.

        Args:
            word_id: The word ID

        Returns:
            True if deleted, False if not found
        """
        ...
