"""Use case for word operations."""

import structlog

from vocabmaster.application.common.listing import ListOptions
from vocabmaster.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from vocabmaster.application.vocabulary.protocols.word_set_repository import (
    WordSetRepositoryProtocol,
)
from vocabmaster.domain.common.value_objects.ids import UserId, WordId, WordSetId
from vocabmaster.domain.vocabulary.entities.word import Word
from vocabmaster.domain.vocabulary.entities.word_set import WordSet
from vocabmaster.domain.vocabulary.exceptions import WordSetNotInCollectionError
from vocabmaster.exceptions import WordNotFoundError, WordSetNotFoundError

logger = structlog.get_logger(__name__)


class WordUseCase:
    """Use case for word CRUD and search."""

    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        word_set_repository: WordSetRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.word_repository = word_repository
        self.word_set_repository = word_set_repository

    def get_words_for_word_set(self, word_set_id: int, user_id: int) -> list[Word]:
        """
        Get the words of a word set in deck order (oldest first).

        Raises:
            WordSetNotFoundError: If the set is not visible to the user
        """
        word_set = self._get_visible_word_set(word_set_id, user_id)
        return self.word_repository.find_by_word_set(word_set.id, ListOptions(ascending=True))

    def search_words(
        self,
        user_id: int,
        keyword: str | None,
        word_set_id: int | None,
        options: ListOptions,
    ) -> list[Word]:
        """
        Search words across the word sets visible to the user.

        Args:
            user_id: ID of the user
            keyword: Substring of english, chinese or example (case-insensitive)
            word_set_id: Restrict to this word set
            options: Category filter, ordering and limit

        Returns:
            List of matching words
        """
        keyword = keyword.strip() if keyword else None
        return self.word_repository.search(
            UserId(user_id),
            keyword or None,
            WordSetId(word_set_id) if word_set_id is not None else None,
            options,
        )

    def get_word(self, word_id: int, user_id: int) -> Word:
        """
        Get a word whose word set is visible to the user.

        Raises:
            WordNotFoundError: If the word does not exist or is not visible
        """
        word = self.word_repository.find_by_id(WordId(word_id))
        if not word:
            raise WordNotFoundError(word_id)
        visible = self.word_set_repository.find_visible_by_id(word.word_set_id, UserId(user_id))
        if not visible:
            raise WordNotFoundError(word_id)
        return word

    def create_word(
        self,
        user_id: int,
        word_set_id: int,
        english: str,
        chinese: str,
        pronunciation: str | None = None,
        example: str | None = None,
        category: str | None = None,
    ) -> Word:
        """
        Add a word to a word set in the user's collection.

        Args:
            user_id: ID of the user
            word_set_id: ID of the target word set
            english: The word
            chinese: Its translation
            pronunciation: Optional phonetic spelling
            example: Optional example sentence
            category: Optional category

        Returns:
            Created word domain entity

        Raises:
            WordSetNotFoundError: If the set is not visible to the user
            WordSetNotInCollectionError: If the set is not in the user's collection
        """
        word_set = self._get_collection_word_set(word_set_id, user_id)

        word = Word.create(
            word_set_id=word_set.id,
            english=english,
            chinese=chinese,
            pronunciation=pronunciation,
            example=example,
            category=category,
        )
        word = self.word_repository.save(word)

        word_set.word_added()
        self.word_set_repository.save(word_set)

        logger.info("created_word", word_id=word.id.value, word_set_id=word_set_id)
        return word

    def update_word(
        self,
        word_id: int,
        user_id: int,
        english: str,
        chinese: str,
        pronunciation: str | None = None,
        example: str | None = None,
        category: str | None = None,
    ) -> Word:
        """
        Replace a word's content. The word stays in its word set.

        Raises:
            WordNotFoundError: If the word does not exist or is not visible
            WordSetNotInCollectionError: If the word's set is not in the user's collection
        """
        word = self.get_word(word_id, user_id)
        self._get_collection_word_set(word.word_set_id.value, user_id)

        word.update_content(
            english=english,
            chinese=chinese,
            pronunciation=pronunciation,
            example=example,
            category=category,
        )
        word = self.word_repository.save(word)

        logger.info("updated_word", word_id=word_id)
        return word

    def delete_word(self, word_id: int, user_id: int) -> None:
        """
        Delete a word and decrement its word set's count.

        Raises:
            WordNotFoundError: If the word does not exist or is not visible
            WordSetNotInCollectionError: If the word's set is not in the user's collection
        """
        word = self.get_word(word_id, user_id)
        word_set = self._get_collection_word_set(word.word_set_id.value, user_id)

        deleted = self.word_repository.delete(word.id)
        if not deleted:
            raise WordNotFoundError(word_id)

        word_set.word_removed()
        self.word_set_repository.save(word_set)

        logger.info("deleted_word", word_id=word_id, word_set_id=word_set.id.value)

    def _get_visible_word_set(self, word_set_id: int, user_id: int) -> WordSet:
        word_set = self.word_set_repository.find_visible_by_id(
            WordSetId(word_set_id), UserId(user_id)
        )
        if not word_set:
            raise WordSetNotFoundError(word_set_id)
        return word_set

    def _get_collection_word_set(self, word_set_id: int, user_id: int) -> WordSet:
        word_set = self._get_visible_word_set(word_set_id, user_id)
        user_id_vo = UserId(user_id)
        if not word_set.is_owned_by(user_id_vo) and not self.word_set_repository.is_in_collection(
            word_set.id, user_id_vo
        ):
            raise WordSetNotInCollectionError(word_set_id)
        return word_set
