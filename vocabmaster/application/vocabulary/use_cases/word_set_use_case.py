"""Use case for word set browsing, creation and import."""

from typing import Literal

import structlog

from vocabmaster.application.common.listing import ListOptions
from vocabmaster.application.vocabulary.protocols.word_set_repository import (
    WordSetRepositoryProtocol,
)
from vocabmaster.domain.common.value_objects.ids import UserId, WordSetId
from vocabmaster.domain.vocabulary.entities.word_set import Difficulty, WordSet
from vocabmaster.exceptions import WordSetAlreadyImportedError, WordSetNotFoundError

logger = structlog.get_logger(__name__)

WordSetScope = Literal["public", "mine"]


class WordSetUseCase:
    """Use case for word set operations."""

    def __init__(self, word_set_repository: WordSetRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.word_set_repository = word_set_repository

    def list_word_sets(
        self, user_id: int, scope: WordSetScope, options: ListOptions
    ) -> list[WordSet]:
        """
        List word sets from the public catalogue or the user's collection.

        Args:
            user_id: ID of the user
            scope: "public" for the catalogue, "mine" for imported sets
            options: Category filter, ordering and limit

        Returns:
            List of word set entities
        """
        if scope == "mine":
            return self.word_set_repository.find_in_collection(UserId(user_id), options)
        return self.word_set_repository.find_public(options)

    def get_word_set(self, word_set_id: int, user_id: int) -> WordSet:
        """
        Get a word set visible to the user.

        Raises:
            WordSetNotFoundError: If the set does not exist or is private to someone else
        """
        word_set = self.word_set_repository.find_visible_by_id(
            WordSetId(word_set_id), UserId(user_id)
        )
        if not word_set:
            raise WordSetNotFoundError(word_set_id)
        return word_set

    def create_word_set(
        self,
        user_id: int,
        title: str,
        description: str | None = None,
        category: str | None = None,
        difficulty: Difficulty | None = None,
        tags: list[str] | None = None,
        is_public: bool = True,
    ) -> WordSet:
        """
        Create a new word set and put it in the creator's collection.

        Args:
            user_id: ID of the creating user
            title: Title of the set
            description: Optional description
            category: Optional category
            difficulty: Optional difficulty level
            tags: Optional tags
            is_public: Whether other users can browse and import the set

        Returns:
            Created word set domain entity
        """
        user_id_vo = UserId(user_id)

        word_set = WordSet.create(
            owner_id=user_id_vo,
            title=title,
            description=description,
            category=category,
            difficulty=difficulty,
            tags=tags,
            is_public=is_public,
        )
        word_set = self.word_set_repository.save(word_set)
        self.word_set_repository.add_to_collection(word_set.id, user_id_vo)

        logger.info("created_word_set", word_set_id=word_set.id.value, user_id=user_id)
        return word_set

    def import_word_set(self, word_set_id: int, user_id: int) -> WordSet:
        """
        Import a visible word set into the user's collection.

        Raises:
            WordSetNotFoundError: If the set is not visible to the user
            WordSetAlreadyImportedError: If the set is already in the collection
        """
        word_set = self.get_word_set(word_set_id, user_id)
        user_id_vo = UserId(user_id)

        if self.word_set_repository.is_in_collection(word_set.id, user_id_vo):
            raise WordSetAlreadyImportedError(word_set_id)

        self.word_set_repository.add_to_collection(word_set.id, user_id_vo)

        logger.info("imported_word_set", word_set_id=word_set_id, user_id=user_id)
        return word_set

    def is_word_set_imported(self, word_set_id: int, user_id: int) -> bool:
        """Check whether the word set is in the user's collection."""
        return self.word_set_repository.is_in_collection(WordSetId(word_set_id), UserId(user_id))

    def remove_imported_word_set(self, word_set_id: int, user_id: int) -> None:
        """
        Remove a word set from the user's collection.

        Removing a set that is not in the collection is a no-op.
        """
        removed = self.word_set_repository.remove_from_collection(
            WordSetId(word_set_id), UserId(user_id)
        )
        if removed:
            logger.info("removed_imported_word_set", word_set_id=word_set_id, user_id=user_id)
