"""Vocabulary domain exceptions."""

from vocabmaster.domain.common.exceptions import AuthorizationError


class WordSetNotInCollectionError(AuthorizationError):
    """Raised when a user edits words of a word set they have not imported."""

    def __init__(self, word_set_id: int) -> None:
        super().__init__(f"Word set {word_set_id} is not in your collection")
        self.word_set_id = word_set_id
