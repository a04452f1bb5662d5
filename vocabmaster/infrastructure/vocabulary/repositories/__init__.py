from .word_repository import WordRepository
from .word_set_repository import WordSetRepository

__all__ = ["WordRepository", "WordSetRepository"]
