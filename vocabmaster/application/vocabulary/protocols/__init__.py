from .word_repository import WordRepositoryProtocol
from .word_set_repository import WordSetRepositoryProtocol

__all__ = ["WordRepositoryProtocol", "WordSetRepositoryProtocol"]
