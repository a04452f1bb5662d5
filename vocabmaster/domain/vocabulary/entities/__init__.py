from .word import Word
from .word_set import Difficulty, WordSet

__all__ = ["Difficulty", "Word", "WordSet"]
