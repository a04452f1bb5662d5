from .word_mapper import WordMapper
from .word_set_mapper import WordSetMapper

__all__ = ["WordMapper", "WordSetMapper"]
