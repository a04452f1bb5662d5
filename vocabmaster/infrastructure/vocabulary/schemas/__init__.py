from .word_schemas import (
    Word,
    WordCreateRequest,
    WordCreateResponse,
    WordsListResponse,
    WordUpdateRequest,
    WordUpdateResponse,
)
from .word_set_schemas import (
    WordSet,
    WordSetCreateRequest,
    WordSetImportResponse,
    WordSetImportStatus,
    WordSetsListResponse,
)

__all__ = [
    "Word",
    "WordCreateRequest",
    "WordCreateResponse",
    "WordSet",
    "WordSetCreateRequest",
    "WordSetImportResponse",
    "WordSetImportStatus",
    "WordSetsListResponse",
    "WordUpdateRequest",
    "WordUpdateResponse",
    "WordsListResponse",
]
