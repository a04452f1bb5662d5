"""
Ordering and limit options for list queries.

Word sets, words and study records are listed by creation time, newest
first unless the caller asks otherwise, with an optional row cap.
"""

from dataclasses import dataclass

# Maximum number of rows a single list query may return
MAX_LIST_LIMIT = 500


@dataclass(frozen=True)
class ListOptions:
    """
    Options for list queries.

    Attributes:
        ascending: Oldest first when True
        limit: Maximum number of rows, or None for no cap
        category: Only rows in this category, or None for all
    """

    ascending: bool = False
    limit: int | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 1:
            raise ValueError("Limit must be at least 1")
        if self.limit is not None and self.limit > MAX_LIST_LIMIT:
            raise ValueError(f"Limit cannot exceed {MAX_LIST_LIMIT}")
