"""Result container for a page of rows read with a paginated SELECT."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlstencil.exceptions import InvalidInputError, OutOfRangeError

__all__ = ("MINIMUM_LIMIT", "QueryResult")

T = TypeVar("T")

MINIMUM_LIMIT = 10


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """One page of results.

    Args:
        offset: Zero-based position of the first row in the overall set.
        limit: Page size requested, at least ``MINIMUM_LIMIT``.
        total_count: Number of rows in the overall set (the ``row_count`` column).
        results: The rows on this page.
    """

    offset: int
    limit: int
    total_count: int
    results: Sequence[T]

    def __post_init__(self) -> None:
        if self.limit < MINIMUM_LIMIT:
            raise OutOfRangeError("limit", self.limit, f"limit must be at least {MINIMUM_LIMIT}.")
        if self.offset < 0:
            raise OutOfRangeError("offset", self.offset, "offset must be at least 0.")
        if self.results is None:
            raise InvalidInputError("results")
        if self.total_count < 0:
            raise OutOfRangeError("total_count", self.total_count, "total_count must be at least 0.")

    @property
    def has_more(self) -> bool:
        """Whether rows exist beyond this page."""
        return self.offset + len(self.results) < self.total_count

    @property
    def page_count(self) -> int:
        return -(-self.total_count // self.limit)

    def __len__(self) -> int:
        return len(self.results)
