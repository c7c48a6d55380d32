from enum import Enum
from typing import TYPE_CHECKING, Optional

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping
    from typing import Any, Union

__all__ = (
    "FieldNames",
    "FieldNormalizer",
    "FieldValues",
    "SortDirection",
    "SortOrderMapping",
)


class SortDirection(str, Enum):
    """Direction applied to a field in a sort order."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"

    def __str__(self) -> str:
        """String representation used when rendering ORDER BY terms."""
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> "Optional[SortDirection]":
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if normalized in {member.value, member.name}:
                    return member
        return None


FieldValues: TypeAlias = "Mapping[str, Any]"
"""Type alias for field name to value mappings.

Used for filters and update fields.
"""
SortOrderMapping: TypeAlias = "Mapping[str, Union[SortDirection, str]]"
"""Type alias for field name to sort direction mappings. Directions may be given as strings."""
FieldNormalizer: TypeAlias = "Callable[[str], str]"
"""Type alias for the naming-convention transform applied to field names before they become parameter names."""
FieldNames: TypeAlias = "Iterable[str]"
"""Type alias for field names in rendering order. Builders copy them into a list."""
