"""Container types shared by the statement builder."""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, Generic, Optional, TypeVar

__all__ = ("CaseInsensitiveDict",)

ValueT = TypeVar("ValueT")


class CaseInsensitiveDict(MutableMapping[str, ValueT], Generic[ValueT]):
    """Ordered mapping whose string keys compare without regard to case.

    The spelling and position of the first key written for a given name are kept;
    later writes that differ only in case replace the value. Iteration yields the
    retained spellings in insertion order.

    Example:
        >>> filters = CaseInsensitiveDict({"ApplicationID": 1})
        >>> filters["applicationid"]
        1
        >>> filters["APPLICATIONID"] = 2
        >>> list(filters.items())
        [('ApplicationID', 2)]
    """

    __slots__ = ("_store",)

    def __init__(self, data: Optional[Mapping[str, ValueT]] = None, **kwargs: ValueT) -> None:
        self._store: dict[str, tuple[str, ValueT]] = {}
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @staticmethod
    def _fold(key: str) -> str:
        return key.casefold()

    def __setitem__(self, key: str, value: ValueT) -> None:
        folded = self._fold(key)
        existing = self._store.get(folded)
        self._store[folded] = (existing[0] if existing is not None else key, value)

    def __getitem__(self, key: str) -> ValueT:
        return self._store[self._fold(key)][1]

    def __delitem__(self, key: str) -> None:
        del self._store[self._fold(key)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._fold(key) in self._store

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        other_folded = CaseInsensitiveDict(other)
        return dict(self.folded_items()) == dict(other_folded.folded_items())

    __hash__ = None  # type: ignore[assignment]

    def folded_items(self) -> Iterator[tuple[str, ValueT]]:
        """Iterate over ``(folded_key, value)`` pairs."""
        return ((folded, value) for folded, (_, value) in self._store.items())

    def copy(self) -> "CaseInsensitiveDict[ValueT]":
        return CaseInsensitiveDict(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"

    def __reduce__(self) -> Any:
        return (self.__class__, (dict(self.items()),))
