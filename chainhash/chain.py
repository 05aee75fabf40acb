"""A sorted chain of unique string keys, used as a hash-table bucket."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator


def _check_key(key: object) -> str:
    if not isinstance(key, str):
        raise TypeError(f"keys must be str, not {type(key).__name__}")
    return key


class SortedChain:
    """Unique string keys kept in ascending lexicographic order."""

    def __init__(self) -> None:
        self._keys: list[str] = []

    def _find(self, key: str) -> tuple[int, bool]:
        index = bisect_left(self._keys, key)
        found = index < len(self._keys) and self._keys[index] == key
        return index, found

    def insert(self, key: str) -> bool:
        """Add ``key`` in sorted position; return False if it is already present."""
        index, found = self._find(_check_key(key))
        if found:
            return False
        self._keys.insert(index, key)
        return True

    def remove(self, key: str) -> bool:
        """Remove ``key``; return False if it was not present."""
        index, found = self._find(_check_key(key))
        if not found:
            return False
        del self._keys[index]
        return True

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._find(key)[1]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __str__(self) -> str:
        return "".join(f"{key} " for key in self._keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._keys!r})"

    def copy(self) -> SortedChain:
        """Return an independent chain holding the same keys."""
        duplicate = SortedChain()
        duplicate._keys = list(self._keys)
        return duplicate