"""A fixed-size hash table of string keys with sorted separate chaining."""

from __future__ import annotations

from chainhash.chain import SortedChain

_UINT_MASK = 0xFFFFFFFF


class HashTable:
    """Hash table of unique string keys; collisions share a sorted chain."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self._size = size
        self._buckets = [SortedChain() for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def hash(self, key: str) -> int:
        """Sum of the key's bytes (as signed chars), modulo the table size."""
        total = 0
        for byte in key.encode("utf-8"):
            signed = byte - 256 if byte > 127 else byte
            total = (total + signed) & _UINT_MASK
        return total % self._size

    def insert(self, key: str) -> bool:
        """Add ``key``; return False if it is already in the table."""
        return self._buckets[self.hash(key)].insert(key)

    def remove(self, key: str) -> bool:
        """Remove ``key``; return False if it was not in the table."""
        return self._buckets[self.hash(key)].remove(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return key in self._buckets[self.hash(key)]

    def format_collisions(self, hash_value: int) -> str:
        """The chain stored under ``hash_value``, followed by a newline."""
        if not 0 <= hash_value < self._size:
            raise IndexError(f"hash value {hash_value} out of range 0..{self._size - 1}")
        return f"{self._buckets[hash_value]}\n"

    def format_all_collisions(self) -> str:
        """One line for each bucket holding more than one key."""
        return "".join(
            f"Hash value = {index}: {chain}\n"
            for index, chain in enumerate(self._buckets)
            if len(chain) > 1
        )

    def __str__(self) -> str:
        return "".join(str(chain) for chain in self._buckets) + "\n"