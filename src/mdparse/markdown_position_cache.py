"""Bounded least-recently-used cache of parsed documents, keyed by a hash of their text."""

import logging
from collections import OrderedDict
from typing import Generic, TypeVar


T = TypeVar('T')

_MASK_32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """Multiply two numbers, keeping the low 32 bits of the result."""
    return (a * b) & _MASK_32


def hash_string_53_bit(text: str, seed: int = 0) -> int:
    """
    Compute a fast, non-cryptographic 53-bit hash of a string (cyrb53).

    Collisions are possible but rare enough for cache keys.

    Args:
        text: The string to hash
        seed: Optional seed for an independent hash sequence

    Returns:
        A non-negative integer below 2**53
    """
    h1 = (0xDEADBEEF ^ seed) & _MASK_32
    h2 = (0x41C6CE57 ^ seed) & _MASK_32
    for char in text:
        code = ord(char)
        h1 = _imul(h1 ^ code, 2654435761)
        h2 = _imul(h2 ^ code, 1597334677)

    h1 = _imul(h1 ^ (h1 >> 16), 2246822507) ^ _imul(h2 ^ (h2 >> 13), 3266489909)
    h2 = _imul(h2 ^ (h2 >> 16), 2246822507) ^ _imul(h1 ^ (h1 >> 13), 3266489909)

    return 4294967296 * (0x1FFFFF & h2) + h1


class MarkdownPositionCache(Generic[T]):
    """
    Least-recently-used cache with a fixed upper bound on its size.

    Reads refresh an entry's recency; inserting into a full cache evicts the
    entry that has gone unused the longest.
    """

    DEFAULT_MAX_SIZE = 200

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE) -> None:
        """
        Initialize the cache.

        Args:
            max_size: Maximum number of entries to keep

        Raises:
            ValueError: If max_size is not positive
        """
        if max_size < 1:
            raise ValueError(f"Cache size must be positive, got {max_size}")

        self._max_size = max_size
        self._entries: OrderedDict[int, T] = OrderedDict()
        self._logger = logging.getLogger("MarkdownPositionCache")

    def max_size(self) -> int:
        """
        Get the maximum number of entries the cache holds.

        Returns:
            The cache bound
        """
        return self._max_size

    def get(self, key: int) -> T | None:
        """
        Look up an entry, marking it as recently used.

        Args:
            key: The entry key

        Returns:
            The cached value, or None if there is no entry for the key
        """
        if key not in self._entries:
            return None

        self._entries.move_to_end(key)
        return self._entries[key]

    def set(self, key: int, value: T) -> None:
        """
        Store an entry, evicting the least recently used one if the cache is full.

        Args:
            key: The entry key
            value: The value to store
        """
        if key in self._entries:
            self._entries.move_to_end(key)

        self._entries[key] = value

        while len(self._entries) > self._max_size:
            evicted, _ = self._entries.popitem(last=False)
            self._logger.debug("evicted cache entry %d", evicted)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
