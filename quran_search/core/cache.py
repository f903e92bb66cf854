"""
Bounded least-recently-used cache.

Memoizes search responses keyed by (query, options, page, limit). The
corpus never changes during the process lifetime, so entries are only
ever dropped for capacity.
"""

import logging
import threading
from collections import OrderedDict
from typing import Generic, Hashable, TypeVar

from quran_search.exceptions import CacheCapacityError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LRUCache(Generic[K, V]):
    """
    Generic LRU cache with a fixed capacity.

    Recency is a total order over the held keys: ``get`` and ``set`` both
    make a key the most recently used, and inserting a new key at full
    capacity evicts exactly the least recently used one. Every operation is
    O(1) and serialized by a single lock, so one instance can be shared by
    concurrent searches.

    Args:
        capacity: Maximum number of entries (positive integer)

    Raises:
        CacheCapacityError: If capacity is not a positive integer

    Example:
        cache = LRUCache(2)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.get("a")      # 'a' is now most recent
        cache.set("c", 3)   # evicts 'b'
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise CacheCapacityError(capacity)
        self._capacity = capacity
        self._entries: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Maximum number of entries."""
        return self._capacity

    @property
    def size(self) -> int:
        """Number of entries currently held."""
        with self._lock:
            return len(self._entries)

    def get(self, key: K, default: V | None = None) -> V | None:
        """
        Get a value and mark its key as most recently used.

        Args:
            key: Cache key
            default: Returned when the key is absent

        Returns:
            The cached value, or ``default``
        """
        with self._lock:
            if key not in self._entries:
                logger.debug("Cache miss: %r", key)
                return default
            self._entries.move_to_end(key)
            logger.debug("Cache hit: %r", key)
            return self._entries[key]

    def set(self, key: K, value: V) -> None:
        """
        Insert or update a value and mark its key as most recently used.

        Inserting a new key at full capacity first evicts the least
        recently used entry.
        """
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Cache evicted: %r", evicted)
            self._entries[key] = value

    def has(self, key: K) -> bool:
        """Whether the key is held. Does not change recency."""
        with self._lock:
            return key in self._entries

    def delete(self, key: K) -> bool:
        """
        Remove a key.

        Returns:
            True if the key was present
        """
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                return True
            return False

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[K]:
        """Held keys from least to most recently used."""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return self.has(key)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"LRUCache(capacity={self._capacity}, size={len(self)})"
