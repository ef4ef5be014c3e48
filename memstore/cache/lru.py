"""Fixed-capacity LRU cache with O(1) get/set and hit/miss metrics."""

import logging

from memstore.cache.recency import RecencyList
from memstore.errors import InvalidCapacityError
from memstore.models.stats import CacheStats

logger = logging.getLogger(__name__)


class CacheMetrics:
    """Tracks cache hit/miss/eviction counts."""

    def __init__(self) -> None:
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        if total == 0:
            return 0.0
        return self.hits / total


class LRUCache:
    """Maps string keys to integer values, evicting the least recently used.

    A dict maps each key to its slot in a :class:`RecencyList`, so lookup,
    reordering and eviction never scan. Not thread-safe.

    Args:
        capacity: Maximum number of entries. ``0`` stores nothing.

    Raises:
        InvalidCapacityError: If *capacity* is negative or not an int.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidCapacityError(f"Capacity must be an int, got {capacity!r}")
        if capacity < 0:
            raise InvalidCapacityError(f"Capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._index: dict[str, int] = {}
        self._order = RecencyList()
        self.metrics = CacheMetrics()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: str) -> int | None:
        """Return the value for *key* and mark it most recent, or ``None``."""
        slot = self._index.get(key)
        if slot is None:
            self.metrics.misses += 1
            return None
        self._order.move_to_end(slot)
        self.metrics.hits += 1
        return self._order.value_at(slot)

    def set(self, key: str, value: int) -> None:
        """Insert or update *key*; an update also marks it most recent."""
        slot = self._index.get(key)
        if slot is not None:
            self._order.move_to_end(slot)
            self._order.set_value(slot, value)
        else:
            self._index[key] = self._order.append(key, value)

        if len(self._index) > self._capacity:
            evicted, _ = self._order.pop_front()
            del self._index[evicted]
            self.metrics.evictions += 1
            logger.debug("Evicted key %s (capacity %d)", evicted, self._capacity)

    def invalidate(self, key: str) -> bool:
        """Remove a specific key. Returns True if the key existed."""
        slot = self._index.pop(key, None)
        if slot is None:
            return False
        self._order.remove(slot)
        return True

    def clear(self) -> None:
        """Remove all entries. Metrics are kept."""
        self._index.clear()
        self._order.clear()

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        return list(self._order)

    def stats(self) -> CacheStats:
        return CacheStats(
            capacity=self._capacity,
            size=self.size,
            hits=self.metrics.hits,
            misses=self.metrics.misses,
            evictions=self.metrics.evictions,
        )

    @property
    def size(self) -> int:
        """Current number of entries."""
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        # Membership checks leave recency untouched
        return key in self._index
