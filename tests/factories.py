from memstore.cache.lru import LRUCache
from memstore.versioned.concurrent import ConcurrentTimeMap
from memstore.versioned.time_map import TimeMap

TIME_MAP_CLASSES = [TimeMap, ConcurrentTimeMap]


def make_cache(capacity: int = 2, **entries: int) -> LRUCache:
    """Build a cache and insert *entries* in keyword order (oldest first)."""
    cache = LRUCache(capacity)
    for key, value in entries.items():
        cache.set(key, value)
    return cache


def make_time_map(
    cls: type = TimeMap, versions: list[tuple[str, str, int]] | None = None
) -> TimeMap | ConcurrentTimeMap:
    """Build a time map preloaded with (key, value, timestamp) triples."""
    store = cls()
    for key, value, ts in versions or []:
        store.set(key, value, ts)
    return store
