"""Settings-driven constructors for the stores."""

import logging

from memstore.cache.lru import LRUCache
from memstore.config import get_settings
from memstore.logs import setup_logging
from memstore.versioned.concurrent import ConcurrentTimeMap
from memstore.versioned.time_map import TimeMap

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Apply the log level and optional log file from Settings."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)


def create_cache(capacity: int | None = None) -> LRUCache:
    """Build an LRU cache, defaulting to ``Settings.cache_capacity``."""
    if capacity is None:
        capacity = get_settings().cache_capacity
    cache = LRUCache(capacity)
    logger.debug("Created LRU cache with capacity %d", capacity)
    return cache


def create_time_map(thread_safe: bool | None = None) -> TimeMap | ConcurrentTimeMap:
    """Build a time map.

    Returns the lock-striped :class:`ConcurrentTimeMap` unless *thread_safe*
    (or ``Settings.thread_safe_time_map`` when it is None) is False.
    """
    if thread_safe is None:
        thread_safe = get_settings().thread_safe_time_map
    if thread_safe:
        return ConcurrentTimeMap()
    return TimeMap()
