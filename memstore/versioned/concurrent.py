"""Thread-safe time map using one lock per key."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from memstore.models.version import Version
from memstore.versioned.series import VersionSeries

logger = logging.getLogger(__name__)


class _Stripe:
    """A key's version series together with the lock that guards it."""

    __slots__ = ("lock", "series", "retired")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.series = VersionSeries()
        # Set once the series is emptied and unmapped; never reused afterwards
        self.retired = False


class ConcurrentTimeMap:
    """Time map that is safe to share between threads.

    The outer dict is only touched through single atomic calls (``get``,
    ``setdefault``, ``pop``), so adding keys takes no global lock. Each key
    has its own lock, held for the whole of any read or write of its series:
    calls on different keys never block each other and calls on the same key
    are serialized.

    When a call empties a series it retires the stripe and unmaps the key
    while still holding the lock. A caller that then acquires the retired
    stripe goes back to the dict, so a racing ``set`` always lands in a
    mapped series and no version is lost.
    """

    def __init__(self) -> None:
        self._stripes: dict[str, _Stripe] = {}

    @contextmanager
    def _locked(self, key: str, create: bool = False) -> Iterator[_Stripe | None]:
        """Hold the lock of *key*'s live stripe, or yield None if unmapped."""
        while True:
            stripe = self._stripes.get(key)
            if stripe is None:
                if not create:
                    yield None
                    return
                stripe = self._stripes.setdefault(key, _Stripe())
            with stripe.lock:
                if not stripe.retired:
                    yield stripe
                    return

    def _retire_if_empty(self, key: str, stripe: _Stripe) -> None:
        # Caller holds stripe.lock
        if not stripe.series:
            stripe.retired = True
            self._stripes.pop(key, None)

    def set(self, key: str, value: str, timestamp: int) -> None:
        with self._locked(key, create=True) as stripe:
            stripe.series.put(timestamp, value)  # type: ignore[union-attr]

    def get(self, key: str, timestamp: int) -> str | None:
        with self._locked(key) as stripe:
            if stripe is None:
                return None
            return stripe.series.floor(timestamp)

    def latest(self, key: str) -> str | None:
        with self._locked(key) as stripe:
            if stripe is None:
                return None
            return stripe.series.latest()

    def delete(self, key: str, timestamp: int) -> None:
        """Remove the version at exactly *timestamp*; no-op if absent."""
        with self._locked(key) as stripe:
            if stripe is None:
                return
            stripe.series.remove(timestamp)
            self._retire_if_empty(key, stripe)

    def delete_up_to(self, key: str, timestamp: int) -> None:
        """Remove every version of *key* with timestamp <= *timestamp*."""
        with self._locked(key) as stripe:
            if stripe is None:
                return
            stripe.series.remove_up_to(timestamp)
            self._retire_if_empty(key, stripe)

    def get_range(self, key: str, start: int, end: int) -> list[str]:
        """Values with timestamps in ``[start, end]``, oldest first."""
        with self._locked(key) as stripe:
            if stripe is None:
                return []
            return stripe.series.values_between(start, end)

    def history(
        self, key: str, start: int | None = None, end: int | None = None
    ) -> list[Version]:
        with self._locked(key) as stripe:
            if stripe is None:
                return []
            return stripe.series.versions_between(start, end)

    def prune(self, max_age: int) -> int:
        """Remove versions with timestamp < *max_age* across all keys.

        Keys are locked one at a time, so writers to other keys keep going
        while a prune is in progress.

        Returns:
            Number of versions removed.
        """
        removed = 0
        for key, stripe in list(self._stripes.items()):
            with stripe.lock:
                if stripe.retired:
                    continue
                removed += stripe.series.remove_before(max_age)
                self._retire_if_empty(key, stripe)
        if removed:
            logger.info("Pruned %d versions older than %d", removed, max_age)
        return removed

    def version_count(self, key: str) -> int:
        with self._locked(key) as stripe:
            return 0 if stripe is None else len(stripe.series)

    def keys(self) -> list[str]:
        return list(self._stripes)

    def __contains__(self, key: object) -> bool:
        return key in self._stripes

    def __len__(self) -> int:
        return len(self._stripes)
