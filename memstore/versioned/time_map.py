"""Time-indexed key-value store with point-in-time lookup."""

import logging

from memstore.models.version import Version
from memstore.versioned.series import VersionSeries

logger = logging.getLogger(__name__)


class TimeMap:
    """Maps each key to a timestamp-ordered series of string values.

    ``get`` returns the value at the greatest recorded timestamp <= the query
    timestamp. A key whose last version is deleted or pruned is dropped, so
    no key ever maps to an empty series.

    Not thread-safe; see :class:`~memstore.versioned.concurrent.ConcurrentTimeMap`.
    """

    def __init__(self) -> None:
        self._series: dict[str, VersionSeries] = {}

    def set(self, key: str, value: str, timestamp: int) -> None:
        series = self._series.get(key)
        if series is None:
            series = self._series[key] = VersionSeries()
        series.put(timestamp, value)

    def get(self, key: str, timestamp: int) -> str | None:
        series = self._series.get(key)
        if series is None:
            return None
        return series.floor(timestamp)

    def latest(self, key: str) -> str | None:
        series = self._series.get(key)
        if series is None:
            return None
        return series.latest()

    def delete(self, key: str, timestamp: int) -> None:
        """Remove the version at exactly *timestamp*; no-op if absent."""
        series = self._series.get(key)
        if series is None:
            return
        series.remove(timestamp)
        self._drop_if_empty(key, series)

    def delete_up_to(self, key: str, timestamp: int) -> None:
        """Remove every version of *key* with timestamp <= *timestamp*."""
        series = self._series.get(key)
        if series is None:
            return
        series.remove_up_to(timestamp)
        self._drop_if_empty(key, series)

    def get_range(self, key: str, start: int, end: int) -> list[str]:
        """Values with timestamps in ``[start, end]``, oldest first."""
        series = self._series.get(key)
        if series is None:
            return []
        return series.values_between(start, end)

    def history(
        self, key: str, start: int | None = None, end: int | None = None
    ) -> list[Version]:
        """Versions of *key*, optionally bounded; both bounds inclusive."""
        series = self._series.get(key)
        if series is None:
            return []
        return series.versions_between(start, end)

    def prune(self, max_age: int) -> int:
        """Remove versions older than *max_age* across all keys.

        *max_age* is an absolute timestamp cutoff; versions with timestamp
        strictly less than it are removed.

        Returns:
            Number of versions removed.
        """
        removed = 0
        for key, series in list(self._series.items()):
            removed += series.remove_before(max_age)
            self._drop_if_empty(key, series)
        if removed:
            logger.info("Pruned %d versions older than %d", removed, max_age)
        return removed

    def version_count(self, key: str) -> int:
        series = self._series.get(key)
        return 0 if series is None else len(series)

    def keys(self) -> list[str]:
        return list(self._series)

    def _drop_if_empty(self, key: str, series: VersionSeries) -> None:
        if not series:
            del self._series[key]

    def __contains__(self, key: object) -> bool:
        return key in self._series

    def __len__(self) -> int:
        return len(self._series)
