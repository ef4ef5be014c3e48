"""Sorted version series for a single key."""

import bisect
from collections.abc import Iterator

from memstore.models.version import Version


class VersionSeries:
    """Timestamp-ordered values of one key, held in parallel sorted lists.

    Invariant: ``_timestamps`` is strictly increasing and ``_values[i]`` is
    the value recorded at ``_timestamps[i]``. Lookups are binary searches.

    Floor and range lookups are O(log n). Out-of-order puts, ``remove`` and
    the prefix cuts shift the lists and are O(n); in-order appends are O(1).
    """

    def __init__(self) -> None:
        self._timestamps: list[int] = []
        self._values: list[str] = []

    def __len__(self) -> int:
        return len(self._timestamps)

    def __bool__(self) -> bool:
        return bool(self._timestamps)

    def __iter__(self) -> Iterator[Version]:
        for ts, value in zip(self._timestamps, self._values):
            yield Version(timestamp=ts, value=value)

    def put(self, timestamp: int, value: str) -> None:
        """Record *value* at *timestamp*, overwriting an equal timestamp."""
        ts_arr = self._timestamps

        # Fast append path when writes arrive in timestamp order
        if not ts_arr or timestamp > ts_arr[-1]:
            ts_arr.append(timestamp)
            self._values.append(value)
            return

        i = bisect.bisect_left(ts_arr, timestamp)
        if ts_arr[i] == timestamp:
            self._values[i] = value
        else:
            ts_arr.insert(i, timestamp)
            self._values.insert(i, value)

    def floor(self, timestamp: int) -> str | None:
        """Value at the greatest timestamp <= *timestamp*, else ``None``."""
        i = bisect.bisect_right(self._timestamps, timestamp) - 1
        if i < 0:
            return None
        return self._values[i]

    def latest(self) -> str | None:
        if not self._values:
            return None
        return self._values[-1]

    def remove(self, timestamp: int) -> bool:
        """Drop the version at exactly *timestamp*. Returns True if found."""
        i = bisect.bisect_left(self._timestamps, timestamp)
        if i == len(self._timestamps) or self._timestamps[i] != timestamp:
            return False
        del self._timestamps[i]
        del self._values[i]
        return True

    def remove_up_to(self, timestamp: int) -> int:
        """Drop versions with timestamp <= *timestamp*; return how many."""
        return self._cut(bisect.bisect_right(self._timestamps, timestamp))

    def remove_before(self, timestamp: int) -> int:
        """Drop versions with timestamp < *timestamp*; return how many."""
        return self._cut(bisect.bisect_left(self._timestamps, timestamp))

    def _cut(self, end: int) -> int:
        if end <= 0:
            return 0
        del self._timestamps[:end]
        del self._values[:end]
        return end

    def _bounds(self, start: int | None, end: int | None) -> tuple[int, int]:
        # None leaves that side of the range open
        left = 0 if start is None else bisect.bisect_left(self._timestamps, start)
        right = (
            len(self._timestamps)
            if end is None
            else bisect.bisect_right(self._timestamps, end)
        )
        return left, max(left, right)

    def values_between(self, start: int, end: int) -> list[str]:
        """Values with timestamps in ``[start, end]``, oldest first."""
        left, right = self._bounds(start, end)
        return self._values[left:right]

    def versions_between(
        self, start: int | None = None, end: int | None = None
    ) -> list[Version]:
        left, right = self._bounds(start, end)
        return [
            Version(timestamp=ts, value=value)
            for ts, value in zip(self._timestamps[left:right], self._values[left:right])
        ]
