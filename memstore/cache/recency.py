"""Doubly linked recency order stored in an arena of integer slots."""

from collections.abc import Iterator

from memstore.errors import EmptyStructureError, InvalidSlotError

_HEAD = 0
_TAIL = 1
_FREE = -1


class RecencyList:
    """Ordered sequence of (key, value) nodes, least recent first.

    Nodes live in parallel arrays indexed by slot number. Links are slot
    numbers, never object references, so a slot handed to a caller stays
    valid until that node is removed. Slots 0 and 1 are the head and tail
    sentinels. Removed slots are recycled.

    Every operation is O(1).
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._keys: list[str | None] = [None, None]
        self._values: list[int | None] = [None, None]
        self._prev: list[int] = [_FREE, _HEAD]
        self._next: list[int] = [_TAIL, _FREE]
        self._free: list[int] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        slot = self._next[_HEAD]
        while slot != _TAIL:
            yield self._keys[slot]  # type: ignore[misc]
            slot = self._next[slot]

    def _check(self, slot: int) -> None:
        if (
            not isinstance(slot, int)
            or not 2 <= slot < len(self._keys)
            or self._prev[slot] == _FREE
        ):
            raise InvalidSlotError(f"Slot {slot} is not a live node")

    def _link_last(self, slot: int) -> None:
        last = self._prev[_TAIL]
        self._next[last] = slot
        self._prev[slot] = last
        self._next[slot] = _TAIL
        self._prev[_TAIL] = slot

    def _unlink(self, slot: int) -> None:
        prev, nxt = self._prev[slot], self._next[slot]
        self._next[prev] = nxt
        self._prev[nxt] = prev

    def append(self, key: str, value: int | None) -> int:
        """Add a node at the most-recent end and return its slot."""
        if self._free:
            slot = self._free.pop()
            self._keys[slot] = key
            self._values[slot] = value
        else:
            slot = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
            self._prev.append(_FREE)
            self._next.append(_FREE)
        self._link_last(slot)
        self._size += 1
        return slot

    def remove(self, slot: int) -> tuple[str, int | None]:
        """Unlink the node at *slot*, release the slot and return its entry."""
        self._check(slot)
        self._unlink(slot)
        key, value = self._keys[slot], self._values[slot]
        self._keys[slot] = None
        self._values[slot] = None
        self._prev[slot] = _FREE
        self._next[slot] = _FREE
        self._free.append(slot)
        self._size -= 1
        return key, value  # type: ignore[return-value]

    def move_to_end(self, slot: int) -> None:
        """Mark the node at *slot* as most recent."""
        self._check(slot)
        if self._prev[_TAIL] == slot:
            return
        self._unlink(slot)
        self._link_last(slot)

    def peek_front(self) -> tuple[str, int | None]:
        """Return the least recent entry without removing it.

        Raises:
            EmptyStructureError: If the list holds no nodes.
        """
        if self._size == 0:
            raise EmptyStructureError("Recency list is empty")
        slot = self._next[_HEAD]
        return self._keys[slot], self._values[slot]  # type: ignore[return-value]

    def pop_front(self) -> tuple[str, int | None]:
        """Remove and return the least recent entry.

        Raises:
            EmptyStructureError: If the list holds no nodes.
        """
        if self._size == 0:
            raise EmptyStructureError("Recency list is empty")
        return self.remove(self._next[_HEAD])

    def key_at(self, slot: int) -> str:
        self._check(slot)
        return self._keys[slot]  # type: ignore[return-value]

    def value_at(self, slot: int) -> int | None:
        self._check(slot)
        return self._values[slot]

    def set_value(self, slot: int, value: int | None) -> None:
        self._check(slot)
        self._values[slot] = value

    def clear(self) -> None:
        """Drop every node and release the arena."""
        self._reset()
