"""Tests for memstore.cache.recency — slot-addressed doubly linked list."""

import pytest

from memstore.cache.recency import RecencyList
from memstore.errors import EmptyStructureError, InvalidSlotError, PreconditionError


class TestRecencyList:
    def test_new_list_is_empty(self):
        order = RecencyList()
        assert len(order) == 0
        assert list(order) == []

    def test_append_keeps_insertion_order(self):
        order = RecencyList()
        order.append("a", 1)
        order.append("b", 2)
        order.append("c", 3)
        assert list(order) == ["a", "b", "c"]
        assert order.peek_front() == ("a", 1)

    def test_remove_from_middle(self):
        order = RecencyList()
        order.append("a", 1)
        b = order.append("b", 2)
        order.append("c", 3)
        assert order.remove(b) == ("b", 2)
        assert list(order) == ["a", "c"]
        assert len(order) == 2

    def test_move_to_end(self):
        order = RecencyList()
        a = order.append("a", 1)
        order.append("b", 2)
        order.move_to_end(a)
        assert list(order) == ["b", "a"]
        assert order.peek_front() == ("b", 2)

    def test_move_to_end_on_last_is_noop(self):
        order = RecencyList()
        order.append("a", 1)
        b = order.append("b", 2)
        order.move_to_end(b)
        assert list(order) == ["a", "b"]

    def test_pop_front_returns_least_recent(self):
        order = RecencyList()
        order.append("a", 1)
        order.append("b", 2)
        assert order.pop_front() == ("a", 1)
        assert list(order) == ["b"]

    def test_freed_slots_are_reused(self):
        order = RecencyList()
        a = order.append("a", 1)
        order.remove(a)
        again = order.append("z", 26)
        assert again == a
        assert order.key_at(again) == "z"
        assert order.value_at(again) == 26

    def test_set_value(self):
        order = RecencyList()
        slot = order.append("a", 1)
        order.set_value(slot, 99)
        assert order.value_at(slot) == 99

    def test_clear(self):
        order = RecencyList()
        order.append("a", 1)
        order.append("b", 2)
        order.clear()
        assert len(order) == 0
        assert list(order) == []
        assert order.append("c", 3) == 2


class TestRecencyListPreconditions:
    def test_pop_front_on_empty_raises(self):
        with pytest.raises(EmptyStructureError, match="empty"):
            RecencyList().pop_front()

    def test_peek_front_on_empty_raises(self):
        with pytest.raises(EmptyStructureError):
            RecencyList().peek_front()

    def test_empty_error_is_precondition_error(self):
        assert issubclass(EmptyStructureError, PreconditionError)
        assert issubclass(EmptyStructureError, ValueError)

    @pytest.mark.parametrize("slot", [0, 1, 5, -1, 2.0, "2"])
    def test_invalid_slot_raises(self, slot):
        order = RecencyList()
        order.append("a", 1)
        with pytest.raises(InvalidSlotError):
            order.remove(slot)

    def test_removed_slot_is_invalid(self):
        order = RecencyList()
        slot = order.append("a", 1)
        order.remove(slot)
        with pytest.raises(InvalidSlotError):
            order.move_to_end(slot)
        assert len(order) == 0
