"""
Tests for ObservableList change events.
"""
import pytest
from unittest.mock import MagicMock

from controlbinding.mvvm.bindable import BindableBase, BindableProperty
from controlbinding.mvvm.observable_list import (
    ObservableList,
    ObservableListChangedEvent,
    ObservableListChangeType,
)


class Entry(BindableBase):
    label = BindableProperty(default="")


@pytest.fixture
def events(qapp):
    return []


def watch(observable, events):
    observable.listChanged.connect(events.append)
    return observable


class TestMutationEvents:
    def test_append_reports_index_of_new_entry(self, events):
        items = watch(ObservableList(["a", "b"]), events)
        items.append("c")

        assert events == [ObservableListChangedEvent(ObservableListChangeType.ADD, ("c",), 2)]
        assert items.backing_list() == ["a", "b", "c"]

    def test_insert_and_extend(self, events):
        items = watch(ObservableList(["a"]), events)
        items.insert(0, "z")
        items.extend(["x", "y"])

        assert events[0].index == 0
        assert events[1] == ObservableListChangedEvent(ObservableListChangeType.ADD, ("x", "y"), 2)
        assert list(items) == ["z", "a", "x", "y"]

    def test_extend_with_nothing_emits_nothing(self, events):
        items = watch(ObservableList(), events)
        items.extend([])
        assert events == []

    def test_remove_and_pop(self, events):
        items = watch(ObservableList(["a", "b", "c"]), events)
        items.remove("b")
        popped = items.pop()

        assert popped == "c"
        assert events == [
            ObservableListChangedEvent(ObservableListChangeType.REMOVE, ("b",), 1),
            ObservableListChangedEvent(ObservableListChangeType.REMOVE, ("c",), 1),
        ]

    def test_index_matches_backing_list_at_emission(self, qapp):
        items = ObservableList(["a", "b", "c"])
        seen = []
        items.listChanged.connect(lambda e: seen.append((e.index, list(items.backing_list()))))

        del items[0]

        assert seen == [(0, ["b", "c"])]

    def test_setitem_is_remove_then_add(self, events):
        items = watch(ObservableList(["a", "b"]), events)
        items[1] = "B"

        assert [e.change_type for e in events] == [ObservableListChangeType.REMOVE, ObservableListChangeType.ADD]
        assert events[1].index == 1
        assert list(items) == ["a", "B"]

    def test_clear(self, events):
        items = watch(ObservableList(["a", "b"]), events)
        items.clear()

        assert events == [ObservableListChangedEvent(ObservableListChangeType.CLEAR)]
        assert len(items) == 0

    def test_pop_out_of_range(self, events):
        items = ObservableList()
        with pytest.raises(IndexError):
            items.pop()

    def test_index_of_uses_identity(self, qapp):
        first, second = [1], [1]
        items = ObservableList([first, second])
        assert items.index_of(second) == 1
        assert items.index_of([1]) == -1


class TestItemChanged:
    def test_entry_change_is_reannounced(self, qapp):
        entry = Entry()
        items = ObservableList([entry])
        callback = MagicMock()
        items.itemChanged.connect(callback)

        entry.label = "new"

        callback.assert_called_once_with(entry)

    def test_removed_entry_is_no_longer_watched(self, qapp):
        entry = Entry()
        items = ObservableList([entry])
        callback = MagicMock()
        items.itemChanged.connect(callback)

        items.remove(entry)
        entry.label = "gone"

        callback.assert_not_called()

    def test_duplicate_entry_watched_until_last_copy_leaves(self, qapp):
        entry = Entry()
        items = ObservableList([entry, entry])
        callback = MagicMock()
        items.itemChanged.connect(callback)

        items.pop(0)
        entry.label = "still here"
        items.pop(0)
        entry.label = "gone"

        callback.assert_called_once_with(entry)
