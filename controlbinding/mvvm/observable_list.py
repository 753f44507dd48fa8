"""
ObservableList - a list that reports its own mutations.

Every mutation updates the backing list first and then emits `listChanged`
synchronously, so the index carried by an event always matches the backing
list at the moment of emission. Entries exposing `propertyChanged` are watched
while they are in the list and re-announced through `itemChanged`.
"""
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Any, Dict, Iterable, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal


class ObservableListChangeType(Enum):
    ADD = "Add"
    REMOVE = "Remove"
    CLEAR = "Clear"


@dataclass(frozen=True)
class ObservableListChangedEvent:
    """One mutation: entries added at `index`, one entry removed from `index`, or a clear."""
    change_type: ObservableListChangeType
    changed_entries: Tuple[Any, ...] = field(default_factory=tuple)
    index: int = -1


class ObservableList(QObject):
    """Mutable ordered sequence emitting Add/Remove/Clear events."""

    listChanged = Signal(object)
    itemChanged = Signal(object)

    def __init__(self, items: Optional[Iterable[Any]] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._items: List[Any] = []
        # id(entry) -> (slot, occurrences)
        self._watched: Dict[int, Tuple[Any, int]] = {}
        if items is not None:
            for item in items:
                self._items.append(item)
                self._watch(item)

    # --- Read access ---

    def backing_list(self) -> List[Any]:
        """The live backing sequence; callers must not mutate it."""
        return self._items

    def index_of(self, entry: Any) -> int:
        """Position of `entry` by identity, or -1."""
        for i, item in enumerate(self._items):
            if item is entry:
                return i
        return -1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, entry: Any) -> bool:
        return entry in self._items

    def __repr__(self) -> str:
        return f"ObservableList({self._items!r})"

    # --- Mutation ---

    def append(self, entry: Any) -> None:
        self.insert(len(self._items), entry)

    def extend(self, entries: Iterable[Any]) -> None:
        entries = tuple(entries)
        if not entries:
            return
        index = len(self._items)
        self._items.extend(entries)
        for entry in entries:
            self._watch(entry)
        self._emit(ObservableListChangeType.ADD, entries, index)

    def insert(self, index: int, entry: Any) -> None:
        index = self._normalize_insert_index(index)
        self._items.insert(index, entry)
        self._watch(entry)
        self._emit(ObservableListChangeType.ADD, (entry,), index)

    def remove(self, entry: Any) -> None:
        index = self._items.index(entry)
        self.pop(index)

    def pop(self, index: int = -1) -> Any:
        if index < 0:
            index += len(self._items)
        if not 0 <= index < len(self._items):
            raise IndexError("pop index out of range")
        entry = self._items.pop(index)
        self._unwatch(entry)
        self._emit(ObservableListChangeType.REMOVE, (entry,), index)
        return entry

    def __delitem__(self, index: int) -> None:
        if isinstance(index, slice):
            raise TypeError("ObservableList does not support slice deletion")
        self.pop(index)

    def __setitem__(self, index: int, entry: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("ObservableList does not support slice assignment")
        if index < 0:
            index += len(self._items)
        self.pop(index)
        self.insert(index, entry)

    def clear(self) -> None:
        for entry in self._items:
            self._unwatch(entry)
        self._items.clear()
        self._emit(ObservableListChangeType.CLEAR, (), -1)

    # --- Internals ---

    def _normalize_insert_index(self, index: int) -> int:
        size = len(self._items)
        if index < 0:
            index = max(0, index + size)
        return min(index, size)

    def _emit(self, change_type: ObservableListChangeType, entries: Tuple[Any, ...], index: int) -> None:
        self.listChanged.emit(ObservableListChangedEvent(change_type, entries, index))

    def _watch(self, entry: Any) -> None:
        signal = getattr(entry, "propertyChanged", None)
        if signal is None or not callable(getattr(signal, "connect", None)):
            return
        key = id(entry)
        if key in self._watched:
            slot, count = self._watched[key]
            self._watched[key] = (slot, count + 1)
            return
        slot = partial(self._on_entry_changed, entry)
        signal.connect(slot)
        self._watched[key] = (slot, 1)

    def _unwatch(self, entry: Any) -> None:
        key = id(entry)
        if key not in self._watched:
            return
        slot, count = self._watched[key]
        if count > 1:
            self._watched[key] = (slot, count - 1)
            return
        del self._watched[key]
        entry.propertyChanged.disconnect(slot)

    def _on_entry_changed(self, entry: Any, *_args) -> None:
        self.itemChanged.emit(entry)
