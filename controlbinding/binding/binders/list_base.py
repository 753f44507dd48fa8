"""
Shared list reconciliation for list-shaped widgets.

Applies ObservableList mutations to the widget one event at a time instead
of rebuilding it, and keeps the selection close to where it was.
"""
from typing import Any, Tuple

from loguru import logger
from PySide6.QtCore import QSignalBlocker, Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QWidget

from controlbinding.binding.binders.base import ControlBinderBase
from controlbinding.binding.formatters import ListItem, NO_ID
from controlbinding.mvvm.observable_list import ObservableListChangedEvent, ObservableListChangeType

METADATA_ROLE = int(Qt.ItemDataRole.UserRole)
ITEM_ID_ROLE = int(Qt.ItemDataRole.UserRole) + 1
TOOLTIP_ROLE = int(Qt.ItemDataRole.ToolTipRole)


class ListControlBinder(ControlBinderBase):
    """Template for binders whose widget shows a list of entries with one selection."""

    def on_observable_list_changed(self, event: ObservableListChangedEvent) -> None:
        config = self._binding_configuration
        if config is None:
            logger.error(f"{type(self).__name__}: no binding configuration set")
            return
        control = config.bound_control
        if control is None:
            return

        # Intermediate selections while rows move are not announced; the
        # widget reports the settled selection once afterwards.
        previous = self.selection_state(control)
        with QSignalBlocker(control):
            if event.change_type is ObservableListChangeType.ADD:
                self._apply_add(control, event)
            elif event.change_type is ObservableListChangeType.REMOVE:
                self._apply_remove(control, event.index)
            elif event.change_type is ObservableListChangeType.CLEAR:
                self.clear_items(control)
        if self.selection_state(control) != previous:
            self.announce_selection(control, previous)

    def on_list_item_changed(self, entry: Any) -> None:
        config = self._binding_configuration
        if config is None:
            return
        control = config.bound_control
        if control is None:
            return

        index = config.target_object.index_of(entry)
        if not 0 <= index < self.item_count(control):
            logger.debug(f"{type(self).__name__}: changed entry {entry!r} is not shown, ignoring")
            return

        value = self._format(entry)
        if isinstance(value, ListItem):
            self._apply_list_item(control, index, value)
        else:
            self.set_item_text(control, index, str(value))

    def _format(self, entry: Any) -> Any:
        formatter = self._binding_configuration.formatter
        if formatter is None:
            return entry
        return formatter.format_control(entry)

    def _apply_add(self, control: QWidget, event: ObservableListChangedEvent) -> None:
        converted = [self._format(entry) for entry in event.changed_entries]
        start = event.index if event.index >= 0 else self.item_count(control)

        for offset, value in enumerate(converted):
            selected = self.selected_index(control)
            index = min(start + offset, self.item_count(control))

            if isinstance(value, ListItem):
                self.insert_item(control, index, value.display_value)
                self._apply_list_item(control, index, value)
            else:
                self.insert_item(control, index, str(value))

            if self.item_count(control) == 1:
                self.select(control, 0)
            else:
                self.select(control, selected)

    def _apply_remove(self, control: QWidget, index: int) -> None:
        selected = self.selected_index(control)
        self.remove_item(control, index)
        self.select(control, -1)

        if selected < 0:
            return
        count = self.item_count(control)
        # Same slot first, then the one before, then the one after.
        for candidate in (selected, selected - 1, selected + 1):
            if 0 <= candidate < count:
                self.select(control, candidate)
                return

    def _apply_list_item(self, control: QWidget, index: int, item: ListItem) -> None:
        self.set_item_text(control, index, item.display_value)
        if item.icon is not None:
            icon = item.icon if isinstance(item.icon, QIcon) else QIcon(item.icon)
            self.set_item_icon(control, index, icon)
        if item.id != NO_ID:
            self.set_item_data(control, index, ITEM_ID_ROLE, item.id)
        if item.disabled is not None:
            self.set_item_disabled(control, index, item.disabled)
        if item.metadata is not None:
            self.set_item_data(control, index, METADATA_ROLE, item.metadata)
        if item.tooltip is not None:
            self.set_item_data(control, index, TOOLTIP_ROLE, item.tooltip)

    # --- Widget primitives ---

    def item_count(self, control: QWidget) -> int:
        raise NotImplementedError

    def selected_index(self, control: QWidget) -> int:
        raise NotImplementedError

    def select(self, control: QWidget, index: int) -> None:
        raise NotImplementedError

    def selection_state(self, control: QWidget) -> Tuple[Any, ...]:
        return (self.selected_index(control),)

    def announce_selection(self, control: QWidget, previous: Tuple[Any, ...]) -> None:
        """Emit the widget's native selection signals for the current state."""
        raise NotImplementedError

    def insert_item(self, control: QWidget, index: int, text: str) -> None:
        raise NotImplementedError

    def remove_item(self, control: QWidget, index: int) -> None:
        raise NotImplementedError

    def clear_items(self, control: QWidget) -> None:
        control.clear()

    def set_item_text(self, control: QWidget, index: int, text: str) -> None:
        raise NotImplementedError

    def set_item_icon(self, control: QWidget, index: int, icon: QIcon) -> None:
        raise NotImplementedError

    def set_item_data(self, control: QWidget, index: int, role: int, value: Any) -> None:
        raise NotImplementedError

    def set_item_disabled(self, control: QWidget, index: int, disabled: bool) -> None:
        raise NotImplementedError
