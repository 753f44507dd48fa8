from typing import Any, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QListWidget

from controlbinding.binding.binders.list_base import ListControlBinder


class ListWidgetControlBinder(ListControlBinder):
    """Selection list backed by QListWidget items."""
    control_types = (QListWidget,)
    change_signals = {"currentRow": "currentRowChanged"}

    def item_count(self, control: QListWidget) -> int:
        return control.count()

    def selected_index(self, control: QListWidget) -> int:
        return control.currentRow()

    def select(self, control: QListWidget, index: int) -> None:
        control.setCurrentRow(index)

    def announce_selection(self, control: QListWidget, previous: Tuple[Any, ...]) -> None:
        control.currentRowChanged.emit(control.currentRow())

    def insert_item(self, control: QListWidget, index: int, text: str) -> None:
        control.insertItem(index, text)

    def remove_item(self, control: QListWidget, index: int) -> None:
        control.takeItem(index)

    def set_item_text(self, control: QListWidget, index: int, text: str) -> None:
        control.item(index).setText(text)

    def set_item_icon(self, control: QListWidget, index: int, icon: QIcon) -> None:
        control.item(index).setIcon(icon)

    def set_item_data(self, control: QListWidget, index: int, role: int, value: Any) -> None:
        control.item(index).setData(role, value)

    def set_item_disabled(self, control: QListWidget, index: int, disabled: bool) -> None:
        item = control.item(index)
        if disabled:
            item.setFlags(item.flags() & ~Qt.ItemFlag.ItemIsEnabled)
        else:
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsEnabled)
