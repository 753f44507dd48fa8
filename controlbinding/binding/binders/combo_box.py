from typing import Any, Tuple

from PySide6.QtGui import QIcon, QStandardItemModel
from PySide6.QtWidgets import QComboBox

from controlbinding.binding.binders.list_base import ListControlBinder


class ComboBoxControlBinder(ListControlBinder):
    """Single-selection dropdown; only the selection flows back to the view-model."""
    control_types = (QComboBox,)
    change_signals = {
        "currentIndex": "currentIndexChanged",
        "currentText": "currentTextChanged",
    }

    def item_count(self, control: QComboBox) -> int:
        return control.count()

    def selected_index(self, control: QComboBox) -> int:
        return control.currentIndex()

    def select(self, control: QComboBox, index: int) -> None:
        control.setCurrentIndex(index)

    def selection_state(self, control: QComboBox) -> Tuple[Any, ...]:
        return control.currentIndex(), control.currentText()

    def announce_selection(self, control: QComboBox, previous: Tuple[Any, ...]) -> None:
        index, text = self.selection_state(control)
        if index != previous[0]:
            control.currentIndexChanged.emit(index)
        if text != previous[1]:
            control.currentTextChanged.emit(text)

    def insert_item(self, control: QComboBox, index: int, text: str) -> None:
        control.insertItem(index, text)

    def remove_item(self, control: QComboBox, index: int) -> None:
        control.removeItem(index)

    def set_item_text(self, control: QComboBox, index: int, text: str) -> None:
        control.setItemText(index, text)

    def set_item_icon(self, control: QComboBox, index: int, icon: QIcon) -> None:
        control.setItemIcon(index, icon)

    def set_item_data(self, control: QComboBox, index: int, role: int, value: Any) -> None:
        control.setItemData(index, value, role)

    def set_item_disabled(self, control: QComboBox, index: int, disabled: bool) -> None:
        model = control.model()
        if isinstance(model, QStandardItemModel):
            model.item(index).setEnabled(not disabled)
