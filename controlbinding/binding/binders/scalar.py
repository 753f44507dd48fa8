"""Binders for single-value widgets."""
from PySide6.QtWidgets import (
    QAbstractButton,
    QAbstractSlider,
    QDoubleSpinBox,
    QLineEdit,
    QPlainTextEdit,
    QSpinBox,
    QTextEdit,
    QWidget,
)

from controlbinding.binding.binders.base import ControlBinderBase


class LineEditControlBinder(ControlBinderBase):
    control_types = (QLineEdit,)
    change_signals = {"text": "textChanged"}


class CheckBoxControlBinder(ControlBinderBase):
    """Checkable buttons: QCheckBox, QRadioButton, checkable push buttons."""
    control_types = (QAbstractButton,)
    change_signals = {"checked": "toggled"}

    def can_bind_for(self, control) -> bool:
        return isinstance(control, QAbstractButton) and control.isCheckable()


class TextEditControlBinder(ControlBinderBase):
    control_types = (QTextEdit, QPlainTextEdit)
    change_signals = {"plainText": "textChanged"}


class RangeControlBinder(ControlBinderBase):
    """Numeric widgets: sliders, dials, scroll bars and spin boxes."""
    control_types = (QAbstractSlider, QSpinBox, QDoubleSpinBox)
    change_signals = {"value": "valueChanged"}


class GenericControlBinder(ControlBinderBase):
    """Fallback for any widget; view-model -> widget only."""
    control_types = (QWidget,)
    change_signals = {}
