from controlbinding.binding.binders.base import ControlBinderBase, BinderState
from controlbinding.binding.binders.list_base import ListControlBinder, ITEM_ID_ROLE, METADATA_ROLE
from controlbinding.binding.binders.scalar import (
    LineEditControlBinder,
    CheckBoxControlBinder,
    TextEditControlBinder,
    RangeControlBinder,
    GenericControlBinder,
)
from controlbinding.binding.binders.combo_box import ComboBoxControlBinder
from controlbinding.binding.binders.list_widget import ListWidgetControlBinder
from controlbinding.binding.binders.provider import ControlBinderProvider

__all__ = [
    "ControlBinderBase",
    "BinderState",
    "ListControlBinder",
    "ITEM_ID_ROLE",
    "METADATA_ROLE",
    "LineEditControlBinder",
    "CheckBoxControlBinder",
    "TextEditControlBinder",
    "RangeControlBinder",
    "GenericControlBinder",
    "ComboBoxControlBinder",
    "ListWidgetControlBinder",
    "ControlBinderProvider",
]
