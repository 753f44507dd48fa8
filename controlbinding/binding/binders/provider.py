from typing import Any, List, Optional

from loguru import logger

from controlbinding.binding.binders.base import ControlBinderBase
from controlbinding.binding.binders.combo_box import ComboBoxControlBinder
from controlbinding.binding.binders.list_widget import ListWidgetControlBinder
from controlbinding.binding.binders.scalar import (
    CheckBoxControlBinder,
    GenericControlBinder,
    LineEditControlBinder,
    RangeControlBinder,
    TextEditControlBinder,
)


class ControlBinderProvider:
    """
    Ordered set of binder prototypes.

    `get_binder` returns a fresh instance of the first prototype whose
    `can_bind_for` accepts the widget, so more specific binders must be
    registered before more general ones.
    """

    def __init__(self, binders: Optional[List[ControlBinderBase]] = None):
        if binders is None:
            binders = [
                LineEditControlBinder(),
                CheckBoxControlBinder(),
                ComboBoxControlBinder(),
                TextEditControlBinder(),
                RangeControlBinder(),
                ListWidgetControlBinder(),
                GenericControlBinder(),
            ]
        self._binders: List[ControlBinderBase] = list(binders)

    @property
    def binders(self) -> List[ControlBinderBase]:
        return list(self._binders)

    def register(self, binder: ControlBinderBase, index: Optional[int] = 0) -> None:
        """Add a prototype; by default it takes precedence over the built-ins."""
        if index is None:
            self._binders.append(binder)
        else:
            self._binders.insert(index, binder)

    def get_binder(self, control: Any) -> Optional[ControlBinderBase]:
        prototype = next((b for b in self._binders if b.can_bind_for(control)), None)
        if prototype is None:
            logger.error(f"Cannot find binder for {type(control).__name__}")
            return None
        return prototype.create_instance()
