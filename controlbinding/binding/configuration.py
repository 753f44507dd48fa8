import weakref
from typing import Any, List, Optional, Tuple

import shiboken6
from PySide6.QtWidgets import QWidget

from controlbinding.binding.formatters import ValueFormatter
from controlbinding.binding.parser import BindingMode
from controlbinding.mvvm.observable_list import ObservableList


class BindingConfiguration:
    """
    One widget property bound to one view-model property path.

    The widget is held weakly; `bound_control` returns None once the widget
    has been collected or its C++ side deleted, and the binding is then dead.
    `target_object` is the object owning the terminal property, or the
    ObservableList itself for list bindings. It only changes when the path
    is re-resolved after an intermediate object was replaced.
    """

    def __init__(
        self,
        control: QWidget,
        bound_property_name: str,
        property_path: str,
        mode: BindingMode = BindingMode.ONE_WAY,
        formatter: Optional[ValueFormatter] = None,
        target_object: Any = None,
    ):
        self._control_ref = weakref.ref(control)
        self.bound_property_name = bound_property_name
        self.property_path = property_path
        self.binding_mode = mode
        self.formatter = formatter
        self.target_object = target_object
        self.target_property_name: str = property_path.split(".")[-1]
        self.binder = None
        self.accessor = None
        # Loop guard: set while the context writes one side on behalf of the other.
        self.is_updating: bool = False
        self.is_released: bool = False
        # (signal, slot) pairs to disconnect on unbind.
        self.subscriptions: List[Tuple[Any, Any]] = []
        self.list_subscriptions: List[Tuple[Any, Any]] = []

    @property
    def bound_control(self) -> Optional[QWidget]:
        control = self._control_ref()
        if control is None or not shiboken6.isValid(control):
            return None
        return control

    @property
    def is_alive(self) -> bool:
        return self.bound_control is not None

    @property
    def is_list_binding(self) -> bool:
        return isinstance(self.target_object, ObservableList)

    def __repr__(self) -> str:
        return (f"BindingConfiguration({self.bound_property_name!r} <- {self.property_path!r}, "
                f"{self.binding_mode.value})")
