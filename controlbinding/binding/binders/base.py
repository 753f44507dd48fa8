"""
Control binder base class.

A binder drives one widget for one BindingConfiguration. It subscribes to
the widget's native change signal (only for properties in its two-way
allow-list and only when the mode lets values flow to the view-model) and
re-announces changes as `controlValueChanged(control, property_name)`.

Lifecycle: UNBOUND -> BOUND -> RELEASED. A released binder is never bound
again; the provider hands out fresh instances via `create_instance`.
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger
from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QWidget

from controlbinding.binding.configuration import BindingConfiguration
from controlbinding.errors import BinderContractError
from controlbinding.mvvm.observable_list import ObservableListChangedEvent


class BinderState(Enum):
    UNBOUND = "unbound"
    BOUND = "bound"
    RELEASED = "released"


class ControlBinderBase(QObject):
    """Base for all widget binders."""

    # (control, bound property name)
    controlValueChanged = Signal(object, str)

    # Widget types this binder drives.
    control_types: Tuple[type, ...] = (QWidget,)
    # Two-way capable property -> name of the widget signal announcing it.
    change_signals: Dict[str, str] = {}

    def __init__(self):
        super().__init__()
        self._binding_configuration: Optional[BindingConfiguration] = None
        self._state = BinderState.UNBOUND
        self._connected: List[str] = []

    @property
    def state(self) -> BinderState:
        return self._state

    @property
    def is_bound(self) -> bool:
        return self._state is BinderState.BOUND

    @property
    def binding_configuration(self) -> Optional[BindingConfiguration]:
        return self._binding_configuration

    def can_bind_for(self, control: Any) -> bool:
        return isinstance(control, self.control_types)

    def create_instance(self) -> "ControlBinderBase":
        return type(self)()

    def bind_control(self, binding_configuration: BindingConfiguration) -> None:
        if self._state is BinderState.BOUND:
            return
        if self._state is BinderState.RELEASED:
            raise BinderContractError(f"{type(self).__name__} was released and cannot be bound again")

        self._binding_configuration = binding_configuration
        self._state = BinderState.BOUND

        control = binding_configuration.bound_control
        if control is None:
            return

        property_name = binding_configuration.bound_property_name
        if not binding_configuration.binding_mode.pushes_to_target:
            return
        if property_name not in self.change_signals:
            logger.debug(f"{type(self).__name__}: '{property_name}' does not report changes, "
                         f"widget -> view-model flow is not available")
            return

        signal_name = self.change_signals[property_name]
        if signal_name not in self._connected:
            getattr(control, signal_name).connect(self._on_control_changed)
            self._connected.append(signal_name)

    def clear_event_bindings(self) -> None:
        if self._state is not BinderState.BOUND:
            return
        self._state = BinderState.RELEASED

        control = self._binding_configuration.bound_control
        connected, self._connected = self._connected, []
        if control is None:
            return
        for signal_name in connected:
            try:
                getattr(control, signal_name).disconnect(self._on_control_changed)
            except (RuntimeError, TypeError) as e:
                # Widget is mid-destruction.
                logger.debug(f"{type(self).__name__}: could not disconnect {signal_name}: {e}")

    def _on_control_changed(self, *_args) -> None:
        config = self._binding_configuration
        if config is None or not self.is_bound:
            return
        control = config.bound_control
        if control is None:
            return
        self.controlValueChanged.emit(control, config.bound_property_name)

    # --- Value access ---

    def get_control_value(self) -> Any:
        control = self._binding_configuration.bound_control
        if control is None:
            return None
        return control.property(self._binding_configuration.bound_property_name)

    def set_control_value(self, value: Any) -> None:
        control = self._binding_configuration.bound_control
        if control is None:
            return
        name = self._binding_configuration.bound_property_name
        if not control.setProperty(name, value):
            # False means Qt stored a dynamic property instead of a declared one.
            logger.debug(f"{type(control).__name__} has no Qt property '{name}', stored as dynamic property")

    # --- List reconciliation ---

    def on_observable_list_changed(self, event: ObservableListChangedEvent) -> None:
        raise BinderContractError(f"{type(self).__name__} does not drive list widgets")

    def on_list_item_changed(self, entry: Any) -> None:
        raise BinderContractError(f"{type(self).__name__} does not drive list widgets")
