"""
WPF-Style Bindable Property Descriptor.

Provides automatic signal emission on property change, which is what the
binding context listens to for view-model -> widget flow.

Usage:
    class PlayerViewModel(BindableBase):
        healthChanged = Signal(int)
        health = BindableProperty(default=100)

    # Changing the property emits healthChanged and propertyChanged
    vm.health = 50
"""
from typing import Any, Optional, Callable, TypeVar, Generic
from PySide6.QtCore import QObject, Signal

T = TypeVar('T')


class BindableProperty(Generic[T]):
    """
    Descriptor that emits a signal when the property value changes.

    Args:
        default: Default value for the property.
        signal_name: Optional custom signal name. Defaults to "{property_name}Changed".
        coerce: Optional callable to coerce/validate the value before setting.
    """

    def __init__(
        self,
        default: T = None,
        signal_name: Optional[str] = None,
        coerce: Optional[Callable[[Any], T]] = None
    ):
        self.default = default
        self._signal_name = signal_name
        self.coerce = coerce
        self._attr_name: str = ""
        self._public_name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self._public_name = name
        self._attr_name = f"_bindable_{name}"
        if not self._signal_name:
            self._signal_name = f"{name}Changed"
        # Signals cannot be added to a QObject class after creation, so the
        # specific signal is only used when the class declares it itself.

    def __get__(self, obj: Optional[QObject], objtype: type = None) -> T:
        if obj is None:
            return self  # type: ignore
        return getattr(obj, self._attr_name, self.default)

    def __set__(self, obj: QObject, value: Any) -> None:
        if self.coerce is not None:
            value = self.coerce(value)

        old_value = getattr(obj, self._attr_name, self.default)
        if old_value is value or old_value == value:
            return

        setattr(obj, self._attr_name, value)

        specific_signal = getattr(obj, self._signal_name, None)
        if specific_signal is not None and callable(getattr(specific_signal, 'emit', None)):
            specific_signal.emit(value)

        generic_signal = getattr(obj, 'propertyChanged', None)
        if generic_signal is not None and callable(getattr(generic_signal, 'emit', None)):
            generic_signal.emit(self._public_name, value)


class BindableBase(QObject):
    """
    Base class for ViewModels with property change notification.

    The generic `propertyChanged(name, value)` signal is the channel the
    binding context subscribes to. Properties implemented by hand should call
    `notify_property_changed` after changing their value.
    """

    # Generic signal emitted for any property change: (property_name, new_value)
    propertyChanged = Signal(str, object)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

    def notify_property_changed(self, property_name: str, value: Any = None) -> None:
        """Manually emit a property changed notification."""
        self.propertyChanged.emit(property_name, value)
