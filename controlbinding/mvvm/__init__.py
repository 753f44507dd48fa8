"""
MVVM Package - view-model side of the binding engine.

Provides:
- BindableProperty: Descriptor for auto-signaling properties.
- BindableBase: Base ViewModel with generic propertyChanged signal.
- ObservableList: List that announces add/remove/clear mutations.
"""
from controlbinding.mvvm.bindable import BindableProperty, BindableBase
from controlbinding.mvvm.observable_list import (
    ObservableList,
    ObservableListChangeType,
    ObservableListChangedEvent,
)

__all__ = [
    "BindableBase",
    "BindableProperty",
    "ObservableList",
    "ObservableListChangeType",
    "ObservableListChangedEvent",
]
