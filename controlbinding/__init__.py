"""
ControlBinding - Declarative property binding for PySide6 widgets.

Connects view-model objects to widgets through small textual declarations
("Path=Health Mode=TwoWay") stored on the widgets themselves.
"""
from controlbinding.core.logging import setup_logging
from controlbinding.core.config import BindingSettings, load_settings
from controlbinding.errors import (
    BindingError,
    BindingConfigurationError,
    PathResolutionError,
    FormatterDirectionError,
    BinderContractError,
)
from controlbinding.mvvm import (
    BindableBase,
    BindableProperty,
    ObservableList,
    ObservableListChangeType,
    ObservableListChangedEvent,
)
from controlbinding.binding import (
    BindingMode,
    BindingDescriptor,
    parse_binding_declaration,
    BindingConfiguration,
    ValueFormatter,
    CallableFormatter,
    ListItem,
    ContextRegistry,
    default_registry,
    registry_for,
    BindingContext,
    BindingController,
    ControlBinderProvider,
)

__all__ = [
    "setup_logging",
    "BindingSettings",
    "load_settings",
    "BindingError",
    "BindingConfigurationError",
    "PathResolutionError",
    "FormatterDirectionError",
    "BinderContractError",
    "BindableBase",
    "BindableProperty",
    "ObservableList",
    "ObservableListChangeType",
    "ObservableListChangedEvent",
    "BindingMode",
    "BindingDescriptor",
    "parse_binding_declaration",
    "BindingConfiguration",
    "ValueFormatter",
    "CallableFormatter",
    "ListItem",
    "ContextRegistry",
    "default_registry",
    "registry_for",
    "BindingContext",
    "BindingController",
    "ControlBinderProvider",
]
