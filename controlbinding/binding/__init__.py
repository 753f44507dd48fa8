"""
Binding engine: declaration parser, binders and binding contexts.
"""
from controlbinding.binding.parser import BindingMode, BindingDescriptor, parse_binding_declaration
from controlbinding.binding.formatters import ValueFormatter, CallableFormatter, ListItem
from controlbinding.binding.configuration import BindingConfiguration
from controlbinding.binding.path import PropertyAccessor, resolve_path
from controlbinding.binding.registry import ContextRegistry, default_registry, registry_for
from controlbinding.binding.binders import ControlBinderBase, ListControlBinder, ControlBinderProvider
from controlbinding.binding.context import BindingContext
from controlbinding.binding.controller import BindingController

__all__ = [
    "BindingMode",
    "BindingDescriptor",
    "parse_binding_declaration",
    "ValueFormatter",
    "CallableFormatter",
    "ListItem",
    "BindingConfiguration",
    "PropertyAccessor",
    "resolve_path",
    "ContextRegistry",
    "default_registry",
    "registry_for",
    "ControlBinderBase",
    "ListControlBinder",
    "ControlBinderProvider",
    "BindingContext",
    "BindingController",
]
