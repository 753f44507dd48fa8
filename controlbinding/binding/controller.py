"""
BindingController - host-side helper for widget trees.

The host UI decides when widgets appear; it hands them to
`on_widget_added`, and the controller binds them through the nearest
ancestor context.
"""
from typing import Any, Optional

from loguru import logger
from PySide6.QtWidgets import QWidget

from controlbinding.binding.context import BindingContext
from controlbinding.binding.registry import ContextRegistry, registry_for
from controlbinding.core.config import BindingSettings

INTERNAL_NAME_PREFIX = "qt_"


class BindingController:
    def __init__(self, registry: Optional[ContextRegistry] = None, settings: Optional[BindingSettings] = None):
        self._settings = settings if settings is not None else BindingSettings()
        self._registry = registry if registry is not None else registry_for(self._settings.context_property)

    @property
    def settings(self) -> BindingSettings:
        return self._settings

    @property
    def registry(self) -> ContextRegistry:
        return self._registry

    def create_context(self, data_source: Any, binder_provider=None) -> BindingContext:
        """New context sharing this controller's registry and settings."""
        return BindingContext(data_source, registry=self._registry, binder_provider=binder_provider,
                              settings=self._settings)

    def bind_to_context(self, widget: QWidget, context: BindingContext) -> None:
        """Make `widget` the root of `context` and bind its whole subtree."""
        if context.registry is not self._registry:
            logger.warning("Binding context uses a different registry than this controller")
        context.bind(widget)

    def find_ancestor_context(self, widget: QWidget) -> Optional[BindingContext]:
        return self._registry.find_ancestor_context(widget)

    def on_widget_added(self, widget: Any) -> None:
        """Bind a widget that just entered the live UI, if a context owns it."""
        if not isinstance(widget, QWidget):
            return
        if widget.objectName().startswith(INTERNAL_NAME_PREFIX):
            return

        context = self.find_ancestor_context(widget)
        if context is None:
            return
        context.bind_from_metadata(widget)
