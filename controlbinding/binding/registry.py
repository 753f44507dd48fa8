"""
Context registry.

Maps opaque context tokens to BindingContext instances. Widgets carry only
the token (as a Qt dynamic property), so a widget can find its context
without holding a reference to it.
"""
import uuid
from typing import Dict, Optional, TYPE_CHECKING

from loguru import logger
from PySide6.QtWidgets import QWidget

if TYPE_CHECKING:
    from controlbinding.binding.context import BindingContext

DEFAULT_CONTEXT_PROPERTY = "bindingDataSource"


class ContextRegistry:
    def __init__(self, context_property: str = DEFAULT_CONTEXT_PROPERTY):
        self.context_property = context_property
        self._contexts: Dict[str, "BindingContext"] = {}

    def register(self, context: "BindingContext") -> str:
        token = str(uuid.uuid4())
        self._contexts[token] = context
        logger.debug(f"Registered binding context {token}")
        return token

    def unregister(self, token: str) -> None:
        self._contexts.pop(token, None)

    def get(self, token: Optional[str]) -> Optional["BindingContext"]:
        if not token:
            return None
        return self._contexts.get(token)

    def __len__(self) -> int:
        return len(self._contexts)

    def __contains__(self, token: str) -> bool:
        return token in self._contexts

    # --- Widget markers ---

    def token_of(self, widget: QWidget) -> Optional[str]:
        value = widget.property(self.context_property)
        return str(value) if value else None

    def mark(self, widget: QWidget, token: str) -> None:
        widget.setProperty(self.context_property, token)

    def unmark(self, widget: QWidget) -> None:
        # Writing an invalid value removes the dynamic property.
        widget.setProperty(self.context_property, None)

    def context_for(self, widget: QWidget) -> Optional["BindingContext"]:
        """Context the widget itself is marked with, if any."""
        return self.get(self.token_of(widget))

    def find_ancestor_context(self, widget: QWidget) -> Optional["BindingContext"]:
        """Nearest context marked on the widget or one of its ancestors."""
        current = widget
        while current is not None:
            context = self.context_for(current)
            if context is not None:
                return context
            current = current.parentWidget()
        return None


_registries: Dict[str, ContextRegistry] = {}


def registry_for(context_property: str = DEFAULT_CONTEXT_PROPERTY) -> ContextRegistry:
    """Process-wide registry for widgets marked with `context_property`."""
    registry = _registries.get(context_property)
    if registry is None:
        registry = _registries[context_property] = ContextRegistry(context_property)
    return registry


default_registry = registry_for()
