"""
Value formatters and list display entries.

A formatter converts values between the view-model and the widget:
`format_control` goes view-model -> widget, `format_target` goes
widget -> view-model. A direction that is not overridden raises
FormatterDirectionError when a binding actually needs it.
"""
from dataclasses import dataclass
from typing import Any, Callable, Optional

from controlbinding.errors import FormatterDirectionError


class ValueFormatter:
    """Base formatter; subclasses override the directions they support."""

    def format_control(self, value: Any) -> Any:
        raise FormatterDirectionError(f"{type(self).__name__} does not implement format_control")

    def format_target(self, value: Any) -> Any:
        raise FormatterDirectionError(f"{type(self).__name__} does not implement format_target")


class CallableFormatter(ValueFormatter):
    """Formatter built from plain callables, either of which may be omitted."""

    def __init__(self, to_control: Optional[Callable[[Any], Any]] = None,
                 to_target: Optional[Callable[[Any], Any]] = None):
        self._to_control = to_control
        self._to_target = to_target

    def format_control(self, value: Any) -> Any:
        if self._to_control is None:
            return super().format_control(value)
        return self._to_control(value)

    def format_target(self, value: Any) -> Any:
        if self._to_target is None:
            return super().format_target(value)
        return self._to_target(value)


NO_ID = -1


@dataclass
class ListItem:
    """
    Rich display entry for list-shaped widgets.

    Every field except `display_value` is optional; only fields that are set
    overwrite widget state when an entry is re-rendered.
    """
    display_value: str = ""
    icon: Any = None
    id: int = NO_ID
    disabled: Optional[bool] = None
    metadata: Any = None
    tooltip: Optional[str] = None
