"""
Binding exception hierarchy.

Configuration errors (BindingError subclasses) are caught and logged by the
binding context, so a broken declaration only skips that one binding.
BinderContractError signals a binder/widget mismatch and is never caught.
"""


class BindingError(Exception):
    """Base class for recoverable binding problems."""


class BindingConfigurationError(BindingError):
    """A binding declaration cannot be applied as written."""


class PathResolutionError(BindingConfigurationError):
    """A dotted property path does not resolve against the view-model."""

    def __init__(self, path: str, segment: str, reason: str):
        self.path = path
        self.segment = segment
        self.reason = reason
        super().__init__(f"Cannot resolve '{path}' at '{segment}': {reason}")


class FormatterDirectionError(BindingConfigurationError):
    """A formatter was asked to convert in a direction it does not implement."""


class BinderContractError(TypeError):
    """A binder was asked to do something its widget type cannot support."""
