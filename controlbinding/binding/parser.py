"""
Binding declaration mini-language.

A declaration is a run of whitespace separated `Key=Value` tokens in any
order, e.g. "Path=Player.Health Mode=TwoWay". Only `Path` and `Mode` are
recognized; anything else is ignored so newer declarations still parse.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from loguru import logger

PATH_KEY = "Path="
MODE_KEY = "Mode="


class BindingMode(Enum):
    """Direction of value flow for one binding."""
    ONE_WAY = "OneWay"                    # view-model -> widget
    ONE_WAY_TO_TARGET = "OneWayToTarget"  # widget -> view-model
    TWO_WAY = "TwoWay"

    @property
    def pushes_to_control(self) -> bool:
        return self in (BindingMode.ONE_WAY, BindingMode.TWO_WAY)

    @property
    def pushes_to_target(self) -> bool:
        return self in (BindingMode.ONE_WAY_TO_TARGET, BindingMode.TWO_WAY)

    @classmethod
    def from_name(cls, name: str) -> Optional["BindingMode"]:
        """Case-insensitive lookup by value ("TwoWay") or member name ("TWO_WAY")."""
        wanted = name.strip().lower()
        for mode in cls:
            if wanted in (mode.value.lower(), mode.name.lower()):
                return mode
        return None


@dataclass(frozen=True)
class BindingDescriptor:
    property_path: str
    mode: BindingMode = BindingMode.ONE_WAY

    @property
    def is_bindable(self) -> bool:
        return bool(self.property_path)


def parse_binding_declaration(declaration: str, default_mode: BindingMode = BindingMode.ONE_WAY) -> BindingDescriptor:
    """
    Parse a declaration string into a BindingDescriptor.

    An invalid mode name is logged and replaced by `default_mode`. A missing
    `Path=` token yields an empty path, which callers treat as "do not bind".
    """
    property_path = ""
    mode = default_mode

    for entry in (declaration or "").split():
        if entry.startswith(PATH_KEY):
            property_path = entry[len(PATH_KEY):]
            continue

        if entry.startswith(MODE_KEY):
            mode_name = entry[len(MODE_KEY):]
            parsed = BindingMode.from_name(mode_name) if mode_name else None
            if parsed is None:
                logger.warning(f"Invalid binding mode '{mode_name}' in '{declaration}', using {default_mode.value}")
                mode = default_mode
            else:
                mode = parsed

    return BindingDescriptor(property_path, mode)
