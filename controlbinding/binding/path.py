"""
Dotted property path resolution against view-model objects.

"Player.Stats.Health" walks `root.Player.Stats` by attribute name and ends
on the `Health` property of the last object.
"""
from dataclasses import dataclass
from typing import Any, Iterator, Tuple

from controlbinding.errors import PathResolutionError

_SCALARS = (str, bytes, int, float, bool, complex)


def is_object(value: Any) -> bool:
    """True for values whose attributes can be walked by a path."""
    return value is not None and not isinstance(value, _SCALARS)


def is_settable(owner: Any, name: str) -> bool:
    attr = getattr(type(owner), name, None)
    if attr is None:
        return True
    if hasattr(attr, "fset"):
        return attr.fset is not None
    if hasattr(attr, "__set__"):
        return True
    # Plain methods are not values.
    return not callable(attr) or name in getattr(owner, "__dict__", {})


@dataclass(frozen=True)
class PropertyAccessor:
    """Getter/setter pair bound to the terminal property of a resolved path."""
    owner: Any
    name: str
    path: str

    def get(self) -> Any:
        return getattr(self.owner, self.name)

    def set(self, value: Any) -> None:
        setattr(self.owner, self.name, value)


def split_path(path: str) -> Tuple[str, ...]:
    segments = tuple(path.split("."))
    if not path or any(not s for s in segments):
        raise PathResolutionError(path, path, "empty path segment")
    return segments


def resolve_path(root: Any, path: str, writable: bool = False) -> PropertyAccessor:
    """
    Resolve `path` against `root`.

    Raises PathResolutionError when an intermediate segment is missing or not
    an object, when the terminal property is missing, or when `writable` is
    requested and the terminal property is read-only.
    """
    segments = split_path(path)
    current = root
    for segment in segments[:-1]:
        if not hasattr(current, segment):
            raise PathResolutionError(path, segment, f"{type(current).__name__} has no property '{segment}'")
        current = getattr(current, segment)
        if not is_object(current):
            raise PathResolutionError(path, segment, f"value {current!r} is not an object")

    name = segments[-1]
    if not hasattr(current, name):
        raise PathResolutionError(path, name, f"{type(current).__name__} has no property '{name}'")
    if writable and not is_settable(current, name):
        raise PathResolutionError(path, name, "property is read-only")
    return PropertyAccessor(current, name, path)


def iter_path_owners(root: Any, path: str) -> Iterator[Tuple[Any, str, bool]]:
    """
    Yield (owner, segment, is_terminal) for every segment reachable from root.

    Stops early where the chain is broken, so a partially resolvable path
    still yields the owners that can report the missing link appearing.
    """
    segments = split_path(path)
    current = root
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        yield current, segment, i == last
        if i == last or not hasattr(current, segment):
            return
        current = getattr(current, segment)
        if not is_object(current):
            return
