"""Reading and overwriting values at parsed paths.

Neither operation raises for paths that do not exist or that run through
non-container values; those paths are simply not found.
"""

from typing import Any

from slow_redact._internal.redaction.clone import Kind, is_container, is_writable, kind_of
from slow_redact._internal.redaction.paths import WILDCARD


class _Sentinel:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Sentinel("MISSING")
"""Returned by `resolve` when a path does not exist."""

REMOVE: Any = _Sentinel("REMOVE")
"""Assigning this value deletes a mapping key instead of overwriting it."""


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _find_key(container: Any, segment: str) -> Any:
    """Return the existing key or index a segment addresses, or MISSING."""
    kind = kind_of(container)
    if kind is Kind.MAPPING:
        if segment in container:
            return segment
        if _is_index(segment) and int(segment) in container:
            return int(segment)
        return MISSING
    if kind in (Kind.SEQUENCE, Kind.TUPLE):
        if _is_index(segment) and int(segment) < len(container):
            return int(segment)
        return MISSING
    return MISSING


def assign(container: Any, key: Any, value: Any) -> None:
    """Overwrite one existing slot, honoring the REMOVE sentinel."""
    if value is REMOVE:
        if kind_of(container) is Kind.MAPPING:
            del container[key]
        else:
            container[key] = None
    else:
        container[key] = value


def child_keys(container: Any) -> list[Any]:
    """Snapshot the indices or keys of a container, in iteration order."""
    kind = kind_of(container)
    if kind in (Kind.SEQUENCE, Kind.TUPLE):
        return list(range(len(container)))
    if kind is Kind.MAPPING:
        return list(container)
    return []


def resolve(root: Any, segments: tuple[str, ...]) -> Any:
    """Read the value at a path.

    Args:
        root: The structure to walk.
        segments: Parsed path segments.

    Returns:
        The value found, or MISSING if any step does not exist.
    """
    current = root
    for segment in segments:
        key = _find_key(current, segment)
        if key is MISSING:
            return MISSING
        current = current[key]
    return current


def mutate(root: Any, segments: tuple[str, ...], value: Any) -> bool:
    """Overwrite the value at a path without creating anything.

    Every intermediate segment must already lead to a mapping, sequence or
    tuple, and the last segment must name an existing key or index of a
    mapping or sequence. A trailing wildcard overwrites every child of the
    final container. Tuples are never written to.

    Returns:
        True if a value was written, False if the structure was left as is.
    """
    current = root
    for segment in segments[:-1]:
        key = _find_key(current, segment)
        if key is MISSING:
            return False
        nxt = current[key]
        if not is_container(nxt):
            return False
        current = nxt

    last = segments[-1]
    if not is_writable(current):
        return False
    if last == WILDCARD:
        for key in child_keys(current):
            assign(current, key, value)
        return True

    key = _find_key(current, last)
    if key is MISSING:
        return False
    assign(current, key, value)
    return True
