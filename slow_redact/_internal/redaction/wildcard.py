"""Wildcard path expansion.

A wildcard segment stands for every index of a sequence or every key of a
mapping at that level. Only the first wildcard of a path is expanded.
"""

from collections.abc import Callable
from typing import Any

from slow_redact._internal.redaction.access import (
    MISSING,
    assign,
    child_keys,
    mutate,
    resolve,
)
from slow_redact._internal.redaction.clone import is_container, is_writable
from slow_redact._internal.redaction.paths import WILDCARD, concrete_path

Censor = Callable[[Any, str], Any]


def redact_wildcard(
    root: Any,
    segments: tuple[str, ...],
    path: str,
    censor: Censor,
) -> int:
    """Apply a censor to every location a wildcard path denotes.

    Args:
        root: The structure to redact in place.
        segments: Parsed path segments containing a wildcard.
        path: The original path text, used to build concrete paths.
        censor: Called as censor(value, concrete_path) for every match;
            its result replaces the value.

    Returns:
        The number of locations that were overwritten.
    """
    index = segments.index(WILDCARD)
    prefix = segments[:index]
    suffix = segments[index + 1 :]

    parent = resolve(root, prefix)
    if parent is MISSING or not is_container(parent):
        return 0

    if not suffix:
        return _redact_terminal(parent, path, censor)
    return _redact_intermediate(parent, suffix, path, censor)


def _redact_terminal(parent: Any, path: str, censor: Censor) -> int:
    """Replace every child of the container the wildcard sits on."""
    if not is_writable(parent):
        return 0
    count = 0
    for key in child_keys(parent):
        assign(parent, key, censor(parent[key], concrete_path(path, key)))
        count += 1
    return count


def _redact_intermediate(
    parent: Any,
    suffix: tuple[str, ...],
    path: str,
    censor: Censor,
) -> int:
    """Continue the fixed suffix below every child; skip branches that miss."""
    # A trailing wildcard in the suffix is left for mutate to fill; the
    # censor then sees the container it fills.
    trailing = suffix[-1] == WILDCARD

    count = 0
    for key in child_keys(parent):
        branch = parent[key]
        holder = resolve(branch, suffix[:-1])
        if not is_writable(holder):
            continue
        value = holder if trailing else resolve(holder, suffix[-1:])
        if value is MISSING:
            continue
        if mutate(branch, suffix, censor(value, concrete_path(path, key))):
            count += 1
    return count
