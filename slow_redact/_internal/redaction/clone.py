"""Deep cloning of nested structures.

Values are classified into a closed set of kinds. Sequences, tuples and
mappings are traversed; temporal values are rebuilt; everything else is
treated as an immutable scalar and shared between source and clone.
"""

import copy
from collections.abc import MutableMapping, MutableSequence
from datetime import date, time
from enum import Enum
from typing import Any


class Kind(Enum):
    """Recognized value kinds."""

    SEQUENCE = "sequence"
    TUPLE = "tuple"
    MAPPING = "mapping"
    TEMPORAL = "temporal"
    SCALAR = "scalar"


def kind_of(value: Any) -> Kind:
    """Classify a value into one of the recognized kinds."""
    if isinstance(value, MutableMapping):
        return Kind.MAPPING
    if isinstance(value, MutableSequence) and not isinstance(value, bytearray):
        return Kind.SEQUENCE
    if isinstance(value, tuple):
        return Kind.TUPLE
    if isinstance(value, (date, time)):
        return Kind.TEMPORAL
    return Kind.SCALAR


def is_container(value: Any) -> bool:
    """Return True if paths can be traversed through this value."""
    return kind_of(value) in (Kind.MAPPING, Kind.SEQUENCE, Kind.TUPLE)


def is_writable(value: Any) -> bool:
    """Return True if children of this value can be overwritten in place."""
    return kind_of(value) in (Kind.MAPPING, Kind.SEQUENCE)


def _copy_container(value: Any, builtin: type) -> Any:
    # A shallow copy of a container that is not a dict or list subclass may
    # share its backing store with the source.
    if isinstance(value, builtin):
        return copy.copy(value)
    return copy.deepcopy(value)


def deep_clone(value: Any, *, thaw: bool = False) -> Any:
    """Create a structurally independent copy of a nested value.

    Mappings and sequences keep their concrete type (an OrderedDict stays
    an OrderedDict, a defaultdict keeps its factory). Tuples and
    namedtuples are rebuilt from cloned items.

    Args:
        value: The value to clone. Must not contain reference cycles.
        thaw: Turn tuples into lists so that every container in the copy
            can be overwritten in place.

    Returns:
        A copy sharing no mapping, sequence or tuple with the source.
    """
    kind = kind_of(value)
    if kind is Kind.MAPPING:
        cloned = _copy_container(value, dict)
        for key, item in value.items():
            cloned[key] = deep_clone(item, thaw=thaw)
        return cloned
    if kind is Kind.SEQUENCE:
        cloned = _copy_container(value, list)
        for index, item in enumerate(value):
            cloned[index] = deep_clone(item, thaw=thaw)
        return cloned
    if kind is Kind.TUPLE:
        items = [deep_clone(item, thaw=thaw) for item in value]
        if thaw:
            return items
        if hasattr(value, "_make"):
            return value._make(items)
        return type(value)(items)
    if kind is Kind.TEMPORAL:
        return value.replace()
    return value
