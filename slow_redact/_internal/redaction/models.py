"""Pydantic models and result types for redaction."""

import copyreg
import os
from collections.abc import MutableMapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from slow_redact._internal.redaction.clone import deep_clone
from slow_redact._internal.redaction.paths import validate_path

# =============================================================================
# Constants
# =============================================================================

REDACTED_VALUE = "[REDACTED]"
DEBUG_ENV_VAR = "SLOW_REDACT_DEBUG"


def _debug_from_env() -> bool:
    return os.environ.get(DEBUG_ENV_VAR, "") == "1"


# =============================================================================
# Configuration
# =============================================================================


class RedactOptions(BaseModel):
    """Configuration for a redactor.

    Fields:
        paths: Locations to redact, e.g. "user.password", "items[0]",
            '["weird-key"].value' or "users.*.token"
        censor: Replacement value, or a callable receiving (value, path)
            and returning the replacement (default: "[REDACTED]")
        serialize: Callable turning the redacted structure into its output,
            True for the default JSON encoder, or False to return the
            redacted structure itself with a restore() method
        strict: Pass non-container input through without redacting
        remove: Delete matched mapping keys instead of replacing them
        debug: Write debug lines to stderr (default: SLOW_REDACT_DEBUG=1)
    """

    paths: tuple[str, ...] = ()
    censor: Any = REDACTED_VALUE
    serialize: Any = True
    strict: bool = True
    remove: bool = False
    debug: bool = Field(default_factory=_debug_from_env)

    model_config = {"frozen": True}

    @field_validator("paths", mode="before")
    @classmethod
    def paths_are_strings(cls, v: Any) -> Any:
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            raise ValueError("paths must be a list")
        for path in v:
            if not isinstance(path, str):
                raise ValueError("Paths must be (non-empty) strings")
        return tuple(v)

    @field_validator("paths")
    @classmethod
    def paths_match_grammar(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for path in v:
            validate_path(path)
        return v

    @field_validator("serialize")
    @classmethod
    def serialize_callable_or_bool(cls, v: Any) -> Any:
        if isinstance(v, bool) or callable(v):
            return v
        raise ValueError("serialize must be callable or a boolean")


# =============================================================================
# Restorable Results
# =============================================================================


class Restorable:
    """Mixin adding restore() to a redacted container.

    restore() returns a fresh copy of the structure as it was before
    redaction; every call returns an independent copy.
    """

    _snapshot: Any = None

    def restore(self) -> Any:
        return deep_clone(self._snapshot)


class RedactedDict(Restorable, dict):
    """Redacted dict returned when serialization is disabled."""

    def __init__(self, data: Any = (), snapshot: Any = None) -> None:
        super().__init__(data)
        self._snapshot = snapshot


class RedactedList(Restorable, list):
    """Redacted list returned when serialization is disabled."""

    def __init__(self, data: Any = (), snapshot: Any = None) -> None:
        super().__init__(data)
        self._snapshot = snapshot


_RESTORABLE_TYPES: dict[type, type] = {dict: RedactedDict, list: RedactedList}


def restorable_type(cls: type) -> type:
    """Return the subclass of cls that carries restore(), creating it once."""
    if issubclass(cls, Restorable):
        return cls
    if cls not in _RESTORABLE_TYPES:
        _RESTORABLE_TYPES[cls] = type(f"Redacted{cls.__name__}", (Restorable, cls), {})
    return _RESTORABLE_TYPES[cls]


def with_restore(working: Any, snapshot: Any) -> Any:
    """Rebuild a redacted container as its restorable subclass.

    The copy is made through the pickle reduce protocol with the class
    swapped, so constructor state such as a defaultdict factory or an
    OrderedDict's order carries over. Containers whose reduce value does
    not name their own class fall back to RedactedDict or RedactedList.
    """
    cls = type(working)
    target = restorable_type(cls)
    func, args, *rest = working.__reduce_ex__(4)
    state, listitems, dictitems = (list(rest) + [None, None, None])[:3]

    if func is copyreg.__newobj__ and args and args[0] is cls:
        args = (target, *args[1:])
    elif func is cls:
        func = target
    else:
        fallback = RedactedDict if isinstance(working, MutableMapping) else RedactedList
        return fallback(working, snapshot=snapshot)

    rebuilt = func(*args)
    if state:
        slots: dict[str, Any] = {}
        if isinstance(state, tuple):
            state, slots = state
        if state:
            rebuilt.__dict__.update(state)
        for name, value in (slots or {}).items():
            setattr(rebuilt, name, value)
    if listitems is not None:
        rebuilt.extend(listitems)
    if dictitems is not None:
        for key, value in dictitems:
            rebuilt[key] = value
    rebuilt._snapshot = snapshot
    return rebuilt
