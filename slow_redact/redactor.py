"""Path-based redaction that never mutates its input."""

import json
import sys
from dataclasses import dataclass
from datetime import date, time
from typing import Any

from pydantic import ValidationError

from slow_redact._internal.redaction.access import MISSING, REMOVE, mutate, resolve
from slow_redact._internal.redaction.clone import (
    Kind,
    deep_clone,
    is_container,
    is_writable,
    kind_of,
)
from slow_redact._internal.redaction.models import RedactOptions, with_restore
from slow_redact._internal.redaction.paths import WILDCARD, parse_path
from slow_redact._internal.redaction.wildcard import redact_wildcard
from slow_redact.exceptions import RedactConfigError


def _encode_default(value: Any) -> Any:
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


_JSON_KEY_TYPES = (str, int, float, bool)


def _text_key(key: Any) -> Any:
    if key is None or isinstance(key, _JSON_KEY_TYPES):
        return key
    return str(key)


def _with_text_keys(value: Any) -> Any:
    """Copy a structure, turning mapping keys JSON cannot encode into strings."""
    kind = kind_of(value)
    if kind is Kind.MAPPING:
        return {_text_key(key): _with_text_keys(item) for key, item in value.items()}
    if kind in (Kind.SEQUENCE, Kind.TUPLE):
        return [_with_text_keys(item) for item in value]
    return value


def default_serialize(value: Any) -> str:
    """Encode a redacted structure as JSON text.

    Mapping keys that are not strings, numbers, booleans or None are
    written with str().
    """
    try:
        return json.dumps(value, default=_encode_default)
    except TypeError:
        return json.dumps(_with_text_keys(value), default=_encode_default)


@dataclass(frozen=True)
class CompiledPath:
    """A configured path, parsed once per redactor."""

    path: str
    segments: tuple[str, ...]

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.segments


class Redactor:
    """Callable that redacts configured paths from a copy of its input.

    The input is cloned before any path is applied, so the caller's
    structure is never modified. Paths that do not exist in the input, or
    that run through non-container values, are skipped.

    Use `slow_redact()` to build one from keyword options.
    """

    def __init__(self, options: RedactOptions | None = None) -> None:
        """Initialize the redactor.

        Args:
            options: Validated configuration. Defaults to RedactOptions().
        """
        self._options = options or RedactOptions()
        self._paths = tuple(
            CompiledPath(path=path, segments=parse_path(path)) for path in self._options.paths
        )
        serialize = self._options.serialize
        if serialize is True:
            self._serialize = default_serialize
        elif serialize is False:
            self._serialize = None
        else:
            self._serialize = serialize
        self._log_debug(f"Compiled {len(self._paths)} path(s)")

    @property
    def options(self) -> RedactOptions:
        """The configuration this redactor was built with."""
        return self._options

    @property
    def paths(self) -> tuple[CompiledPath, ...]:
        """The parsed paths, in the order they are applied."""
        return self._paths

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._options.debug:
            print(f"[slow-redact] {message}", file=sys.stderr)

    def __call__(self, value: Any) -> Any:
        """Redact a value.

        Args:
            value: Any nested structure of mappings, sequences and tuples.

        Returns:
            The serialized redacted copy; the redacted copy itself with a
            restore() method when serialization is disabled; or the input
            unchanged (serialized if enabled) for non-container input in
            strict mode.
        """
        if self._options.strict and not is_container(value):
            self._log_debug(f"Passing through {type(value).__name__} in strict mode")
            return self._serialize(value) if self._serialize is not None else value

        working = deep_clone(value, thaw=True)
        snapshot = deep_clone(value) if self._serialize is None else None

        applied = 0
        for compiled in self._paths:
            applied += self._apply(working, compiled)
        self._log_debug(f"Redacted {applied} location(s) for {len(self._paths)} path(s)")

        if self._serialize is None:
            return self._with_restore(working, snapshot)
        return self._serialize(working)

    def _apply(self, root: Any, compiled: CompiledPath) -> int:
        """Apply one path to the working copy."""
        if compiled.has_wildcard:
            return redact_wildcard(root, compiled.segments, compiled.path, self._censor)

        found = resolve(root, compiled.segments)
        if found is MISSING:
            return 0
        return int(mutate(root, compiled.segments, self._censor(found, compiled.path)))

    def _censor(self, value: Any, path: str) -> Any:
        """Compute the replacement for one matched location."""
        if self._options.remove:
            return REMOVE
        censor = self._options.censor
        if callable(censor):
            return censor(value, path)
        return censor

    @staticmethod
    def _with_restore(working: Any, snapshot: Any) -> Any:
        if is_writable(working):
            return with_restore(working, snapshot)
        return working


def slow_redact(
    options: RedactOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> Redactor:
    """Build a redactor from options.

    Example:
        redact = slow_redact(paths=["user.password", "items.*.token"])
        redact({"user": {"password": "hunter2"}})
        # '{"user": {"password": "[REDACTED]"}}'

    Args:
        options: A RedactOptions instance or a dict of option fields.
        **overrides: Option fields merged on top of options.

    Returns:
        A callable Redactor.

    Raises:
        RedactConfigError: If any option is invalid, e.g. a path that is
            not a string or violates the path grammar.
    """
    if isinstance(options, RedactOptions):
        fields: dict[str, Any] = {name: getattr(options, name) for name in options.model_fields_set}
    else:
        fields = dict(options or {})
    fields.update(overrides)

    try:
        validated = RedactOptions(**fields)
    except ValidationError as e:
        raise RedactConfigError(_describe(e)) from e
    return Redactor(validated)


def _describe(error: ValidationError) -> str:
    """Extract the validator messages from a pydantic error."""
    messages = []
    for detail in error.errors():
        ctx = detail.get("ctx") or {}
        cause = ctx.get("error")
        messages.append(str(cause) if isinstance(cause, Exception) else detail["msg"])
    return "; ".join(messages)
