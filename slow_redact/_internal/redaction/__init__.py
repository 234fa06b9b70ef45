"""Redaction engine internals.

Do not call directly from user code; use slow_redact.slow_redact().
"""

from slow_redact._internal.redaction.access import MISSING, REMOVE, mutate, resolve
from slow_redact._internal.redaction.clone import (
    Kind,
    deep_clone,
    is_container,
    is_writable,
    kind_of,
)
from slow_redact._internal.redaction.models import (
    REDACTED_VALUE,
    RedactedDict,
    RedactedList,
    RedactOptions,
    Restorable,
    restorable_type,
    with_restore,
)
from slow_redact._internal.redaction.paths import (
    WILDCARD,
    concrete_path,
    parse_path,
    validate_path,
)
from slow_redact._internal.redaction.wildcard import redact_wildcard

__all__ = [
    "MISSING",
    "REMOVE",
    "resolve",
    "mutate",
    "Kind",
    "deep_clone",
    "is_container",
    "is_writable",
    "kind_of",
    "REDACTED_VALUE",
    "RedactOptions",
    "RedactedDict",
    "RedactedList",
    "Restorable",
    "restorable_type",
    "with_restore",
    "WILDCARD",
    "concrete_path",
    "parse_path",
    "validate_path",
    "redact_wildcard",
]
