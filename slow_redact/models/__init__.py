"""Public models for slow-redact."""

from slow_redact._internal.redaction.models import (
    REDACTED_VALUE,
    RedactedDict,
    RedactedList,
    RedactOptions,
    Restorable,
)

__all__ = ["REDACTED_VALUE", "RedactOptions", "RedactedDict", "RedactedList", "Restorable"]
