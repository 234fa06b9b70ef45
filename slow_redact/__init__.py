"""slow-redact: redact sensitive paths from nested data without mutating it.

Public API:
    slow_redact - Build a redactor from options
    Redactor - The callable returned by slow_redact
    RedactOptions - Validated redactor configuration

Example:
    from slow_redact import slow_redact

    redact = slow_redact(paths=["headers.cookie", "users.*.password"])
    line = redact(request_data)
"""

from slow_redact._version import __version__
from slow_redact.exceptions import RedactConfigError, SlowRedactError
from slow_redact.models import (
    REDACTED_VALUE,
    RedactedDict,
    RedactedList,
    RedactOptions,
    Restorable,
)
from slow_redact.redactor import Redactor, default_serialize, slow_redact

__all__ = [
    "__version__",
    "slow_redact",
    "Redactor",
    "RedactOptions",
    "RedactedDict",
    "RedactedList",
    "Restorable",
    "REDACTED_VALUE",
    "default_serialize",
    "SlowRedactError",
    "RedactConfigError",
]
