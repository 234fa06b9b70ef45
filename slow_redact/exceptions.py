"""Public exceptions for slow-redact."""


class SlowRedactError(Exception):
    """Base exception for all slow-redact errors."""


class RedactConfigError(SlowRedactError):
    """Configuration error (invalid paths, censor or serialize options)."""
