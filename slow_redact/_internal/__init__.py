"""Internal modules for slow-redact.

These are not intended for direct use in application code.

Modules:
    redaction - Path parsing, cloning, traversal and wildcard expansion
"""
