"""Path grammar for addressing locations inside nested structures.

Supported forms:
    user.password            dotted keys
    ["weird-key"]['inner']   bracketed keys, optionally quoted
    items[0]                 numeric indices
    users.*.password         wildcard segment (dotted or bracketed)
"""

WILDCARD = "*"

_QUOTES = ("'", '"')


def _scan(path: str) -> list[tuple[str, int, int]]:
    """Split a path into segments with their [start, end) span in the text.

    The span covers the first to last character kept in the segment, so
    the quotes of a bracketed key fall outside it.
    """
    spans: list[tuple[str, int, int]] = []
    current = ""
    start = end = 0
    in_brackets = False
    quote = ""

    for index, char in enumerate(path):
        if (char == "." and not in_brackets) or char == "[" or (char == "]" and in_brackets):
            if current:
                spans.append((current, start, end))
                current = ""
            if char == "[":
                in_brackets = True
            elif char == "]":
                in_brackets = False
                quote = ""
            continue
        if char in _QUOTES and in_brackets:
            if not quote:
                quote = char
                continue
            if char == quote:
                quote = ""
                continue
        if not current:
            start = index
        current += char
        end = index + 1

    if current:
        spans.append((current, start, end))

    return spans


def parse_path(path: str) -> tuple[str, ...]:
    """Split a path string into its segments.

    The parser never raises; malformed paths are rejected by
    `validate_path` when a redactor is configured.

    Args:
        path: The path string to parse.

    Returns:
        The ordered segments. A wildcard segment is the string "*".
    """
    return tuple(segment for segment, _, _ in _scan(path))


def validate_path(path: str) -> tuple[str, ...]:
    """Check a path against the grammar and return its segments.

    Raises:
        ValueError: If the path is empty, contains "..", has unbalanced
            or nested brackets, or addresses no segment at all.
    """
    if not path or ".." in path:
        raise ValueError(f"Invalid redaction path ({path})")

    open_bracket = False
    for char in path:
        if char == "[":
            if open_bracket:
                raise ValueError(f"Invalid redaction path ({path})")
            open_bracket = True
        elif char == "]":
            if not open_bracket:
                raise ValueError(f"Invalid redaction path ({path})")
            open_bracket = False
    if open_bracket:
        raise ValueError(f"Invalid redaction path ({path})")

    segments = parse_path(path)
    if not segments:
        raise ValueError(f"Invalid redaction path ({path})")
    return segments


def concrete_path(path: str, key: object) -> str:
    """Substitute the first wildcard segment in a path with a key or index.

    Stars that are part of a longer or quoted-outside-brackets key are not
    wildcards and are left alone.
    """
    for segment, start, end in _scan(path):
        if segment == WILDCARD:
            return f"{path[:start]}{key}{path[end:]}"
    return path
