"""Tests for path parsing and validation."""

import pytest

from slow_redact._internal.redaction.paths import (
    WILDCARD,
    concrete_path,
    parse_path,
    validate_path,
)


class TestParsePath:
    """Tests for parse_path function."""

    def test_dotted_path(self):
        """Should split dotted keys."""
        assert parse_path("headers.cookie") == ("headers", "cookie")

    def test_single_key(self):
        """Should return a single segment for a plain key."""
        assert parse_path("secret") == ("secret",)

    def test_bracket_with_double_quotes(self):
        """Should strip double quotes inside brackets."""
        assert parse_path('["weird-key"]["another-weird"]') == ("weird-key", "another-weird")

    def test_bracket_with_single_quotes(self):
        """Should strip single quotes inside brackets."""
        assert parse_path("['single-quoted'].value") == ("single-quoted", "value")

    def test_numeric_index(self):
        """Should keep indices as string segments."""
        assert parse_path("users[0].password") == ("users", "0", "password")

    def test_dots_inside_brackets_are_literal(self):
        """Should not split on dots inside brackets."""
        assert parse_path('["a.b"].c') == ("a.b", "c")

    def test_other_quote_inside_quotes_is_literal(self):
        """Should keep a different quote character inside a quoted key."""
        assert parse_path("[\"it's\"]") == ("it's",)

    def test_dotted_wildcard(self):
        """Should produce a wildcard segment for a dotted star."""
        assert parse_path("users.*.password") == ("users", WILDCARD, "password")

    def test_bracketed_wildcard(self):
        """Should produce a wildcard segment for a bracketed star."""
        assert parse_path("items[*]") == ("items", WILDCARD)

    def test_star_inside_key_is_literal(self):
        """Should treat a star adjacent to other characters as a literal key."""
        segments = parse_path("a.b*c")
        assert segments == ("a", "b*c")
        assert WILDCARD not in segments

    def test_leading_and_trailing_dots_are_dropped(self):
        """Should ignore empty dotted segments."""
        assert parse_path(".a.b.") == ("a", "b")

    def test_deterministic(self):
        """Should return identical segments for identical input."""
        assert parse_path('a["b"][0].*') == parse_path('a["b"][0].*')

    def test_malformed_input_does_not_raise(self):
        """Should not raise for malformed brackets."""
        assert parse_path("nested[a[b]") == ("nested", "a", "b")


class TestValidatePath:
    """Tests for validate_path function."""

    @pytest.mark.parametrize(
        "path",
        [
            "valid.path",
            "data[0].secret",
            '["quoted-key"].value',
            "['single-quoted'].value",
            "wildcard.*",
        ],
    )
    def test_valid_paths(self, path):
        """Should accept well-formed paths."""
        assert validate_path(path) == parse_path(path)

    @pytest.mark.parametrize(
        "path",
        [
            "",
            "invalid..path",
            "a..b..c",
            "invalid[unclosed",
            "invalid]unopened",
            "nested[a[b]",
            ".",
            "[]",
        ],
    )
    def test_invalid_paths(self, path):
        """Should reject malformed paths with the path in the message."""
        with pytest.raises(ValueError) as exc_info:
            validate_path(path)
        assert str(exc_info.value) == f"Invalid redaction path ({path})"


class TestConcretePath:
    """Tests for concrete_path function."""

    def test_terminal_dotted_wildcard(self):
        """Should replace a trailing wildcard with the key."""
        assert concrete_path("secrets.*", "key1") == "secrets.key1"

    def test_intermediate_wildcard(self):
        """Should replace a wildcard in the middle of the path."""
        assert concrete_path("users.*.password", "user1") == "users.user1.password"

    def test_index(self):
        """Should render indices as numbers."""
        assert concrete_path("items.*", 2) == "items.2"

    def test_bracketed_wildcard(self):
        """Should replace a bracketed wildcard inside its brackets."""
        assert concrete_path('a[*]["b"]', 0) == 'a[0]["b"]'

    def test_quoted_wildcard(self):
        """Should keep the quotes around a quoted wildcard."""
        assert concrete_path('a["*"]', "x") == 'a["x"]'

    def test_leading_wildcard(self):
        """Should replace a wildcard at the start of the path."""
        assert concrete_path("*.token", "svc") == "svc.token"

    def test_literal_star_is_untouched(self):
        """Should skip stars that are part of a longer key."""
        assert concrete_path("a*b.*", "k") == "a*b.k"

    def test_quoted_star_outside_brackets_is_untouched(self):
        """Should substitute the real wildcard, not a quoted star key before it."""
        assert concrete_path("a.'*'.b.*", "k") == "a.'*'.b.k"

    def test_star_inside_bracketed_key_is_untouched(self):
        """Should leave stars inside a longer bracketed key alone."""
        assert concrete_path('["x.*.y"].*', 0) == '["x.*.y"].0'
