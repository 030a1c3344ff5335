"""Tests for pattern filtering"""
import pytest

from killallgit.exceptions import InvalidPatternError, KillAllGitError
from killallgit.services.pattern_filter import compile_pattern, filter_names

NAMES = ["feature/x", "bugfix/feature-y", "main", "release/1.0", "feature/z"]


class TestFilterNames:
    """Test regular-expression matching of names."""

    def test_literal_matches_anywhere(self):
        """Test a bare literal is found inside longer names."""
        assert filter_names("feature", NAMES) == ["feature/x", "bugfix/feature-y", "feature/z"]

    def test_anchored_pattern(self):
        """Test anchors are honoured when given explicitly."""
        assert filter_names("^feature/", NAMES) == ["feature/x", "feature/z"]

    def test_order_preserved(self):
        """Test matches keep the backend's listing order."""
        names = ["z-feature", "a-feature", "m-feature"]
        assert filter_names("feature", names) == names

    def test_no_match(self):
        """Test a pattern matching nothing gives an empty list."""
        assert filter_names("nonexistent/.*", NAMES) == []

    def test_empty_pattern_matches_all(self):
        """Test the empty pattern matches every name."""
        assert filter_names("", NAMES) == NAMES

    def test_compiled_pattern_accepted(self):
        """Test a precompiled pattern can be reused."""
        regex = compile_pattern(r"\d")
        assert filter_names(regex, NAMES) == ["release/1.0"]


class TestInvalidPattern:
    """Test invalid regular expressions."""

    @pytest.mark.parametrize("pattern", ["feature/(", "[unclosed", "*oops"])
    def test_invalid_pattern_raises(self, pattern):
        """Test compile failures raise InvalidPatternError."""
        with pytest.raises(InvalidPatternError) as exc_info:
            compile_pattern(pattern)

        assert exc_info.value.pattern == pattern
        assert "Invalid regex pattern" in str(exc_info.value)
        assert isinstance(exc_info.value, KillAllGitError)

    def test_filter_with_invalid_pattern_raises(self):
        """Test filter_names propagates the error."""
        with pytest.raises(InvalidPatternError):
            filter_names("(", NAMES)
