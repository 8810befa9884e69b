#!/usr/bin/env python3
"""
Tests for the exception hierarchy and the parse error formatter.
"""

import re
import pytest
from chronospec.shared.errors import (
    ChronospecError,
    ChronospecImplementationError,
    ParseError,
    ValidationError,
)
from chronospec.shared.tokens import Range

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    return _ANSI_ESCAPE.sub("", text)


class TestParseErrorFormatting:
    """Caret rendering"""

    def test_plain_format(self):
        err = ParseError("Could not parse '2018Y3MQ'. Error detected at 'Q'", "2018Y3MQ", "Q")
        out = err.format(color=False)
        lines = out.splitlines()
        assert lines[0] == "error: Could not parse '2018Y3MQ'. Error detected at 'Q'"
        assert lines[2] == "  | 2018Y3MQ"
        assert lines[3] == "  | " + " " * 7 + "^"

    def test_colored_format_has_same_text(self):
        err = ParseError("bad", "abc", "c")
        assert _strip_ansi(err.format(color=True)) == err.format(color=False)

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        err = ParseError("bad", "abc", "c")
        assert "\x1b[" not in err.format()

    def test_column(self):
        assert ParseError("m", "abcdef", "def").column == 3
        assert ParseError("m", "abc", "").column == 3


class TestHierarchy:
    """Error categories"""

    def test_user_errors_share_a_base(self):
        assert issubclass(ParseError, ChronospecError)
        assert issubclass(ValidationError, ChronospecError)
        assert not issubclass(ChronospecImplementationError, ChronospecError)

    def test_validation_error_fields(self):
        err = ValidationError("Invalid month 13", unit="month", value=13)
        assert str(err) == "Invalid month 13"
        assert err.unit == "month"
        assert err.value == 13

    def test_implementation_error_code(self):
        assert str(ChronospecImplementationError("broken")) == "[E9999] broken"
        assert str(ChronospecImplementationError("broken", "E0001")) == "[E0001] broken"


class TestRangeInvariants:
    """Range construction and enumeration"""

    def test_zero_step_rejected(self):
        with pytest.raises(ValueError):
            Range(1, 2, 0)

    def test_open_range_cannot_be_enumerated(self):
        with pytest.raises(ChronospecImplementationError):
            list(Range.contextual(1, -1))
        with pytest.raises(ChronospecImplementationError):
            len(Range.contextual(1, -1))

    def test_str(self):
        assert str(Range(1, 5)) == "1..5"
        assert str(Range.contextual(1, -1)) == "1..-1//open"
        assert str(Range(0, 12, 6)) == "0..12//6"
