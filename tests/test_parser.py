"""Tests for input parsing."""

from __future__ import annotations

import sys

import pytest

from euclid_gcd.core.parser import parse_int, parse_pair
from euclid_gcd.core.types import InputParseError


class TestParseInt:
    """Tests for single-token parsing."""

    def test_plain_and_signed(self) -> None:
        """Test decimal tokens with and without sign."""
        assert parse_int("42") == 42
        assert parse_int("+42") == 42
        assert parse_int("-42") == -42
        assert parse_int("007") == 7

    def test_rejects_non_integers(self) -> None:
        """Test tokens Python's int() would accept or that are not integers."""
        for token in ("1.5", "1_000", "0x10", "abc", "", "-", "1e3"):
            with pytest.raises(InputParseError):
                parse_int(token)

    def test_error_is_value_error(self) -> None:
        """Test that InputParseError can be caught as ValueError."""
        with pytest.raises(ValueError) as exc_info:
            parse_int("twelve")
        assert "twelve" in str(exc_info.value)


class TestParsePair:
    """Tests for two-integer parsing."""

    def test_space_separated(self) -> None:
        """Test the common case."""
        assert parse_pair("12 18") == (12, 18)

    def test_any_whitespace(self) -> None:
        """Test newlines, tabs and surrounding whitespace."""
        assert parse_pair("  12\n\t18\n") == (12, 18)

    def test_extra_tokens_ignored(self) -> None:
        """Test that tokens after the second are ignored."""
        assert parse_pair("12 18 24 junk") == (12, 18)

    def test_insufficient_input(self) -> None:
        """Test empty and single-token input."""
        with pytest.raises(InputParseError) as exc_info:
            parse_pair("")
        assert "two integers" in str(exc_info.value)

        with pytest.raises(InputParseError):
            parse_pair("12")

    def test_malformed_token(self) -> None:
        """Test a non-numeric token in either position."""
        with pytest.raises(InputParseError):
            parse_pair("12 abc")
        with pytest.raises(InputParseError):
            parse_pair("abc 12")


@pytest.mark.skipif(
    not getattr(sys, "get_int_max_str_digits", lambda: 0)(),
    reason="interpreter has no integer string conversion limit",
)
class TestDigitLimit:
    """Tests for tokens beyond the interpreter's digit limit."""

    def test_too_many_digits(self) -> None:
        """Test that an over-long token raises InputParseError."""
        digits = sys.get_int_max_str_digits() + 1
        with pytest.raises(InputParseError) as exc_info:
            parse_int("1" + "0" * (digits - 1))
        assert f"{digits} digits" in str(exc_info.value)

    def test_sign_not_counted(self) -> None:
        """Test that the reported digit count excludes the sign."""
        digits = sys.get_int_max_str_digits() + 1
        with pytest.raises(InputParseError) as exc_info:
            parse_pair("-" + "9" * digits + " 10")
        assert f"{digits} digits" in str(exc_info.value)
