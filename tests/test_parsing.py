"""Tests for command-line token parsing (core/parsing.py)."""

from __future__ import annotations

import pytest

from statdemo.core.models import ParseResult
from statdemo.core.parsing import parse_int, parse_tokens
from statdemo.exceptions import (
    InvalidNumberError,
    NumberOutOfRangeError,
    TokenParseError,
)


# ---------------------------------------------------------------------------
# parse_int
# ---------------------------------------------------------------------------

class TestParseInt:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("0", 0),
            ("42", 42),
            ("-7", -7),
            ("+9", 9),
            ("007", 7),
            ("  15", 15),
            ("\t-3", -3),
        ],
    )
    def test_valid(self, token: str, expected: int) -> None:
        assert parse_int(token) == expected

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("12abc", 12), ("3.9", 3), ("5 6", 5), ("-1e5", -1)],
    )
    def test_trailing_characters_ignored(self, token: str, expected: int) -> None:
        assert parse_int(token) == expected

    @pytest.mark.parametrize("token", ["", "three", "abc12", "-", "+", " ", "--1", "٣"])
    def test_invalid(self, token: str) -> None:
        with pytest.raises(InvalidNumberError) as exc_info:
            parse_int(token)
        assert exc_info.value.token == token

    def test_int32_bounds_accepted(self) -> None:
        assert parse_int("2147483647") == 2147483647
        assert parse_int("-2147483648") == -2147483648

    @pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999"])
    def test_out_of_range(self, token: str) -> None:
        with pytest.raises(NumberOutOfRangeError) as exc_info:
            parse_int(token)
        assert exc_info.value.hint is not None

    def test_errors_share_base(self) -> None:
        assert issubclass(InvalidNumberError, TokenParseError)
        assert issubclass(NumberOutOfRangeError, TokenParseError)


# ---------------------------------------------------------------------------
# parse_tokens
# ---------------------------------------------------------------------------

class TestParseTokens:
    def test_splits_values_and_rejected(self) -> None:
        result = parse_tokens(["1", "2", "three", "4"])
        assert result == ParseResult(values=(1, 2, 4), rejected=("three",))

    def test_preserves_order(self) -> None:
        result = parse_tokens(["x", "3", "y", "-1", "99999999999"])
        assert result.values == (3, -1)
        assert result.rejected == ("x", "y", "99999999999")

    def test_empty(self) -> None:
        result = parse_tokens([])
        assert result.values == ()
        assert result.rejected == ()
        assert not result

    def test_all_invalid_is_falsy(self) -> None:
        result = parse_tokens(["a", "b"])
        assert not result
        assert len(result) == 0
        assert result.rejected == ("a", "b")

    def test_accepts_generator(self) -> None:
        result = parse_tokens(t for t in ["5", "6"])
        assert result.values == (5, 6)
