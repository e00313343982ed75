"""Pure command-line token parsing.

Tokens are read the way C's ``stoi`` reads them: optional leading
whitespace, an optional sign, then one or more ASCII digits.  Anything
after the digits is ignored, so ``"12abc"`` reads as ``12`` and ``"3.9"``
as ``3``.

:func:`parse_tokens` never writes output; it returns the rejected tokens
so the caller decides how to report them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from statdemo.core.math_utils import INT32_MAX, INT32_MIN
from statdemo.core.models import ParseResult
from statdemo.exceptions import InvalidNumberError, NumberOutOfRangeError, TokenParseError

# ``[0-9]`` rather than ``\d``: Unicode digits are not integer literals here.
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_int(token: str) -> int:
    """Read the leading signed 32-bit integer from *token*.

    Raises
    ------
    InvalidNumberError
        No integer literal at the start of the token.
    NumberOutOfRangeError
        The literal does not fit in a signed 32-bit int.
    """
    match = _INT_PREFIX.match(token)
    if match is None:
        raise InvalidNumberError(token, f"Not an integer: {token!r}")

    value = int(match.group(1))
    if not INT32_MIN <= value <= INT32_MAX:
        raise NumberOutOfRangeError(
            token,
            f"Integer out of range: {token!r}",
            hint=f"Values must lie between {INT32_MIN} and {INT32_MAX}.",
        )
    return value


def parse_tokens(tokens: Iterable[str]) -> ParseResult:
    """Split *tokens* into accepted integers and rejected tokens."""
    values: list[int] = []
    rejected: list[str] = []
    for token in tokens:
        try:
            values.append(parse_int(token))
        except TokenParseError:
            rejected.append(token)
    return ParseResult(values=tuple(values), rejected=tuple(rejected))
