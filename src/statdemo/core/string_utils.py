"""Pure text helpers with a narrow, ASCII-only character contract.

Case conversion only touches ``a-z`` / ``A-Z``; every other character,
including non-ASCII letters, passes through unchanged.  None of these
functions is used by the CLI driver.
"""

from __future__ import annotations

import string

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

TRIM_CHARS: str = " \t\n\r"
"""Characters removed by :func:`trim`.  ``\\v`` and ``\\f`` are kept."""


def to_upper(s: str) -> str:
    """Upper-case ASCII letters in *s*; leave everything else alone."""
    return s.translate(_TO_UPPER)


def to_lower(s: str) -> str:
    """Lower-case ASCII letters in *s*; leave everything else alone."""
    return s.translate(_TO_LOWER)


def trim(s: str) -> str:
    """Strip leading and trailing :data:`TRIM_CHARS` from *s*."""
    return s.strip(TRIM_CHARS)


def starts_with(s: str, prefix: str) -> bool:
    """True when *s* begins with *prefix*.  An empty prefix always matches."""
    if len(prefix) > len(s):
        return False
    return s[: len(prefix)] == prefix


def ends_with(s: str, suffix: str) -> bool:
    """True when *s* ends with *suffix*.  An empty suffix always matches."""
    if len(suffix) > len(s):
        return False
    return s[len(s) - len(suffix):] == suffix
