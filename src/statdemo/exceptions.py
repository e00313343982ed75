"""Custom exception hierarchy for statdemo.

Every error raised by the package inherits from :class:`StatDemoError`
so that the CLI error boundary can render a clean message without
leaking internal stack traces.

Hierarchy
---------
StatDemoError
└── TokenParseError
    ├── InvalidNumberError
    └── NumberOutOfRangeError
"""

from __future__ import annotations


class StatDemoError(Exception):
    """Base exception for all statdemo errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument parsing ------------------------------------------------------

class TokenParseError(StatDemoError):
    """Raised when a command-line token cannot be read as an integer."""

    def __init__(self, token: str, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.token: str = token
        """The offending token, verbatim."""


class InvalidNumberError(TokenParseError):
    """Raised when a token has no leading integer literal."""


class NumberOutOfRangeError(TokenParseError):
    """Raised when a token's integer does not fit in a signed 32-bit int."""
