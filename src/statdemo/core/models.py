"""Domain models for statdemo.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Descriptive statistics
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Stats:
    """Mean, min and max of an integer sequence.

    For an empty sequence every field is ``0.0``.
    """

    mean: float
    """Arithmetic average of all inputs."""

    min: float
    """Smallest input, stored as a float."""

    max: float
    """Largest input, stored as a float."""


# ---------------------------------------------------------------------------
# Token parsing outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParseResult:
    """Integers accepted from the command line plus the tokens rejected.

    Both tuples preserve argument order.  Rejected tokens are omitted from
    ``values`` rather than replaced by placeholders.
    """

    values: tuple[int, ...]
    rejected: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def __bool__(self) -> bool:
        return len(self.values) > 0
