"""Integer arithmetic helpers and sequence statistics.

``add`` and ``multiply`` behave like native signed 32-bit ints: results
outside the range wrap around (two's complement) instead of growing.
``compute_stats`` sums with an unbounded accumulator, so the mean never
overflows.
"""

from __future__ import annotations

from collections.abc import Sequence

from statdemo.core.models import Stats

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1
_INT32_SPAN: int = 2**32


def wrap_int32(value: int) -> int:
    """Fold *value* into the signed 32-bit range."""
    return (value - INT32_MIN) % _INT32_SPAN + INT32_MIN


def add(a: int, b: int) -> int:
    """Return ``a + b`` wrapped to signed 32 bits."""
    return wrap_int32(a + b)


def multiply(a: int, b: int) -> int:
    """Return ``a * b`` wrapped to signed 32 bits."""
    return wrap_int32(a * b)


def running_sum(values: Sequence[int]) -> int:
    """Fold *values* through :func:`add`, starting at zero."""
    total = 0
    for value in values:
        total = add(total, value)
    return total


def compute_stats(values: Sequence[int]) -> Stats:
    """Return mean, min and max of *values*.

    An empty sequence yields ``Stats(0.0, 0.0, 0.0)``.
    """
    if not values:
        return Stats(mean=0.0, min=0.0, max=0.0)

    return Stats(
        mean=sum(values) / len(values),
        min=float(min(values)),
        max=float(max(values)),
    )


def is_strictly_increasing(values: Sequence[int]) -> bool:
    """Report whether each element exceeds its predecessor.

    The scan starts at index 2, so the first pair ``(values[0], values[1])``
    is never compared: ``[5, 1, 2, 3]`` reports ``True``.  Callers rely on
    this exact behaviour; do not "fix" the starting index.
    """
    if len(values) <= 1:
        return True

    for i in range(2, len(values)):
        if values[i] <= values[i - 1]:
            return False
    return True
