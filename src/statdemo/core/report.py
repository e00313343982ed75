"""Report assembly for the CLI driver.

Builds the exact text lines printed for a run; rendering them is left
to the CLI layer.
"""

from __future__ import annotations

from collections.abc import Sequence

from statdemo.core.math_utils import (
    compute_stats,
    is_strictly_increasing,
    multiply,
    running_sum,
)

USAGE_HINT: str = "No numbers provided. Example: statdemo 1 2 3 4"


def format_number(value: float) -> str:
    """Render *value* with six significant digits, trailing zeros dropped.

    ``2.3333333`` → ``2.33333``, ``4.0`` → ``4``, ``1e6`` → ``1e+06``.
    """
    return f"{value:g}"


def build_report_lines(values: Sequence[int]) -> list[str]:
    """Return the report lines for a non-empty sequence of integers."""
    stats = compute_stats(values)
    total = running_sum(values)
    increasing = "YES" if is_strictly_increasing(values) else "NO"

    return [
        f"Count: {len(values)}",
        f"Mean:  {format_number(stats.mean)}",
        f"Min:   {format_number(stats.min)}",
        f"Max:   {format_number(stats.max)}",
        f"Strictly increasing: {increasing}",
        f"Sum via add(): {total}",
        f"Sum * 2 via multiply(): {multiply(total, 2)}",
    ]
