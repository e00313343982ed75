"""Core layer — pure arithmetic, text and parsing logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
"""

from statdemo.core.math_utils import (
    add,
    compute_stats,
    is_strictly_increasing,
    multiply,
    running_sum,
)
from statdemo.core.models import ParseResult, Stats
from statdemo.core.parsing import parse_int, parse_tokens
from statdemo.core.string_utils import ends_with, starts_with, to_lower, to_upper, trim

__all__: list[str] = [
    "ParseResult",
    "Stats",
    "add",
    "compute_stats",
    "ends_with",
    "is_strictly_increasing",
    "multiply",
    "parse_int",
    "parse_tokens",
    "running_sum",
    "starts_with",
    "to_lower",
    "to_upper",
    "trim",
]
