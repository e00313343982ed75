"""statdemo — integer statistics demonstration CLI.

Parses integers from the command line and prints their count, mean,
min, max, a monotonicity check and a running sum.
"""

from statdemo.version import __version__

__all__: list[str] = ["__version__"]
