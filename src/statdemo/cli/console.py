"""Stdout writer for report and log lines, backed by Rich when installed.

Lines are handed to Rich as pre-built segments, so tabs, carriage
returns and other control characters inside echoed tokens reach stdout
unchanged.  Without Rich the same text is written with ``print``.
"""

from __future__ import annotations

import sys
from typing import Any

from statdemo.exceptions import StatDemoError


def _load_rich() -> tuple[type[Any], type[Any], type[Any]]:
    """Return Rich's ``Console``, ``Segment`` and ``Segments`` classes."""
    try:
        from rich.console import Console
        from rich.segment import Segment, Segments
    except ModuleNotFoundError as exc:
        raise StatDemoError(
            "rich is not installed.",
            hint="Install with: pip install rich",
        ) from exc
    return Console, Segment, Segments


def get_rich_console() -> Any:
    """Create a Rich console that writes plain text to stdout."""
    console_class, _, _ = _load_rich()
    return console_class(
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


class _ConsoleProxy:
    """Writes one line of text per call, verbatim."""

    def print(self, *objects: object) -> None:
        """Join *objects* with spaces and write them as a single line."""
        line = " ".join(str(obj) for obj in objects)
        try:
            _, segment, segments = _load_rich()
            rich_console = get_rich_console()
        except StatDemoError:
            print(line, file=sys.stdout)
            return
        rich_console.print(segments([segment(line), segment.line()]))


console = _ConsoleProxy()
