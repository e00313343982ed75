"""Leveled console logger.

Each call writes exactly one line to stdout: a fixed tag followed by
the message.  The info tag is ``[INFO] `` by default and
``[INFORMATION] `` when the logger is built with ``verbose=True``.
"""

from __future__ import annotations

from typing import Any

from statdemo.cli.console import console as default_console
from statdemo.config import DemoConfig

INFO_TAG: str = "[INFO] "
INFO_TAG_VERBOSE: str = "[INFORMATION] "
WARN_TAG: str = "[WARN] "
ERROR_TAG: str = "[ERR ] "


class Logger:
    """Write tagged info / warning / error lines to the console."""

    def __init__(self, verbose: bool = False, *, console: Any = None) -> None:
        self.verbose: bool = verbose
        self._console = console if console is not None else default_console

    @classmethod
    def from_config(cls, config: DemoConfig, *, console: Any = None) -> Logger:
        """Build a logger whose info tag follows ``config.verbose_logs``."""
        return cls(verbose=config.verbose_logs, console=console)

    @property
    def info_tag(self) -> str:
        """Tag written before info-level messages."""
        return INFO_TAG_VERBOSE if self.verbose else INFO_TAG

    def _emit(self, tag: str, msg: str) -> None:
        self._console.print(f"{tag}{msg}")

    def info(self, msg: str) -> None:
        """Write *msg* behind the info tag."""
        self._emit(self.info_tag, msg)

    def warning(self, msg: str) -> None:
        """Write *msg* behind ``[WARN] ``."""
        self._emit(WARN_TAG, msg)

    def error(self, msg: str) -> None:
        """Write *msg* behind ``[ERR ] ``."""
        self._emit(ERROR_TAG, msg)
