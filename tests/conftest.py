"""Shared pytest fixtures and configuration for the statdemo test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* CLI tests capture stdout through ``capsys``.
"""

from __future__ import annotations

import pytest


class RecordingConsole:
    """Console double that keeps printed lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def print(self, *objects: object) -> None:
        self.lines.append(" ".join(str(obj) for obj in objects))


@pytest.fixture
def recording_console() -> RecordingConsole:
    return RecordingConsole()
