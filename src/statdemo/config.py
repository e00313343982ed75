"""Runtime configuration for statdemo.

Settings are passed explicitly into the objects that need them; nothing
is read from the environment or from files.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DemoConfig:
    """Immutable settings for a single program invocation."""

    verbose_logs: bool = False
    """Use the long ``[INFORMATION]`` tag for info-level log lines."""
