"""Process exit statuses returned by :func:`statdemo.cli.app.cli`.

Any mix of valid and invalid tokens ends in :data:`SUCCESS`; the other
values only appear when something outside token handling goes wrong.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Report or usage hint printed."""

GENERAL_ERROR: int = 1
"""A StatDemoError reached ``cli()`` and was logged at error level."""

KEYBOARD_INTERRUPT: int = 130
"""Run cancelled with Ctrl+C (signal 2 offset by 128)."""

UNEXPECTED_ERROR: int = 2
"""Some other exception reached ``cli()``; its type and text were logged."""
