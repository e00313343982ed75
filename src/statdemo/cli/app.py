"""CLI entry point for statdemo.

This module is the **sole error boundary** for the application.  It
turns command-line tokens into integers, reports the rejected ones,
prints the statistics report, and translates any escaped exception
into a well-defined exit code.

Architecture notes
------------------
* No arithmetic lives here — all work is delegated to ``core``.
* Every token is a candidate number.  There are no flags, so ``-5`` is
  read as minus five rather than as an option.
* Output goes to stdout, warnings included, in argument order.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from statdemo.cli import exit_codes
from statdemo.cli.console import console
from statdemo.cli.logger import Logger
from statdemo.config import DemoConfig
from statdemo.core.parsing import parse_tokens
from statdemo.core.report import USAGE_HINT, build_report_lines
from statdemo.exceptions import StatDemoError


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    config: DemoConfig | None = None,
) -> int:
    """Run the statdemo CLI.

    Parameters
    ----------
    argv:
        Explicit token list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    config:
        Runtime settings.  Defaults to :class:`DemoConfig` with short
        log tags.

    Returns
    -------
    int
        OS process exit code, always :data:`exit_codes.SUCCESS`.
    """
    tokens = list(sys.argv[1:] if argv is None else argv)
    logger = Logger.from_config(config or DemoConfig())

    result = parse_tokens(tokens)
    for token in result.rejected:
        logger.warning(f"Ignoring invalid number: {token}")

    if not result:
        logger.info(USAGE_HINT)
        return exit_codes.SUCCESS

    for line in build_report_lines(result.values):
        console.print(line)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    logger = Logger()
    try:
        code = main()
        sys.exit(code)
    except StatDemoError as exc:
        logger.error(str(exc))
        if exc.hint:
            logger.error(f"Hint: {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        logger.error("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.error(f"Unexpected error. {type(exc).__name__}: {exc}")
        sys.exit(exit_codes.UNEXPECTED_ERROR)
