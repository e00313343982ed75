"""Entry point for ``python -m statdemo``; runs the same ``cli()`` as the script."""

from __future__ import annotations

from statdemo.cli.app import cli

if __name__ == "__main__":
    cli()
