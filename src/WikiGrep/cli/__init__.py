"""CLI package for WikiGrep command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from WikiGrep.cli.runner import CommandRunner
from WikiGrep.cli.ui import cli


def main() -> None:
    """Run WikiGrep CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
