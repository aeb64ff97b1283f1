"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from WikiGrep.cli.runner import CommandRunner
from WikiGrep.config import DEFAULT_CONFIG_PATH, AppConfig, load_config_with_defaults

_PROGRAM_OPTION = click.option(
    "--program",
    "program_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Grep program file; overrides search.program from the config.",
)


@click.group(help="WikiGrep: search wiki pages with a small grep language.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file, then merges the given
    config onto config/default.yml when that file exists.
    """
    load_dotenv()
    ctx.obj = load_config_with_defaults(config_path)


@cli.command("check")
@_PROGRAM_OPTION
@click.pass_context
def check_cmd(ctx: click.Context, program_path: Path | None) -> None:
    """Compile the grep program and report failing lines."""
    cfg: AppConfig = ctx.obj
    errors = CommandRunner(cfg).run_check(ctx.command.name, _program_source(cfg, program_path))
    if errors:
        ctx.exit(1)


@cli.command("search")
@_PROGRAM_OPTION
@click.pass_context
def search_cmd(ctx: click.Context, program_path: Path | None) -> None:
    """Run the grep program over every page of the configured source.

    Raises:
        click.Abort: When the program has errors or the search fails.
    """
    cfg: AppConfig = ctx.obj
    CommandRunner(cfg).run_search(ctx.command.name, _program_source(cfg, program_path))


def _program_source(cfg: AppConfig, program_path: Path | None) -> str:
    if program_path is not None:
        return program_path.read_text(encoding="utf-8")
    return cfg.search.program
