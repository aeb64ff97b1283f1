"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation, resource cleanup and
error handling for command execution.
"""

from __future__ import annotations

import click

from WikiGrep.cli.commands import CheckCommand, SearchCommand
from WikiGrep.config import AppConfig
from WikiGrep.renderers import create_output_writer
from WikiGrep.services import create_search_service
from WikiGrep.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_check(self, action: str, source: str) -> int:
        """Compile ``source`` and report errors.

        Returns:
            Number of compile errors.
        """
        self._configure_logging(action)
        return CheckCommand(source=source).execute()

    def run_search(self, action: str, source: str) -> None:
        """Execute the search command.

        Args:
            action: The CLI command name (e.g., 'search').
            source: Grep program source.

        Raises:
            click.Abort: When compilation or the search fails.
        """
        self._configure_logging(action)
        search_service = None
        try:
            output_writer = create_output_writer(self.config)
            search_service = create_search_service(self.config)
            command = SearchCommand(
                source=source,
                search_service=search_service,
                output_writer=output_writer,
            )
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
        finally:
            if search_service is not None:
                search_service.close()

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
