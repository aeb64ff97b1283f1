"""Command implementations for the WikiGrep CLI.

Business logic for ``check`` and ``search``, separated from click option
handling and resource management.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass

from WikiGrep.core.compiler import CompiledSource, compile_source
from WikiGrep.renderers import OutputWriter
from WikiGrep.services.search import GrepSearchService
from WikiGrep.utils.log import log


class ProgramError(ValueError):
    """Raised when a grep program has compile errors."""


@dataclass(slots=True)
class CheckCommand:
    """Compile a program and report its failing lines."""

    source: str

    def execute(self) -> int:
        """Log each failing line.

        Returns:
            Number of compile errors.
        """
        compiled = compile_source(self.source)
        _log_problems(compiled)
        log.info("Compiled %d steps, %d errors", len(compiled.program), compiled.errors)
        return compiled.errors


@dataclass(slots=True)
class SearchCommand:
    """Compile a program and run it over every page of the configured source."""

    source: str
    search_service: GrepSearchService
    output_writer: OutputWriter
    cancel: threading.Event | None = None

    def execute(self) -> None:
        """Run the search, streaming status and hits to the output writer.

        Raises:
            ProgramError: If the program does not compile.
        """
        compiled = compile_source(self.source)
        self.output_writer.write_listing(compiled.listing, compiled.errors)
        if compiled.errors:
            _log_problems(compiled)
            raise ProgramError(f"program has {compiled.errors} errors")

        log.info("Running %d steps (chained=%s)", len(compiled.program), self.search_service.chained)
        self.search_service.run(
            compiled.program,
            on_status=self.output_writer.write_status,
            on_hit=self.output_writer.write_hit,
            cancel=self.cancel,
        )


def _log_problems(compiled: CompiledSource) -> None:
    for problem in compiled.problems:
        log.error("line %d: %s  | %s", problem.lineno, problem.message, problem.line)
