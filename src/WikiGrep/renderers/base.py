"""Base classes for output writers.

A writer receives the compiled listing once, then status updates and hits
as the search progresses, and is finalized when the command ends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from WikiGrep.core.models import PageHit


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_listing(self, listing: str, errors: int) -> None:
        """Receive the annotated program listing.

        Args:
            listing: HTML listing, one display line per source line.
            errors: Number of lines that failed to compile.
        """

    @abstractmethod
    def write_status(self, text: str) -> None:
        """Receive a progress update."""

    @abstractmethod
    def write_hit(self, hit: PageHit) -> None:
        """Receive one matching page."""

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_listing(self, listing: str, errors: int) -> None:
        for writer in self.writers:
            writer.write_listing(listing, errors)

    def write_status(self, text: str) -> None:
        for writer in self.writers:
            writer.write_status(text)

    def write_hit(self, hit: PageHit) -> None:
        for writer in self.writers:
            writer.write_hit(hit)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)


class OutputError(RuntimeError):
    """Raised when output cannot be written."""
