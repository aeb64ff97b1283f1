"""Console output via the package logger."""

from __future__ import annotations

from WikiGrep.core.models import PageHit
from WikiGrep.renderers.base import OutputWriter
from WikiGrep.utils.log import log


def caption(errors: int) -> str:
    """Panel caption for a compiled program."""
    return f"{errors} errors" if errors else "ready"


class ConsoleOutputWriter(OutputWriter):
    """Write listing caption, progress and hits to the log."""

    def __init__(self) -> None:
        self.last_status: str | None = None

    def write_listing(self, listing: str, errors: int) -> None:
        del listing
        log.info("Program %s", caption(errors))

    def write_status(self, text: str) -> None:
        self.last_status = text
        log.debug("%s", text)

    def write_hit(self, hit: PageHit) -> None:
        log.info("%s  /%s.html", hit.render(), hit.slug)

    def finalize(self, action: str) -> None:
        """Log the final status line once."""
        del action
        if self.last_status:
            log.info("%s", self.last_status)
