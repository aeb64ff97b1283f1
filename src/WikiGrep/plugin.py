"""Grep plugin seam for a page host.

The host registers the plugin explicitly into its own registry and then
asks it to render a grep item, run its program, or open every page a run
has listed.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, MutableMapping, Optional, Protocol

from WikiGrep.core.compiler import parse_program
from WikiGrep.renderers.console import caption
from WikiGrep.renderers.html import render_panel
from WikiGrep.renderers.links import link_titles
from WikiGrep.services.search import GrepSearchService, HitSink, StatusSink
from WikiGrep.utils.log import log

PLUGIN_NAME = "grep"


class Navigator(Protocol):
    """Host service that opens a page by title."""

    def open(self, title: str, origin: Optional[Any]) -> None:
        """Open ``title``; ``origin`` is the page to open it beside, or None for a new lineup."""
        raise NotImplementedError


def open_all(navigator: Navigator, origin: Optional[Any], titles: Iterable[str]) -> None:
    """Open every title; only the first keeps the originating page."""
    for title in titles:
        navigator.open(title, origin)
        origin = None


@dataclass(slots=True)
class GrepPlugin:
    """Host-facing operations for one grep item.

    ``item`` mappings follow the page story item shape; the program source is
    the item's ``text``.
    """

    service: GrepSearchService

    def emit(self, item: Mapping[str, Any]) -> str:
        """Render the item's panel with its listing and compile caption."""
        _, listing, errors = parse_program(str(item.get("text") or ""))
        return render_panel(listing, caption(errors))

    def find(
        self,
        item: Mapping[str, Any],
        *,
        on_status: StatusSink,
        on_hit: HitSink,
        cancel: threading.Event | None = None,
    ) -> bool:
        """Run the item's program unless it has compile errors.

        Returns:
            Whether the search was started.
        """
        program, _, errors = parse_program(str(item.get("text") or ""))
        if errors:
            log.info("Grep item not run: %d compile errors", errors)
            return False
        self.service.run(program, on_status=on_status, on_hit=on_hit, cancel=cancel)
        return True

    def open_results(self, navigator: Navigator, origin: Optional[Any], results: Iterable[str]) -> None:
        """Open every page referenced by rendered results, in result order."""
        open_all(navigator, origin, [title for text in results for title in link_titles(text)])


def register(registry: MutableMapping[str, GrepPlugin], service: GrepSearchService) -> GrepPlugin:
    """Install a grep plugin under ``"grep"`` in a host registry."""
    plugin = GrepPlugin(service=service)
    registry[PLUGIN_NAME] = plugin
    return plugin
