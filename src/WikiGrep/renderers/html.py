"""HTML output renderers."""

from __future__ import annotations

import html
from datetime import datetime
from pathlib import Path
from typing import Sequence

from WikiGrep.core.models import PageHit
from WikiGrep.renderers.base import OutputError, OutputWriter
from WikiGrep.renderers.console import caption
from WikiGrep.renderers.links import resolve_links
from WikiGrep.utils.log import log

_DOCUMENT = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{panel}
</body>
</html>
"""


def render_panel(listing: str, status: str, results: Sequence[str] = ()) -> str:
    """Render the grep panel: listing, find button, caption and result list.

    Args:
        listing: Annotated program listing (already HTML).
        status: Caption text, escaped here.
        results: Rendered result references; ``[[...]]`` links are resolved.

    Returns:
        Panel HTML fragment.
    """
    result_html = "".join(f"{resolve_links(text)}<br>" for text in results)
    return (
        '<div style="background-color:#eee;padding:15px;">\n'
        '  <div style="text-align:center">\n'
        f"    <div class=listing>{listing} <a class=open href='#'>»</a></div>\n"
        "    <button>find</button>\n"
        f'    <p class="caption">{html.escape(status, quote=False)}</p>\n'
        "  </div>\n"
        f'  <p class="result">{result_html}</p>\n'
        "</div>"
    )


class HtmlFileWriter(OutputWriter):
    """Render the panel with its final state into an HTML file on finalize."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "html"
        self.listing = ""
        self.status = "ready"
        self.results: list[str] = []

    def write_listing(self, listing: str, errors: int) -> None:
        self.listing = listing
        self.status = caption(errors)

    def write_status(self, text: str) -> None:
        self.status = text

    def write_hit(self, hit: PageHit) -> None:
        self.results.append(hit.render())

    def finalize(self, action: str) -> None:
        """Write ``<action>_<timestamp>.html``.

        Raises:
            OutputError: If output directory or file writing fails.
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        content = _DOCUMENT.format(
            title=html.escape(f"grep {action}"),
            panel=render_panel(self.listing, self.status, self.results),
        )
        output_path = self.output_dir / f"{action}_{timestamp}.html"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write HTML file: {output_path}") from exc
        log.info("HTML saved to %s", output_path)
