"""JSON output renderers.

Renders hits into JSON-serializable objects and provides JsonFileWriter,
which accumulates one run and writes it on finalize.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from WikiGrep.core.models import PageHit
from WikiGrep.renderers.base import OutputError, OutputWriter
from WikiGrep.utils.log import log


def render_json(hits: Iterable[PageHit]) -> list[dict]:
    """Render hits into JSON-serializable Python objects."""
    return [
        {
            "slug": hit.slug,
            "title": hit.title,
            "story_count": hit.story_count,
            "reference": hit.render(),
        }
        for hit in hits
    ]


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.errors = 0
        self.status: str | None = None
        self.hits: list[PageHit] = []

    def write_listing(self, listing: str, errors: int) -> None:
        del listing
        self.errors = errors

    def write_status(self, text: str) -> None:
        self.status = text

    def write_hit(self, hit: PageHit) -> None:
        self.hits.append(hit)

    def finalize(self, action: str) -> None:
        """Write ``<action>_<timestamp>.json`` under the output directory.

        Raises:
            OutputError: If the file cannot be written.
        """
        payload = {
            "errors": self.errors,
            "status": self.status,
            "hits": render_json(self.hits),
        }
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write JSON file: {output_path}") from exc
        log.info("JSON saved to %s", output_path)
