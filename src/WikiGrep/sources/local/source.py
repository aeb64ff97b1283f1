"""Local pages directory source.

A wiki server keeps every page as a JSON file named after its slug (no
extension) in one ``pages/`` directory. This adapter searches such a
directory without a running server.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from WikiGrep.core.models import Page, PageRef
from WikiGrep.sources.wiki.parser import parse_page


@dataclass(slots=True)
class LocalPagesSource:
    """Serve pages from a local directory of page JSON files."""

    pages_dir: Path
    name: str = "local"

    def list_pages(self) -> list[PageRef]:
        """Return one reference per page file, sorted by slug.

        Raises:
            FileNotFoundError: If the directory does not exist.
        """
        if not self.pages_dir.is_dir():
            raise FileNotFoundError(f"Pages directory not found: {self.pages_dir}")
        return [
            PageRef(slug=path.stem if path.suffix == ".json" else path.name)
            for path in sorted(self.pages_dir.iterdir())
            if path.is_file() and not path.name.startswith(".")
        ]

    def fetch_page(self, slug: str) -> Page:
        """Read and parse one page file."""
        path = self.pages_dir / slug
        if not path.is_file():
            path = self.pages_dir / f"{slug}.json"
        payload = json.loads(path.read_text(encoding="utf-8"))
        return parse_page(payload, slug=slug)

    def close(self) -> None:
        """Nothing to release."""
