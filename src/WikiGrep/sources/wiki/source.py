"""Wiki site source adapter."""

from __future__ import annotations

from dataclasses import dataclass

from WikiGrep.core.models import Page, PageRef
from WikiGrep.sources.wiki.client import WikiApiClient
from WikiGrep.sources.wiki.parser import parse_page, parse_sitemap


@dataclass(slots=True)
class WikiSiteSource:
    """Serve a remote wiki site's sitemap and pages as normalized models."""

    client: WikiApiClient
    name: str = "wiki"

    def list_pages(self) -> list[PageRef]:
        """Return the site's sitemap as page references."""
        return parse_sitemap(self.client.fetch_sitemap())

    def fetch_page(self, slug: str) -> Page:
        """Fetch and parse one page."""
        return parse_page(self.client.fetch_page(slug), slug=slug)

    def close(self) -> None:
        """Close resources held by the adapter."""
        self.client.close()
