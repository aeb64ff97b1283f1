"""Search service layer for WikiGrep.

Provides the page store protocol, the fan-out search service and a factory
wiring the configured source into it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from WikiGrep.services.search import GrepSearchService, PageStore, status_text
from WikiGrep.sources.registry import build_source

if TYPE_CHECKING:
    from WikiGrep.config import AppConfig


def create_search_service(config: AppConfig) -> GrepSearchService:
    """Create a search service over the configured page source.

    Args:
        config: Application configuration containing source settings.

    Returns:
        Configured GrepSearchService instance.
    """
    return GrepSearchService(
        store=build_source(config.search.source, config=config),
        max_workers=config.search.max_workers,
        chained=config.search.chain_steps,
    )


__all__ = [
    "GrepSearchService",
    "PageStore",
    "create_search_service",
    "status_text",
]
