"""Source registry and builders for page stores."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from WikiGrep.config import AppConfig
    from WikiGrep.services.search import PageStore

SourceBuilder = Callable[["AppConfig"], "PageStore"]


def build_source(source_name: str, *, config: AppConfig) -> PageStore:
    """Build a page store from the registered source name.

    Args:
        source_name: Source identifier from ``search.source``.
        config: Parsed application configuration.

    Returns:
        PageStore: Initialized store for the given name.

    Raises:
        ValueError: If ``source_name`` is not registered.
    """
    builder = _source_builders().get(source_name)
    if builder is None:
        raise ValueError(f"Unsupported source in config.search.source: {source_name}")
    return builder(config)


def supported_source_names() -> tuple[str, ...]:
    """Return all source names that can be built by the registry."""
    return tuple(_source_builders().keys())


def _source_builders() -> dict[str, SourceBuilder]:
    return {
        "wiki": _build_wiki_source,
        "local": _build_local_source,
    }


def _build_wiki_source(config: AppConfig) -> PageStore:
    """Build remote wiki site source."""
    from WikiGrep.sources.wiki.client import WikiApiClient
    from WikiGrep.sources.wiki.source import WikiSiteSource

    return WikiSiteSource(client=WikiApiClient(config.sources.wiki_site or "", timeout=config.sources.wiki_timeout))


def _build_local_source(config: AppConfig) -> PageStore:
    """Build local pages directory source."""
    from pathlib import Path

    from WikiGrep.sources.local.source import LocalPagesSource

    return LocalPagesSource(pages_dir=Path(config.sources.local_pages_dir or ""))
