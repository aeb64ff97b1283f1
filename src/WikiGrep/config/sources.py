"""Page source domain configuration (remote wiki site, local pages dir)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from WikiGrep.config.common import (
    expect_float,
    expect_optional_str,
    get_section,
)


@dataclass(frozen=True, slots=True)
class SourcesConfig:
    """Settings for every registered page source."""

    wiki_site: str | None
    wiki_timeout: float
    local_pages_dir: str | None


def load_sources(raw: Mapping[str, Any]) -> SourcesConfig:
    """Load the optional ``wiki`` and ``local`` sections."""
    wiki = get_section(raw, "wiki", required=False)
    local = get_section(raw, "local", required=False)
    return SourcesConfig(
        wiki_site=expect_optional_str(wiki.get("site"), "wiki.site"),
        wiki_timeout=expect_float(wiki.get("timeout", 30), "wiki.timeout"),
        local_pages_dir=expect_optional_str(local.get("pages_dir"), "local.pages_dir"),
    )


def check_sources(config: SourcesConfig) -> None:
    """Validate source settings independent of which source is selected."""
    if config.wiki_timeout <= 0:
        raise ValueError("wiki.timeout must be positive")
