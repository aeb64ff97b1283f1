"""Search domain configuration: program, source selection, fan-out."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from WikiGrep.config.common import (
    expect_bool,
    expect_int,
    expect_str,
    get_section,
)
from WikiGrep.sources.registry import supported_source_names

_ALLOWED_SOURCES = frozenset(supported_source_names())


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search settings.

    Attributes:
        program: Grep source text; may be replaced from the command line.
        source: Registered source name the pages are read from.
        max_workers: Page fetches running at the same time.
        chain_steps: Evaluate every program step instead of stopping one
            step past a selector.
    """

    program: str
    source: str
    max_workers: int
    chain_steps: bool


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "search", required=True)
    return SearchConfig(
        program=expect_str(section.get("program", ""), "search.program"),
        source=expect_str(section.get("source", "wiki"), "search.source").strip().lower(),
        max_workers=expect_int(section.get("max_workers", 16), "search.max_workers"),
        chain_steps=expect_bool(section.get("chain_steps", False), "search.chain_steps"),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if config.source not in _ALLOWED_SOURCES:
        raise ValueError(
            f"Unsupported source in config.search.source: {config.source}. "
            f"Allowed: {', '.join(sorted(_ALLOWED_SOURCES))}"
        )
    if config.max_workers <= 0:
        raise ValueError("search.max_workers must be positive")
