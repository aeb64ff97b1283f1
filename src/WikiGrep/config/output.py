"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from WikiGrep.config.common import (
    expect_str,
    expect_str_list,
    get_section,
)

_ALLOWED_FORMATS = {"console", "json", "html"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str
    formats: tuple[str, ...]


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config; defaults to console only.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    formats = tuple(item.lower() for item in expect_str_list(section.get("formats", ["console"]), "output.formats"))
    return OutputConfig(
        base_dir=expect_str(section.get("base_dir", "output"), "output.base_dir"),
        formats=formats,
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    for fmt in config.formats:
        if fmt not in _ALLOWED_FORMATS:
            raise ValueError(f"output.formats contains unknown format: {fmt}")
    if not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
