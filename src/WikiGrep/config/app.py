from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from WikiGrep.config.output import OutputConfig, check_output, load_output
from WikiGrep.config.runtime import RuntimeConfig, check_runtime, load_runtime
from WikiGrep.config.search import SearchConfig, check_search, load_search
from WikiGrep.config.sources import SourcesConfig, check_sources, load_sources


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    search: SearchConfig
    sources: SourcesConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    search = load_search(raw)
    sources = load_sources(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_search(search)
    check_sources(sources)
    check_output(output)

    config = AppConfig(runtime=runtime, search=search, sources=sources, output=output)
    check_cross_domain(config)
    return config


DEFAULT_CONFIG_PATH = Path("config/default.yml")


def load_config(path: Path) -> AppConfig:
    """Load one YAML config file on its own, without the defaults."""
    return parse_config_dict(parse_yaml(path.read_text(encoding="utf-8")))


def load_config_with_defaults(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load ``config_path`` deep-merged onto ``default_path``.

    A missing defaults file is skipped, so the override must then be
    complete on its own.
    """
    if config_path == default_path or not default_path.is_file():
        return load_config(config_path)
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))



def check_cross_domain(config: AppConfig) -> None:
    """The selected source must have the settings it needs."""
    if config.search.source == "wiki" and not (config.sources.wiki_site or "").strip():
        raise ValueError("search.source=wiki requires wiki.site")
    if config.search.source == "local" and not (config.sources.local_pages_dir or "").strip():
        raise ValueError("search.source=local requires local.pages_dir")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
