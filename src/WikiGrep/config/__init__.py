from __future__ import annotations

"""Public configuration API for WikiGrep."""

from WikiGrep.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from WikiGrep.config.output import OutputConfig
from WikiGrep.config.runtime import RuntimeConfig
from WikiGrep.config.search import SearchConfig
from WikiGrep.config.sources import SourcesConfig

__all__ = [
    "RuntimeConfig",
    "SearchConfig",
    "SourcesConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "check_cross_domain",
]
