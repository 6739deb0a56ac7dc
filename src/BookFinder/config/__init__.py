from __future__ import annotations

"""Public configuration API for BookFinder."""

from BookFinder.config.api import ApiConfig
from BookFinder.config.app import (
    DEFAULT_CONFIG,
    AppConfig,
    load_config,
    merge_config_dicts,
    parse_config_dict,
)
from BookFinder.config.output import OutputConfig
from BookFinder.config.runtime import RuntimeConfig
from BookFinder.config.search import SearchConfig

__all__ = [
    "RuntimeConfig",
    "ApiConfig",
    "SearchConfig",
    "OutputConfig",
    "AppConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "merge_config_dicts",
    "parse_config_dict",
]
