from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from BookFinder.config.api import ApiConfig, check_api, load_api
from BookFinder.config.output import OutputConfig, load_output
from BookFinder.config.runtime import RuntimeConfig, check_runtime, load_runtime
from BookFinder.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG: dict[str, Any] = {
    "log": {"level": "INFO", "to_file": False, "dir": "log"},
    "api": {
        "base_url": "https://openlibrary.org",
        "timeout": None,
        "user_agent": "BookFinder/0.1 (+https://openlibrary.org/developers/api)",
        "contact_env": "OPENLIBRARY_CONTACT",
    },
    "search": {"debounce_ms": 300},
    "output": {"format": "console"},
}


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    api: ApiConfig
    search: SearchConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    api = load_api(raw)
    search = load_search(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_api(api)
    check_search(search)

    return AppConfig(runtime=runtime, api=api, search=search, output=output)


def load_config(path: Path | None = None) -> AppConfig:
    """Load config by merging built-in defaults with an optional YAML file."""
    if path is None:
        return parse_config_dict(DEFAULT_CONFIG)
    override = parse_yaml(path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(DEFAULT_CONFIG, override))


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
