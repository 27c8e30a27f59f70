"""Application configuration helpers."""

from __future__ import annotations

from .cascade import CascadeConfig, get_cascade_config
from .env import env_float, env_path, env_str, env_url
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .overpass import OverpassConfig, get_overpass_config
from .wikidata import WikidataConfig, get_wikidata_config

__all__ = [
    "CascadeConfig",
    "ConfigurationError",
    "OverpassConfig",
    "RateLimit",
    "ResilienceConfig",
    "WikidataConfig",
    "env_float",
    "env_path",
    "env_str",
    "env_url",
    "get_cascade_config",
    "get_overpass_config",
    "get_wikidata_config",
]
