"""Overpass (OpenStreetMap) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_str, env_url
from .http_resilience import RateLimit, ResilienceConfig
from .wikidata import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT

DEFAULT_OVERPASS_ENDPOINT = "https://overpass-api.de/api/interpreter"


@dataclass(frozen=True, slots=True)
class OverpassConfig:
    resilience: ResilienceConfig
    country_name: str = "Россия"
    admin_level: int = 2


def get_overpass_config() -> OverpassConfig:
    resilience = ResilienceConfig(
        name="overpass",
        base_url=env_url("CITYPOP_OVERPASS_ENDPOINT", DEFAULT_OVERPASS_ENDPOINT),
        timeout_seconds=env_float(
            "CITYPOP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, above=0.0
        ),
        ratelimit=RateLimit(max_calls=1, per_seconds=1.0),
        default_headers={"User-Agent": env_str("CITYPOP_USER_AGENT", DEFAULT_USER_AGENT)},
    )
    return OverpassConfig(resilience=resilience)
