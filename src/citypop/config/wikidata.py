"""Wikidata SPARQL configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_str, env_url
from .http_resilience import RateLimit, ResilienceConfig

DEFAULT_WIKIDATA_ENDPOINT = "https://query.wikidata.org/sparql"
DEFAULT_USER_AGENT = "CityPopulationBot/1.0"
DEFAULT_TIMEOUT_SECONDS = 30.0

RUSSIA_QID = "Q159"
CITY_QID = "Q515"


@dataclass(frozen=True, slots=True)
class WikidataConfig:
    resilience: ResilienceConfig
    country_qid: str = RUSSIA_QID
    language: str = "ru"
    city_class_qid: str = CITY_QID
    radius_km: float = 5.0


def get_wikidata_config() -> WikidataConfig:
    user_agent = env_str("CITYPOP_USER_AGENT", DEFAULT_USER_AGENT)
    resilience = ResilienceConfig(
        name="wikidata",
        base_url=env_url("CITYPOP_WIKIDATA_ENDPOINT", DEFAULT_WIKIDATA_ENDPOINT),
        timeout_seconds=env_float(
            "CITYPOP_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, above=0.0
        ),
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        default_headers={
            "User-Agent": user_agent,
            "Accept": "application/sparql-results+json",
        },
    )
    return WikidataConfig(resilience=resilience)
