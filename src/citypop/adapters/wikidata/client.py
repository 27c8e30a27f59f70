"""Wikidata SPARQL endpoint client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from citypop.domain.ports import ProviderError

from .schema import SparqlResponse

if TYPE_CHECKING:
    from citypop.adapters.http_resilience import ResilientClient
    from citypop.config.wikidata import WikidataConfig

log = getLogger(__name__)


class WikidataAPIError(ProviderError):
    """Raised when the SPARQL endpoint returns an unexpected response."""


class WikidataClient:
    """Runs SELECT queries against the configured SPARQL endpoint."""

    def __init__(self, *, config: WikidataConfig, client: ResilientClient) -> None:
        self._config = config
        self._client = client

    @property
    def config(self) -> WikidataConfig:
        return self._config

    async def select(self, query: str) -> SparqlResponse:
        endpoint = self._config.resilience.base_url
        if endpoint is None:
            raise WikidataAPIError("Missing Wikidata endpoint in resilience configuration")
        response = await self._client.get(endpoint, params={"query": query, "format": "json"})
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict) or "results" not in payload:
            raise WikidataAPIError("Unexpected SPARQL response payload")

        return SparqlResponse.model_validate(payload)
