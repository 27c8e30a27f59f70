"""Overpass interpreter client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from citypop.domain.ports import ProviderError

from .schema import OverpassResponse

if TYPE_CHECKING:
    from citypop.adapters.http_resilience import ResilientClient
    from citypop.config.overpass import OverpassConfig

log = getLogger(__name__)


class OverpassAPIError(ProviderError):
    """Raised when the Overpass interpreter returns an unexpected response."""


class OverpassClient:
    def __init__(self, *, config: OverpassConfig, client: ResilientClient) -> None:
        self._config = config
        self._client = client

    @property
    def config(self) -> OverpassConfig:
        return self._config

    async def interpret(self, query: str) -> OverpassResponse:
        endpoint = self._config.resilience.base_url
        if endpoint is None:
            raise OverpassAPIError("Missing Overpass endpoint in resilience configuration")
        response = await self._client.post(endpoint, data={"data": query})
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict) or "elements" not in payload:
            raise OverpassAPIError("Unexpected Overpass response payload")

        result = OverpassResponse.model_validate(payload)
        if result.remark:
            # runtime errors and timeouts arrive as a 200 with a remark
            log.warning("Overpass remark: %s", result.remark)
        return result
