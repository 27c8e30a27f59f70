"""Population providers backed by Wikidata."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from citypop.domain.model import parse_population
from citypop.domain.ports import ProviderResult

from .queries import coordinate_query, label_search_query

if TYPE_CHECKING:
    from citypop.domain.model import Settlement

    from .client import WikidataClient

log = getLogger(__name__)

COORDINATE_SOURCE = "Wikidata"
LABEL_SEARCH_SOURCE = "Wikidata Search"


class CoordinateLookupProvider:
    """Exact label match near the settlement's coordinates."""

    def __init__(self, client: WikidataClient, *, source: str = COORDINATE_SOURCE) -> None:
        self._client = client
        self.source = source

    async def resolve(self, settlement: Settlement) -> ProviderResult | None:
        query = coordinate_query(settlement, self._client.config)
        response = await self._client.select(query)
        return _population_result(response.first_value("population"), self.source)


class LabelSearchProvider:
    """Case-insensitive substring match on city labels, ignoring coordinates."""

    def __init__(self, client: WikidataClient, *, source: str = LABEL_SEARCH_SOURCE) -> None:
        self._client = client
        self.source = source

    async def resolve(self, settlement: Settlement) -> ProviderResult | None:
        query = label_search_query(settlement, self._client.config)
        response = await self._client.select(query)
        return _population_result(response.first_value("population"), self.source)


def _population_result(value: str | None, source: str) -> ProviderResult | None:
    if value is None:
        return None
    population = parse_population(value)
    if population is None:
        log.debug("%s: ignoring unparseable population %r", source, value)
        return None
    return ProviderResult(population=population, source=source)

