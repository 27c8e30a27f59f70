"""Population provider backed by OpenStreetMap place tags."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from citypop.domain.model import parse_population
from citypop.domain.ports import ProviderResult

from .queries import place_query

if TYPE_CHECKING:
    from citypop.domain.model import Settlement

    from .client import OverpassClient
    from .schema import OverpassResponse

log = getLogger(__name__)

OSM_SOURCE = "OSM"


class PlaceTagProvider:
    """Exact ``name`` tag within the country area; first usable population tag wins."""

    def __init__(self, client: OverpassClient, *, source: str = OSM_SOURCE) -> None:
        self._client = client
        self.source = source

    async def resolve(self, settlement: Settlement) -> ProviderResult | None:
        response = await self._client.interpret(place_query(settlement, self._client.config))
        population = first_population(response)
        if population is None:
            return None
        return ProviderResult(population=population, source=self.source)


def first_population(response: OverpassResponse) -> int | None:
    for element in response.elements:
        if not element.tags or "population" not in element.tags:
            continue
        raw = element.tags["population"]
        population = parse_population(raw)
        if population is None:
            log.debug("Skipping %s/%s with malformed population %r", element.type, element.id, raw)
            continue
        return population
    return None
