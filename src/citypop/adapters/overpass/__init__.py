"""OpenStreetMap Overpass population adapter."""

from __future__ import annotations

from .client import OverpassAPIError, OverpassClient
from .providers import OSM_SOURCE, PlaceTagProvider, first_population
from .queries import place_query
from .schema import OverpassElement, OverpassResponse

__all__ = [
    "OSM_SOURCE",
    "OverpassAPIError",
    "OverpassClient",
    "OverpassElement",
    "OverpassResponse",
    "PlaceTagProvider",
    "first_population",
    "place_query",
]
