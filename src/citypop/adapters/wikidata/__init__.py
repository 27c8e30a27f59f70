"""Wikidata population adapter."""

from __future__ import annotations

from .client import WikidataAPIError, WikidataClient
from .providers import (
    COORDINATE_SOURCE,
    LABEL_SEARCH_SOURCE,
    CoordinateLookupProvider,
    LabelSearchProvider,
)
from .queries import coordinate_query, label_search_query
from .schema import SparqlResponse

__all__ = [
    "COORDINATE_SOURCE",
    "LABEL_SEARCH_SOURCE",
    "CoordinateLookupProvider",
    "LabelSearchProvider",
    "SparqlResponse",
    "WikidataAPIError",
    "WikidataClient",
    "coordinate_query",
    "label_search_query",
]
