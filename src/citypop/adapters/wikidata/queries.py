"""SPARQL query builders for settlement population lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from citypop.adapters.literals import escape_literal

if TYPE_CHECKING:
    from citypop.config.wikidata import WikidataConfig
    from citypop.domain.model import Settlement


def _format_radius(radius_km: float) -> str:
    return f"{radius_km:g}"


def coordinate_query(settlement: Settlement, config: WikidataConfig) -> str:
    """Items labelled exactly ``settlement.name`` within ``radius_km`` of its point."""

    name = escape_literal(settlement.name)
    return f"""
SELECT ?population WHERE {{
  ?city wdt:P17 wd:{config.country_qid};
        rdfs:label "{name}"@{config.language};
        wdt:P625 ?coordinates;
        wdt:P1082 ?population.
  SERVICE wikibase:around {{
    ?city wdt:P625 ?location .
    bd:serviceParam wikibase:center "Point({settlement.longitude} {settlement.latitude})"^^geo:wktLiteral .
    bd:serviceParam wikibase:radius "{_format_radius(config.radius_km)}" .
  }}
}}
ORDER BY DESC(?population)
LIMIT 1"""


def label_search_query(settlement: Settlement, config: WikidataConfig) -> str:
    """Cities whose label contains ``settlement.name``, most populous first."""

    name = escape_literal(settlement.name)
    return f"""
SELECT ?city ?cityLabel ?population WHERE {{
  ?city wdt:P17 wd:{config.country_qid};
        wdt:P31 wd:{config.city_class_qid};
        wdt:P1082 ?population;
        rdfs:label ?cityLabel.
  FILTER(LANG(?cityLabel) = "{config.language}")
  FILTER(CONTAINS(LCASE(?cityLabel), LCASE("{name}")))
}}
ORDER BY DESC(?population)
LIMIT 1"""
