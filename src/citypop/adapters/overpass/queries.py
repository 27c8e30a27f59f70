"""Overpass QL query builders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from citypop.adapters.literals import escape_literal

if TYPE_CHECKING:
    from citypop.config.overpass import OverpassConfig
    from citypop.domain.model import Settlement

PLACE_GEOMETRIES = ("node", "way", "relation")


def place_query(settlement: Settlement, config: OverpassConfig) -> str:
    """Places tagged exactly with ``settlement.name`` inside the country area."""

    name = escape_literal(settlement.name)
    country = escape_literal(config.country_name)
    selectors = "\n".join(
        f'  {geometry}(area.a)[place][name="{name}"];' for geometry in PLACE_GEOMETRIES
    )
    return (
        "[out:json];\n"
        f'area[name="{country}"][admin_level="{config.admin_level}"]->.a;\n'
        "(\n"
        f"{selectors}\n"
        ");\n"
        "out body;"
    )
