"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from citypop.adapters.http_resilience import ResilientClient
from citypop.adapters.overpass import OverpassClient, PlaceTagProvider
from citypop.adapters.spreadsheet import read_settlements, write_settlements
from citypop.adapters.wikidata import CoordinateLookupProvider, LabelSearchProvider, WikidataClient
from citypop.common.logging import FileErrorSink
from citypop.config import get_cascade_config, get_overpass_config, get_wikidata_config
from citypop.domain.cascade import ResolutionCascade
from citypop.domain.pacing import IntervalPacer

if TYPE_CHECKING:
    from pathlib import Path

    from citypop.adapters.http_resilience import ClientFactory
    from citypop.config import CascadeConfig, OverpassConfig, WikidataConfig
    from citypop.domain.model import SettlementStore
    from citypop.domain.ports import ErrorSink, PopulationProvider
    from citypop.domain.statistics import OutcomeStatistics

log = getLogger(__name__)


def build_providers(
    wikidata: WikidataClient,
    overpass: OverpassClient,
) -> list[PopulationProvider]:
    """Providers in priority order: coordinates, label search, OSM tags."""

    return [
        CoordinateLookupProvider(wikidata),
        LabelSearchProvider(wikidata),
        PlaceTagProvider(overpass),
    ]


async def resolve_store(
    store: SettlementStore,
    *,
    wikidata_config: WikidataConfig,
    overpass_config: OverpassConfig,
    pacer: IntervalPacer,
    error_sink: ErrorSink,
    client_factory: ClientFactory = ResilientClient,
) -> OutcomeStatistics:
    """Run the cascade over ``store`` with one HTTP client per endpoint."""

    async with (
        client_factory(wikidata_config.resilience) as wikidata_http,
        client_factory(overpass_config.resilience) as overpass_http,
    ):
        providers = build_providers(
            WikidataClient(config=wikidata_config, client=wikidata_http),
            OverpassClient(config=overpass_config, client=overpass_http),
        )
        cascade = ResolutionCascade(providers, pacer=pacer, error_sink=error_sink)
        return await cascade.run(store)


def enrich_workbook(
    input_path: Path,
    output_path: Path,
    *,
    cascade_config: CascadeConfig | None = None,
    wikidata_config: WikidataConfig | None = None,
    overpass_config: OverpassConfig | None = None,
    error_sink: ErrorSink | None = None,
    pacer: IntervalPacer | None = None,
    client_factory: ClientFactory = ResilientClient,
) -> OutcomeStatistics:
    """Read settlements, resolve their populations and write the results workbook."""

    active_cascade_config = cascade_config or get_cascade_config()
    store = read_settlements(input_path)

    statistics = asyncio.run(
        resolve_store(
            store,
            wikidata_config=wikidata_config or get_wikidata_config(),
            overpass_config=overpass_config or get_overpass_config(),
            pacer=pacer or IntervalPacer(active_cascade_config.delay_seconds),
            error_sink=error_sink or FileErrorSink(active_cascade_config.log_path),
            client_factory=client_factory,
        )
    )

    write_settlements(store, output_path)
    return statistics
