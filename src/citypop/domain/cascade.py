"""Multi-source population resolution cascade.

Each settlement is offered to the providers in priority order; the first provider
that returns a value wins and the remaining ones are not called. Failures are
absorbed as close to their source as possible:

* an exception raised by a provider call means "no value from this provider";
* an exception anywhere else while handling a settlement rolls that settlement
  back and counts it as not found.

Settlements are processed strictly one after another with a pause between them.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from .statistics import OutcomeStatistics

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .model import Settlement
    from .pacing import IntervalPacer
    from .ports import ErrorSink, PopulationProvider, ProgressCallback, ProviderResult

log = getLogger(__name__)


def log_progress(
    *,
    index: int,
    total: int,
    settlement: Settlement,
    population: int | None,
) -> None:
    outcome = str(population) if population is not None else "not found"
    log.info("Processed %s/%s: %s - %s", index, total, settlement.name, outcome)


class ResolutionCascade:
    """Resolve settlement populations across an ordered list of providers."""

    def __init__(
        self,
        providers: Sequence[PopulationProvider],
        *,
        pacer: IntervalPacer,
        error_sink: ErrorSink,
        progress: ProgressCallback = log_progress,
    ) -> None:
        if not providers:
            raise ValueError("At least one population provider is required")
        self._providers = tuple(providers)
        self._pacer = pacer
        self._error_sink = error_sink
        self._progress = progress

    @property
    def sources(self) -> tuple[str, ...]:
        return tuple(provider.source for provider in self._providers)

    async def run(self, settlements: Iterable[Settlement]) -> OutcomeStatistics:
        """Attempt every settlement once, in order, and return the outcome counts.

        Settlements resolved before the run keep their value and are counted under
        their existing source without querying any provider.
        """

        pending = list(settlements)
        statistics = OutcomeStatistics.for_sources(self.sources)

        for index, settlement in enumerate(pending, start=1):
            if index > 1:
                await self._pacer.pause()
            statistics.record_started()
            kept_source = settlement.source
            counted = False
            try:
                if kept_source is not None:
                    log.debug("Keeping %s from %s", settlement.name, kept_source)
                else:
                    result = await self._first_result(settlement)
                    if result is not None:
                        settlement.resolve(result.population, result.source)
                if settlement.source is None:
                    statistics.record_not_found()
                else:
                    statistics.record_found(settlement.source)
                counted = True
                self._progress(
                    index=index,
                    total=len(pending),
                    settlement=settlement,
                    population=settlement.population,
                )
            except Exception as exc:  # noqa: BLE001
                self._settlement_failed(
                    settlement,
                    statistics,
                    exc,
                    counted=counted,
                    kept_source=kept_source,
                )

        return statistics

    async def _first_result(self, settlement: Settlement) -> ProviderResult | None:
        for provider in self._providers:
            try:
                result = await provider.resolve(settlement)
            except Exception as exc:  # noqa: BLE001
                message = f"{provider.source} lookup failed for {settlement.name}: {exc}"
                log.warning(message)
                self._error_sink.record(message)
                continue
            if result is not None:
                return result
        return None

    def _settlement_failed(
        self,
        settlement: Settlement,
        statistics: OutcomeStatistics,
        exc: Exception,
        *,
        counted: bool,
        kept_source: str | None,
    ) -> None:
        message = f"Error while processing {settlement.name}: {exc}"
        log.error(message, exc_info=exc)
        self._error_sink.record(message)
        # a value resolved before this run is never discarded
        if kept_source is not None:
            if not counted:
                statistics.record_found(kept_source)
            return
        # the settlement ends up in exactly one bucket: not found
        if counted:
            statistics.retract(settlement.source)
        settlement.clear()
        statistics.record_not_found(failed=True)


def resolve_populations(
    settlements: Iterable[Settlement],
    providers: Sequence[PopulationProvider],
    *,
    pacer: IntervalPacer,
    error_sink: ErrorSink,
    progress: ProgressCallback = log_progress,
) -> OutcomeStatistics:
    """Synchronous entry point around :meth:`ResolutionCascade.run`."""

    cascade = ResolutionCascade(
        providers,
        pacer=pacer,
        error_sink=error_sink,
        progress=progress,
    )
    return asyncio.run(cascade.run(settlements))
