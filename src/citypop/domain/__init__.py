"""Domain model and resolution logic for settlement populations."""

from __future__ import annotations

from .cascade import ResolutionCascade, log_progress, resolve_populations
from .model import (
    Settlement,
    SettlementAlreadyResolvedError,
    SettlementStore,
    parse_population,
)
from .pacing import IntervalPacer
from .ports import ErrorSink, PopulationProvider, ProgressCallback, ProviderError, ProviderResult
from .statistics import OutcomeStatistics

__all__ = [
    "ErrorSink",
    "IntervalPacer",
    "OutcomeStatistics",
    "PopulationProvider",
    "ProgressCallback",
    "ProviderError",
    "ProviderResult",
    "ResolutionCascade",
    "Settlement",
    "SettlementAlreadyResolvedError",
    "SettlementStore",
    "log_progress",
    "parse_population",
    "resolve_populations",
]
