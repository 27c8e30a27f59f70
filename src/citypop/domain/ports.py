"""Ports between the resolution cascade and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import Settlement


class ProviderError(RuntimeError):
    """Raised by provider adapters when a source returns an unusable response."""


@dataclass(slots=True, frozen=True)
class ProviderResult:
    population: int
    source: str


@runtime_checkable
class PopulationProvider(Protocol):
    """A data source that may know the population of a settlement."""

    @property
    def source(self) -> str: ...

    async def resolve(self, settlement: Settlement) -> ProviderResult | None: ...


class ErrorSink(Protocol):
    """Side channel for error messages that must outlive the console output."""

    def record(self, message: str) -> None: ...


class ProgressCallback(Protocol):
    def __call__(
        self,
        *,
        index: int,
        total: int,
        settlement: Settlement,
        population: int | None,
    ) -> None: ...


__all__ = [
    "ErrorSink",
    "PopulationProvider",
    "ProgressCallback",
    "ProviderError",
    "ProviderResult",
]
