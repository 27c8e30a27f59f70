"""Settlement records and the ordered store that holds them for a run."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class SettlementAlreadyResolvedError(RuntimeError):
    """Raised when a resolved settlement would be overwritten."""


@dataclass(slots=True, eq=False)
class Settlement:
    """One named place with coordinates, enriched with a population figure.

    ``population`` and ``source`` are either both set or both unset; they are only
    written through :meth:`resolve` and :meth:`clear`.
    """

    name: str
    latitude: float
    longitude: float
    _population: int | None = field(default=None, init=False, repr=False)
    _source: str | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        self.name = self.name.strip()
        if not self.name:
            raise ValueError("Settlement name must not be blank")
        self.latitude = float(self.latitude)
        self.longitude = float(self.longitude)
        if not math.isfinite(self.latitude) or not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not math.isfinite(self.longitude) or not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")

    @property
    def population(self) -> int | None:
        return self._population

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def is_resolved(self) -> bool:
        return self._population is not None

    def resolve(self, population: int, source: str) -> None:
        if self.is_resolved:
            raise SettlementAlreadyResolvedError(
                f"{self.name} already resolved from {self._source}"
            )
        if population < 0:
            raise ValueError(f"Population must be non-negative, got {population}")
        if not source:
            raise ValueError("Source tag must not be blank")
        self._population = population
        self._source = source

    def clear(self) -> None:
        self._population = None
        self._source = None


class SettlementStore:
    """Ordered collection of settlements; input order is output order."""

    def __init__(self, settlements: Iterable[Settlement] = ()) -> None:
        self._settlements: list[Settlement] = list(settlements)

    def add(self, settlement: Settlement) -> None:
        self._settlements.append(settlement)

    def __iter__(self) -> Iterator[Settlement]:
        return iter(self._settlements)

    def __len__(self) -> int:
        return len(self._settlements)

    @overload
    def __getitem__(self, index: int) -> Settlement: ...

    @overload
    def __getitem__(self, index: slice) -> list[Settlement]: ...

    def __getitem__(self, index: int | slice) -> Settlement | list[Settlement]:
        return self._settlements[index]

    @property
    def resolved(self) -> list[Settlement]:
        return [settlement for settlement in self._settlements if settlement.is_resolved]


_POPULATION_PATTERN = re.compile(r"\+?\d+", re.ASCII)


def parse_population(value: object) -> int | None:
    """Parse a population figure from provider text; ``None`` when unusable.

    Accepts plain integers, optionally signed with ``+`` and surrounded by whitespace.
    Decimal, grouped (``"12 345"``) and negative values are rejected.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _POPULATION_PATTERN.fullmatch(text):
        return None
    return int(text)
