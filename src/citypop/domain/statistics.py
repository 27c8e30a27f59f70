"""Aggregate outcome counters for a cascade run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(slots=True)
class OutcomeStatistics:
    """Mutually exclusive outcome buckets plus the running total.

    ``found`` keeps one counter per provider source tag, in provider priority
    order. ``failed`` counts settlements whose processing raised outside provider
    calls; they are also counted in ``not_found``.
    """

    found: dict[str, int] = field(default_factory=dict[str, int])
    not_found: int = 0
    failed: int = 0
    total: int = 0

    @classmethod
    def for_sources(cls, sources: Iterable[str]) -> OutcomeStatistics:
        return cls(found=dict.fromkeys(sources, 0))

    def found_by(self, source: str) -> int:
        return self.found.get(source, 0)

    @property
    def found_total(self) -> int:
        return sum(self.found.values())

    @property
    def is_consistent(self) -> bool:
        return self.total == self.found_total + self.not_found

    def record_started(self) -> None:
        self.total += 1

    def record_found(self, source: str) -> None:
        self.found[source] = self.found.get(source, 0) + 1

    def record_not_found(self, *, failed: bool = False) -> None:
        self.not_found += 1
        if failed:
            self.failed += 1

    def retract(self, source: str | None) -> None:
        """Undo one earlier ``record_found(source)`` or, for ``None``, ``record_not_found``."""

        if source is None:
            self.not_found = max(self.not_found - 1, 0)
            return
        self.found[source] = max(self.found.get(source, 0) - 1, 0)

    def summary_lines(self) -> list[str]:
        lines = [f"Settlements processed: {self.total}"]
        lines.extend(f"Found via {source}: {count}" for source, count in self.found.items())
        lines.append(f"Not found: {self.not_found}")
        if self.failed:
            lines.append(f"  of which failed with errors: {self.failed}")
        return lines
