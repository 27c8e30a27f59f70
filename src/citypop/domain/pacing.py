"""Fixed pauses between settlements to respect third-party rate limits."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

SleepFunc = Callable[[float], Awaitable[None]]


@dataclass(slots=True)
class IntervalPacer:
    """Sleeps ``min_interval`` seconds on every :meth:`pause`.

    ``sleep`` is injectable so tests can record pauses instead of waiting.
    """

    min_interval: float
    sleep: SleepFunc = field(default=asyncio.sleep)
    pauses: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.min_interval < 0:
            raise ValueError(f"Pacing interval must be non-negative, got {self.min_interval}")

    async def pause(self) -> None:
        self.pauses += 1
        if self.min_interval > 0:
            await self.sleep(self.min_interval)
