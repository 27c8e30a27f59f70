"""Resolution cascade defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .env import env_float, env_path

DEFAULT_DELAY_SECONDS: Final[float] = 2.0
DEFAULT_LOG_FILENAME: Final[str] = "population_search.log"


@dataclass(frozen=True, slots=True)
class CascadeConfig:
    delay_seconds: float = DEFAULT_DELAY_SECONDS
    log_path: Path = field(default_factory=lambda: Path(DEFAULT_LOG_FILENAME))


def get_cascade_config() -> CascadeConfig:
    return CascadeConfig(
        delay_seconds=env_float("CITYPOP_DELAY_SECONDS", DEFAULT_DELAY_SECONDS, minimum=0.0),
        log_path=env_path("CITYPOP_LOG_PATH", Path(DEFAULT_LOG_FILENAME)),
    )
