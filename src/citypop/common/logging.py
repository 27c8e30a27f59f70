"""Shared logging helpers for citypop."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

ERROR_LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: we default
    to INFO level and a terse format suitable for CLI output. Pass ``force=True`` to
    reconfigure during tests or specialised entry points.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))


@dataclass(slots=True)
class FileErrorSink:
    """Append-only error log: one ``<timestamp> - <message>`` line per record.

    The file is opened and closed for every write so no handle outlives a call.
    Write failures are ignored; the error log must never interrupt a run.
    """

    path: Path
    clock: Callable[[], datetime] = field(default=datetime.now)

    def record(self, message: str) -> None:
        line = f"{self.clock().strftime(ERROR_LOG_TIMESTAMP_FORMAT)} - {message}\n"
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(line)
        except OSError:
            return
