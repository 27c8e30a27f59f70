from __future__ import annotations

import os

import pytest

from citypop.domain.model import Settlement
from citypop.domain.pacing import IntervalPacer
from tests.support.fakes import MemoryErrorSink, RecordingSleep


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("CITYPOP_"):
            monkeypatch.delenv(name)


@pytest.fixture
def error_sink() -> MemoryErrorSink:
    return MemoryErrorSink()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def pacer(recording_sleep: RecordingSleep) -> IntervalPacer:
    return IntervalPacer(2.0, sleep=recording_sleep)


@pytest.fixture
def tver() -> Settlement:
    return Settlement(name="Tver", latitude=56.8587, longitude=35.9176)


@pytest.fixture
def hamlet() -> Settlement:
    return Settlement(name="Unknown Hamlet", latitude=57.1, longitude=36.2)
