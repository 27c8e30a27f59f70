from __future__ import annotations

from dataclasses import replace
from pathlib import Path  # noqa: TC003
from urllib.parse import parse_qs

import httpx
import pytest
from openpyxl import Workbook, load_workbook

from citypop.adapters.http_resilience import ResilienceConfig, ResilientClient
from citypop.app import enrich_workbook
from citypop.config import (
    CascadeConfig,
    OverpassConfig,
    WikidataConfig,
    get_overpass_config,
    get_wikidata_config,
)
from citypop.domain.pacing import IntervalPacer
from tests.support.fakes import MemoryErrorSink, RecordingSleep


@pytest.fixture
def wikidata_config() -> WikidataConfig:
    config = get_wikidata_config()
    return replace(config, resilience=replace(config.resilience, ratelimit=None))


@pytest.fixture
def overpass_config() -> OverpassConfig:
    config = get_overpass_config()
    return replace(config, resilience=replace(config.resilience, ratelimit=None))


def _sparql(*populations: str) -> dict[str, object]:
    return {
        "results": {
            "bindings": [
                {"population": {"type": "literal", "value": population}}
                for population in populations
            ]
        }
    }


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.host == "query.wikidata.org":
        query = request.url.params["query"]
        if "Tver" in query and "wikibase:around" in query:
            return httpx.Response(200, json=_sparql("403726"))
        if "Klin" in query and "CONTAINS" in query:
            return httpx.Response(200, json=_sparql("77000"))
        if "Staritsa" in query:
            return httpx.Response(500, text="Internal Server Error")
        return httpx.Response(200, json=_sparql())
    query = parse_qs(request.content.decode())["data"][0]
    if "Staritsa" in query:
        return httpx.Response(
            200,
            json={
                "elements": [
                    {"type": "node", "id": 1, "tags": {"population": "~7k"}},
                    {"type": "node", "id": 2, "tags": {"population": "7500"}},
                ]
            },
        )
    return httpx.Response(200, json={"elements": []})


def _client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config, transport=httpx.MockTransport(_handler))


def _write_input(path: Path) -> Path:
    workbook = Workbook()
    sheet = workbook.active
    assert sheet is not None
    sheet.append(["Longitude", "Latitude", "Name"])
    sheet.append(["35,9176", "56,8587", "Tver"])
    sheet.append(["36,7333", "56,3333", "Klin"])
    sheet.append(["not-a-number", "56,0", "Broken Row"])
    sheet.append(["34,9333", "56,5", "Staritsa"])
    sheet.append(["36,2", "57,1", "Unknown Hamlet"])
    workbook.save(path)
    return path


def test_enrich_workbook_resolves_and_writes_results(
    tmp_path: Path,
    wikidata_config: WikidataConfig,
    overpass_config: OverpassConfig,
    error_sink: MemoryErrorSink,
    recording_sleep: RecordingSleep,
) -> None:
    input_path = _write_input(tmp_path / "cities.xlsx")
    output_path = tmp_path / "cities_with_population.xlsx"

    statistics = enrich_workbook(
        input_path,
        output_path,
        cascade_config=CascadeConfig(delay_seconds=0.0, log_path=tmp_path / "unused.log"),
        wikidata_config=wikidata_config,
        overpass_config=overpass_config,
        error_sink=error_sink,
        pacer=IntervalPacer(2.0, sleep=recording_sleep),
        client_factory=_client_factory,
    )

    assert statistics.total == 4
    assert statistics.found == {"Wikidata": 1, "Wikidata Search": 1, "OSM": 1}
    assert statistics.not_found == 1
    assert statistics.is_consistent
    assert recording_sleep.calls == [2.0, 2.0, 2.0]
    assert len(error_sink.messages) == 2
    assert all("Staritsa" in message for message in error_sink.messages)

    sheet = load_workbook(output_path)["Results"]
    rows = [row[2:] for row in sheet.iter_rows(min_row=2, values_only=True)]
    assert rows == [
        ("Tver", 403_726, "Wikidata"),
        ("Klin", 77_000, "Wikidata Search"),
        ("Staritsa", 7_500, "OSM"),
        ("Unknown Hamlet", None, None),
    ]
    assert not (tmp_path / "unused.log").exists()


def test_enrich_workbook_uses_file_error_sink_by_default(
    tmp_path: Path,
    wikidata_config: WikidataConfig,
    overpass_config: OverpassConfig,
) -> None:
    input_path = _write_input(tmp_path / "cities.xlsx")
    log_path = tmp_path / "population_search.log"

    enrich_workbook(
        input_path,
        tmp_path / "out.xlsx",
        cascade_config=CascadeConfig(delay_seconds=0.0, log_path=log_path),
        wikidata_config=wikidata_config,
        overpass_config=overpass_config,
        client_factory=_client_factory,
    )

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert all(" - " in line and "Staritsa" in line for line in lines)


def test_enrich_workbook_missing_input_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        enrich_workbook(
            tmp_path / "missing.xlsx",
            tmp_path / "out.xlsx",
            cascade_config=CascadeConfig(delay_seconds=0.0, log_path=tmp_path / "e.log"),
        )

    assert not (tmp_path / "out.xlsx").exists()
