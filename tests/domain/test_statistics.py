from __future__ import annotations

from citypop.domain.statistics import OutcomeStatistics


def test_for_sources_zero_initialises_in_priority_order() -> None:
    statistics = OutcomeStatistics.for_sources(["Wikidata", "Wikidata Search", "OSM"])

    assert list(statistics.found) == ["Wikidata", "Wikidata Search", "OSM"]
    assert statistics.found_total == 0
    assert statistics.total == 0
    assert statistics.is_consistent


def test_counters_add_up_to_total() -> None:
    statistics = OutcomeStatistics.for_sources(["Wikidata", "OSM"])
    for _ in range(3):
        statistics.record_started()
    statistics.record_found("Wikidata")
    statistics.record_found("OSM")
    statistics.record_not_found()

    assert statistics.found_by("Wikidata") == 1
    assert statistics.found_by("OSM") == 1
    assert statistics.found_by("Unknown") == 0
    assert statistics.not_found == 1
    assert statistics.is_consistent


def test_retract_undoes_a_recorded_outcome() -> None:
    statistics = OutcomeStatistics.for_sources(["Wikidata"])
    statistics.record_started()
    statistics.record_found("Wikidata")

    statistics.retract("Wikidata")
    statistics.record_not_found(failed=True)

    assert statistics.found_by("Wikidata") == 0
    assert statistics.not_found == 1
    assert statistics.failed == 1
    assert statistics.is_consistent


def test_total_without_outcome_is_inconsistent() -> None:
    statistics = OutcomeStatistics.for_sources(["Wikidata"])
    statistics.record_started()

    assert not statistics.is_consistent


def test_summary_lines_mention_every_bucket() -> None:
    statistics = OutcomeStatistics.for_sources(["Wikidata", "OSM"])
    statistics.total = 4
    statistics.found["Wikidata"] = 2
    statistics.not_found = 2
    statistics.failed = 1

    assert statistics.summary_lines() == [
        "Settlements processed: 4",
        "Found via Wikidata: 2",
        "Found via OSM: 0",
        "Not found: 2",
        "  of which failed with errors: 1",
    ]
