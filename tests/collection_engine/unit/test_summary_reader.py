"""Newman summary parsing tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from postman_suite_runner.collection_engine import (
    EngineError,
    FailureRecord,
    parse_run_summary,
    read_run_summary,
)


def _summary_document(*, failures: list | None = None, error=None) -> dict:
    run: dict = {
        "stats": {
            "iterations": {"total": 1, "pending": 0, "failed": 0},
            "requests": {"total": 10, "pending": 0, "failed": 1},
            "assertions": {"total": 25, "pending": 0, "failed": 2},
        },
        "failures": failures or [],
    }
    if error is not None:
        run["error"] = error
    return {"collection": {"info": {"name": "CinemaAbyss"}}, "run": run}


def test_parses_request_and_assertion_counters() -> None:
    summary = parse_run_summary(_summary_document())

    assert summary.requests.total == 10
    assert summary.requests.failed == 1
    assert summary.assertions.total == 25
    assert summary.assertions.failed == 2
    assert summary.failures == ()
    assert summary.failed is False
    assert summary.error is None


def test_parses_failure_records() -> None:
    summary = parse_run_summary(
        _summary_document(
            failures=[
                {
                    "error": {
                        "name": "AssertionError",
                        "message": "expected 500 to equal 200",
                        "test": "Status code is 200",
                    },
                    "source": {"name": "Get movies"},
                },
                {"error": {"test": "Body has id"}, "source": {}},
            ]
        )
    )

    assert summary.failed is True
    assert summary.failures == (
        FailureRecord(
            source="Get movies", error_name="AssertionError", message="expected 500 to equal 200"
        ),
        FailureRecord(source="", error_name="Error", message="Body has id"),
    )


def test_run_level_error_is_kept() -> None:
    summary = parse_run_summary(
        _summary_document(error={"name": "Error", "message": "collection could not be loaded"})
    )

    assert summary.error == "collection could not be loaded"


def test_run_level_error_without_stats_is_still_a_summary() -> None:
    summary = parse_run_summary({"run": {"error": "ECONNREFUSED"}})

    assert summary.error == "ECONNREFUSED"
    assert summary.requests.total == 0


def test_missing_run_section_raises() -> None:
    with pytest.raises(EngineError, match="'run'"):
        parse_run_summary({"collection": {}})


def test_missing_stats_without_error_raises() -> None:
    with pytest.raises(EngineError, match="run.stats"):
        parse_run_summary({"run": {"failures": []}})


def test_negative_counter_raises() -> None:
    document = _summary_document()
    document["run"]["stats"]["requests"]["failed"] = -1

    with pytest.raises(EngineError, match="run.stats.requests.failed"):
        parse_run_summary(document)


def test_read_run_summary_from_file(tmp_path: Path) -> None:
    summary_path = tmp_path / "summary.json"
    summary_path.write_text(json.dumps(_summary_document()), encoding="utf-8")

    summary = read_run_summary(summary_path)

    assert summary.assertions.total == 25


def test_read_run_summary_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(EngineError, match="Run summary not found"):
        read_run_summary(tmp_path / "summary.json")


def test_read_run_summary_reports_malformed_json(tmp_path: Path) -> None:
    summary_path = tmp_path / "summary.json"
    summary_path.write_text("{", encoding="utf-8")

    with pytest.raises(EngineError, match="Failed to read run summary"):
        read_run_summary(summary_path)


def test_read_run_summary_reports_invalid_utf8(tmp_path: Path) -> None:
    summary_path = tmp_path / "summary.json"
    summary_path.write_bytes(b'{"run": "\xff"}')

    with pytest.raises(EngineError, match="Failed to read run summary"):
        read_run_summary(summary_path)
