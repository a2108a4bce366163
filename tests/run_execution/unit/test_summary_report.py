"""Summary reporting tests."""

from __future__ import annotations

from postman_suite_runner.collection_engine import FailureRecord, RunCounter, RunSummary
from postman_suite_runner.run_execution import EXIT_FAILURE, EXIT_SUCCESS, report_summary


def test_passing_summary_prints_counters_and_returns_zero() -> None:
    lines: list[str] = []
    summary = RunSummary(
        requests=RunCounter(total=10, failed=0),
        assertions=RunCounter(total=25, failed=0),
    )

    exit_code = report_summary(summary, lines.append)

    assert exit_code == EXIT_SUCCESS
    assert lines == [
        "Newman run completed!",
        "Total requests: 10",
        "Failed requests: 0",
        "Total assertions: 25",
        "Failed assertions: 0",
    ]


def test_any_failure_record_returns_one_and_prints_counters_as_given() -> None:
    lines: list[str] = []
    summary = RunSummary(
        requests=RunCounter(total=10, failed=2),
        assertions=RunCounter(total=25, failed=3),
        failures=(FailureRecord(source="Get movies", error_name="AssertionError", message="x"),),
    )

    exit_code = report_summary(summary, lines.append)

    assert exit_code == EXIT_FAILURE
    assert "Failed requests: 2" in lines
    assert "Failed assertions: 3" in lines


def test_exit_code_follows_failure_records_not_counters() -> None:
    summary = RunSummary(
        requests=RunCounter(total=1, failed=1),
        assertions=RunCounter(total=1, failed=0),
    )

    assert report_summary(summary, lambda line: None) == EXIT_SUCCESS
