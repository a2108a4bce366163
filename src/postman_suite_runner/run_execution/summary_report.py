"""Console rendering of a run summary."""

from __future__ import annotations

from collections.abc import Callable

from postman_suite_runner.collection_engine import RunSummary

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def report_summary(summary: RunSummary, emit: Callable[[str], None]) -> int:
    """Print the run counters and return the process exit code."""
    emit("Newman run completed!")
    emit(f"Total requests: {summary.requests.total}")
    emit(f"Failed requests: {summary.requests.failed}")
    emit(f"Total assertions: {summary.assertions.total}")
    emit(f"Failed assertions: {summary.assertions.failed}")
    return EXIT_FAILURE if summary.failed else EXIT_SUCCESS
