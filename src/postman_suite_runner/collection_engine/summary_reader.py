"""Newman JSON report parsing."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .engine_contracts import EngineError, FailureRecord, RunCounter, RunSummary


def read_run_summary(summary_path: Path) -> RunSummary:
    """Read the summary file written by Newman's json reporter."""
    try:
        document = json.loads(summary_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise EngineError(f"Run summary not found: {summary_path}") from exc
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise EngineError(f"Failed to read run summary {summary_path}: {exc}") from exc
    return parse_run_summary(document)


def parse_run_summary(document: Any) -> RunSummary:
    """Convert a Newman summary document into a RunSummary.

    A run-level error is kept as-is; counters are still parsed when present so
    callers can decide which part is authoritative.
    """
    run = _require_mapping(document.get("run") if isinstance(document, Mapping) else None, "run")
    error = _describe_error(run.get("error"))
    stats = run.get("stats")
    if not isinstance(stats, Mapping):
        if error is not None:
            return RunSummary(
                requests=RunCounter(total=0, failed=0),
                assertions=RunCounter(total=0, failed=0),
                error=error,
            )
        raise EngineError("Run summary is missing 'run.stats'.")

    failures = run.get("failures") or ()
    if not isinstance(failures, Sequence) or isinstance(failures, str):
        raise EngineError("Run summary 'run.failures' must be a list.")

    return RunSummary(
        requests=_read_counter(stats.get("requests"), "run.stats.requests"),
        assertions=_read_counter(stats.get("assertions"), "run.stats.assertions"),
        failures=tuple(_read_failure(failure) for failure in failures),
        error=error,
    )


def _read_counter(value: Any, label: str) -> RunCounter:
    section = _require_mapping(value, label)
    return RunCounter(
        total=_require_count(section.get("total", 0), f"{label}.total"),
        failed=_require_count(section.get("failed", 0), f"{label}.failed"),
    )


def _read_failure(value: Any) -> FailureRecord:
    if not isinstance(value, Mapping):
        return FailureRecord(source="", error_name="Error", message=str(value))
    error = value.get("error")
    source = value.get("source")
    source_name = source.get("name", "") if isinstance(source, Mapping) else ""
    if isinstance(error, Mapping):
        return FailureRecord(
            source=str(source_name or ""),
            error_name=str(error.get("name") or "Error"),
            message=str(error.get("message") or error.get("test") or ""),
        )
    return FailureRecord(source=str(source_name or ""), error_name="Error", message=str(error))


def _describe_error(value: Any) -> str | None:
    if value is None or value is False:
        return None
    if isinstance(value, Mapping):
        message = value.get("message") or value.get("name")
        return str(message) if message else json.dumps(value)
    return str(value)


def _require_mapping(value: Any, label: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise EngineError(f"Run summary is missing '{label}'.")
    return value


def _require_count(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise EngineError(f"Run summary field '{label}' must be a non-negative integer.")
    return value
