"""Collection engine contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from postman_suite_runner.report_targets import ReportTarget


class EngineError(Exception):
    """Raised when the collection engine cannot start or crashes during a run."""


@dataclass(frozen=True)
class EngineInvocation:  # pylint: disable=too-many-instance-attributes
    """Everything the engine needs for one collection run."""

    collection_path: Path
    environment_path: Path
    collection: Mapping[str, Any]
    environment: Mapping[str, Any]
    reporters: tuple[str, ...]
    report_target: ReportTarget
    bail: bool
    timeout_request_ms: int
    delay_request_ms: int
    folder: str | None = None


@dataclass(frozen=True)
class RunCounter:
    """Total and failed counts for one kind of run item."""

    total: int
    failed: int


@dataclass(frozen=True)
class FailureRecord:
    """One failed assertion or request reported by the engine."""

    source: str
    error_name: str
    message: str


@dataclass(frozen=True)
class RunSummary:
    """Aggregate outcome of one collection execution."""

    requests: RunCounter
    assertions: RunCounter
    failures: tuple[FailureRecord, ...] = ()
    error: str | None = None

    @property
    def failed(self) -> bool:
        return bool(self.failures)


class CollectionEngine(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for engines that execute a collection and return its summary."""

    def run(self, invocation: EngineInvocation) -> RunSummary: ...
