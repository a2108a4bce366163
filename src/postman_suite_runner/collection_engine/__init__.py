"""Collection engine domain exports."""

from .engine_contracts import (
    CollectionEngine,
    EngineError,
    EngineInvocation,
    FailureRecord,
    RunCounter,
    RunSummary,
)
from .newman_engine import NewmanEngine, build_newman_command
from .summary_reader import parse_run_summary, read_run_summary

__all__ = [
    "CollectionEngine",
    "EngineError",
    "EngineInvocation",
    "FailureRecord",
    "RunCounter",
    "RunSummary",
    "NewmanEngine",
    "build_newman_command",
    "parse_run_summary",
    "read_run_summary",
]
