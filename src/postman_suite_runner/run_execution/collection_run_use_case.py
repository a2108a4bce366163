"""Collection run use-case service."""

from __future__ import annotations

import logging
from datetime import datetime

from postman_suite_runner.asset_resolution import (
    AssetDocumentError,
    load_asset_document,
    resolve_paths,
)
from postman_suite_runner.collection_engine import (
    CollectionEngine,
    EngineError,
    EngineInvocation,
    RunSummary,
)
from postman_suite_runner.report_targets import build_report_targets, ensure_reports_directory
from postman_suite_runner.run_configuration import RunConfiguration

_LOGGER = logging.getLogger(__name__)


def prepare_collection_run(
    configuration: RunConfiguration, *, now: datetime | None = None
) -> EngineInvocation:
    """Validate inputs, create the reports directory and build the engine invocation.

    Raises MissingFileError before anything is written when an input file is absent,
    and EngineError when an input file cannot be parsed.
    """
    paths = resolve_paths(configuration)
    reports_dir = ensure_reports_directory(configuration.reports_dir)
    report_target = build_report_targets(
        configuration, reports_dir, configuration.environment, now=now
    )
    try:
        collection = load_asset_document(paths.collection_path)
        environment = load_asset_document(paths.environment_path)
    except AssetDocumentError as exc:
        raise EngineError(str(exc)) from exc

    for reporter, export_path in report_target.exports.items():
        _LOGGER.debug("%s report -> %s", reporter, export_path)
    return EngineInvocation(
        collection_path=paths.collection_path,
        environment_path=paths.environment_path,
        collection=collection,
        environment=environment,
        reporters=configuration.reporters,
        report_target=report_target,
        bail=configuration.bail,
        timeout_request_ms=configuration.timeout_request_ms,
        delay_request_ms=configuration.delay_request_ms,
        folder=configuration.folder,
    )


def run_collection(invocation: EngineInvocation, *, engine: CollectionEngine) -> RunSummary:
    """Invoke the engine once and return its summary.

    A run-level error in the summary wins over its counters and is raised as EngineError.
    """
    summary = engine.run(invocation)
    if summary.error is not None:
        raise EngineError(summary.error)
    return summary
