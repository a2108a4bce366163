"""Report directory and export path construction."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from postman_suite_runner.run_configuration import ConfigurationError, RunConfiguration

from .report_target_models import HtmlExtraOptions, ReportTarget

HTMLEXTRA_REPORTER = "htmlextra"
JUNIT_REPORTER = "junit"
JSON_REPORTER = "json"


def ensure_reports_directory(reports_dir: Path) -> Path:
    """Create the reports directory with its parents when missing."""
    try:
        reports_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigurationError(f"Cannot create reports directory {reports_dir}: {exc}") from exc
    return reports_dir


def filesystem_safe_timestamp(moment: datetime | None = None) -> str:
    """Render a UTC ISO-8601 instant with colons replaced, e.g. 2026-10-16T10-11-12.345Z."""
    instant = (moment or datetime.now(UTC)).astimezone(UTC)
    rendered = instant.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return rendered.replace(":", "-")


def build_report_targets(
    configuration: RunConfiguration,
    reports_dir: Path,
    environment_name: str,
    *,
    now: datetime | None = None,
) -> ReportTarget:
    """Compute export paths for the requested reporters that write files.

    Reporters without a file target, such as ``cli``, are left out of the mapping.
    """
    timestamp = filesystem_safe_timestamp(now)
    exports: dict[str, Path] = {}
    htmlextra: HtmlExtraOptions | None = None

    if HTMLEXTRA_REPORTER in configuration.reporters:
        exports[HTMLEXTRA_REPORTER] = reports_dir / f"report-{environment_name}-{timestamp}.html"
        htmlextra = HtmlExtraOptions(
            browser_title=configuration.report_title,
            title=configuration.report_title,
        )
    if JUNIT_REPORTER in configuration.reporters:
        exports[JUNIT_REPORTER] = reports_dir / f"junit-report-{environment_name}-{timestamp}.xml"
    if JSON_REPORTER in configuration.reporters:
        exports[JSON_REPORTER] = reports_dir / f"summary-{environment_name}-{timestamp}.json"

    return ReportTarget(exports=exports, htmlextra=htmlextra)
