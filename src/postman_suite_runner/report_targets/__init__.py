"""Report targets domain exports."""

from .report_target_models import HtmlExtraOptions, ReportTarget
from .target_builder import (
    HTMLEXTRA_REPORTER,
    JSON_REPORTER,
    JUNIT_REPORTER,
    build_report_targets,
    ensure_reports_directory,
    filesystem_safe_timestamp,
)

__all__ = [
    "HtmlExtraOptions",
    "ReportTarget",
    "build_report_targets",
    "ensure_reports_directory",
    "filesystem_safe_timestamp",
    "HTMLEXTRA_REPORTER",
    "JUNIT_REPORTER",
    "JSON_REPORTER",
]
