"""Run execution domain exports."""

from .collection_run_use_case import prepare_collection_run, run_collection
from .summary_report import EXIT_FAILURE, EXIT_SUCCESS, report_summary

__all__ = [
    "prepare_collection_run",
    "run_collection",
    "report_summary",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
]
