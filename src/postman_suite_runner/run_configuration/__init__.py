"""Run configuration domain exports."""

from .run_options import (
    DEFAULT_COLLECTION,
    DEFAULT_ENVIRONMENT,
    DEFAULT_REPORTERS,
    DEFAULT_TIMEOUT_MS,
    RunConfiguration,
    build_run_configuration,
    parse_reporters,
)
from .runner_settings import (
    DEFAULT_DELAY_REQUEST_MS,
    DEFAULT_REPORT_TITLE,
    ConfigurationError,
    RunnerSettings,
    load_runner_settings,
)

__all__ = [
    "RunConfiguration",
    "RunnerSettings",
    "ConfigurationError",
    "build_run_configuration",
    "parse_reporters",
    "load_runner_settings",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_COLLECTION",
    "DEFAULT_REPORTERS",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_DELAY_REQUEST_MS",
    "DEFAULT_REPORT_TITLE",
]
