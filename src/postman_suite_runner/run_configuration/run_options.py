"""Run configuration entities and option normalization."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .runner_settings import ConfigurationError, RunnerSettings

DEFAULT_ENVIRONMENT = "local"
DEFAULT_COLLECTION = "CinemaAbyss"
DEFAULT_REPORTERS = "cli,htmlextra,junit"
DEFAULT_TIMEOUT_MS = 10000
REPORTS_DIRNAME = "reports"


@dataclass(frozen=True)
class RunConfiguration:  # pylint: disable=too-many-instance-attributes
    """Resolved execution parameters for one collection run."""

    environment: str
    collection: str
    folder: str | None
    reporters: tuple[str, ...]
    bail: bool
    timeout_request_ms: int
    delay_request_ms: int
    assets_dir: Path
    reports_dir: Path
    report_title: str


def parse_reporters(value: str | Iterable[str]) -> tuple[str, ...]:
    """Split a comma-separated reporter list, dropping blanks and duplicates."""
    raw_items = value.split(",") if isinstance(value, str) else list(value)
    reporters: list[str] = []
    for item in raw_items:
        stripped = item.strip()
        if stripped and stripped not in reporters:
            reporters.append(stripped)
    if not reporters:
        raise ConfigurationError("At least one reporter must be provided.")
    return tuple(reporters)


# pylint: disable=too-many-arguments
def build_run_configuration(
    *,
    environment: str = DEFAULT_ENVIRONMENT,
    collection: str = DEFAULT_COLLECTION,
    folder: str | None = None,
    reporters: str | Iterable[str] = DEFAULT_REPORTERS,
    bail: bool = False,
    timeout_request_ms: int = DEFAULT_TIMEOUT_MS,
    settings: RunnerSettings | None = None,
    assets_dir: Path | str | None = None,
    reports_dir: Path | str | None = None,
) -> RunConfiguration:
    """Combine command-line values with runner settings into one immutable configuration.

    Explicit arguments win over settings, settings win over built-in defaults.
    The reports directory defaults to ``reports`` inside the assets directory.
    """
    resolved_settings = settings or RunnerSettings()
    resolved_assets = Path(assets_dir) if assets_dir else resolved_settings.assets_dir or Path(".")
    if reports_dir:
        resolved_reports = Path(reports_dir)
    else:
        resolved_reports = resolved_settings.reports_dir or resolved_assets / REPORTS_DIRNAME
    if timeout_request_ms < 0:
        raise ConfigurationError("Request timeout must not be negative.")

    return RunConfiguration(
        environment=_require_name(environment, "environment"),
        collection=_require_name(collection, "collection"),
        folder=folder or None,
        reporters=parse_reporters(reporters),
        bail=bail,
        timeout_request_ms=timeout_request_ms,
        delay_request_ms=resolved_settings.delay_request_ms,
        assets_dir=resolved_assets,
        reports_dir=resolved_reports,
        report_title=resolved_settings.report_title,
    )


def _require_name(value: str, label: str) -> str:
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{label} name must not be empty.")
    if "/" in stripped or "\\" in stripped:
        raise ConfigurationError(f"{label} name must not contain path separators: {stripped}")
    return stripped
