"""Runner settings entity and YAML loader."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_NEWMAN_EXECUTABLE = "newman"
DEFAULT_DELAY_REQUEST_MS = 100
DEFAULT_REPORT_TITLE = "CinemaAbyss API Test Report"

_KNOWN_KEYS = frozenset(
    {"newman_executable", "assets_dir", "reports_dir", "delay_request_ms", "report_title"}
)


class ConfigurationError(Exception):
    """Raised when runner options or the runner settings file are invalid."""


@dataclass(frozen=True)
class RunnerSettings:
    """Defaults for the runner that are not exposed as individual options."""

    newman_executable: str = DEFAULT_NEWMAN_EXECUTABLE
    assets_dir: Path | None = None
    reports_dir: Path | None = None
    delay_request_ms: int = DEFAULT_DELAY_REQUEST_MS
    report_title: str = DEFAULT_REPORT_TITLE


def load_runner_settings(settings_path: Path | str) -> RunnerSettings:
    """Load and validate a YAML runner settings file.

    Relative directories are resolved against the folder holding the settings file.
    """
    path = Path(settings_path)
    if not path.exists():
        raise ConfigurationError(f"Runner settings file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to parse runner settings file: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Failed to read runner settings file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Runner settings root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown runner settings: {', '.join(unknown)}")

    base_path = path.parent
    assets_dir = _optional_string(parsed.get("assets_dir"), "assets_dir")
    reports_dir = _optional_string(parsed.get("reports_dir"), "reports_dir")
    return RunnerSettings(
        newman_executable=_optional_string(
            parsed.get("newman_executable"), "newman_executable"
        )
        or DEFAULT_NEWMAN_EXECUTABLE,
        assets_dir=_resolve_path(base_path, assets_dir) if assets_dir else None,
        reports_dir=_resolve_path(base_path, reports_dir) if reports_dir else None,
        delay_request_ms=_require_non_negative_int(
            parsed.get("delay_request_ms", DEFAULT_DELAY_REQUEST_MS), "delay_request_ms"
        ),
        report_title=_optional_string(parsed.get("report_title"), "report_title")
        or DEFAULT_REPORT_TITLE,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
