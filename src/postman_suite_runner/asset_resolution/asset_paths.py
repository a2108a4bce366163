"""Collection and environment file resolution."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from postman_suite_runner.run_configuration import RunConfiguration

COLLECTION_SUFFIX = ".postman_collection.json"
ENVIRONMENT_SUFFIX = ".environment.json"

_LOGGER = logging.getLogger(__name__)


class MissingFileError(Exception):
    """Raised when a collection or environment file does not exist."""

    def __init__(self, kind: str, path: Path) -> None:
        super().__init__(f"{kind.capitalize()} file not found: {path}")
        self.kind = kind
        self.path = path


class AssetDocumentError(Exception):
    """Raised when a collection or environment file cannot be parsed."""


@dataclass(frozen=True)
class AssetPaths:
    """Resolved locations of the files a run consumes."""

    collection_path: Path
    environment_path: Path


def collection_path_for(assets_dir: Path, collection: str) -> Path:
    return assets_dir / f"{collection}{COLLECTION_SUFFIX}"


def environment_path_for(assets_dir: Path, environment: str) -> Path:
    return assets_dir / f"{environment}{ENVIRONMENT_SUFFIX}"


def resolve_paths(configuration: RunConfiguration) -> AssetPaths:
    """Build both input paths and fail on the first one that does not exist."""
    assets_dir = configuration.assets_dir.resolve()
    paths = AssetPaths(
        collection_path=collection_path_for(assets_dir, configuration.collection),
        environment_path=environment_path_for(assets_dir, configuration.environment),
    )
    _LOGGER.debug(
        "resolved collection=%s environment=%s", paths.collection_path, paths.environment_path
    )
    if not paths.collection_path.is_file():
        raise MissingFileError("collection", paths.collection_path)
    if not paths.environment_path.is_file():
        raise MissingFileError("environment", paths.environment_path)
    return paths


def load_asset_document(path: Path) -> Mapping[str, Any]:
    """Parse a collection or environment JSON document."""
    try:
        parsed = json.loads(path.read_text(encoding="utf-8-sig"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise AssetDocumentError(f"{path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise AssetDocumentError(f"Failed to read {path}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise AssetDocumentError(f"{path} must contain a JSON object.")
    return parsed
