"""Asset resolution domain exports."""

from .asset_paths import (
    COLLECTION_SUFFIX,
    ENVIRONMENT_SUFFIX,
    AssetDocumentError,
    AssetPaths,
    MissingFileError,
    load_asset_document,
    resolve_paths,
)

__all__ = [
    "AssetPaths",
    "AssetDocumentError",
    "MissingFileError",
    "load_asset_document",
    "resolve_paths",
    "COLLECTION_SUFFIX",
    "ENVIRONMENT_SUFFIX",
]
