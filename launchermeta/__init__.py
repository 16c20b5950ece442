"""Minecraft launcher metadata client."""

__version__ = "0.1.0"

from .handlers import Error, ErrorType  # noqa: E402
from .versions import (  # noqa: E402
    MANIFEST_URL,
    ManifestType,
    VersionInfo,
    VersionManager,
    VersionManifest,
    VersionMetadata,
    fetch_manifest,
    fetch_manifest_async,
    fetch_version_metadata,
    fetch_version_metadata_async,
    load_manifest,
    load_version_metadata,
    save_document,
)

__all__ = [
    "MANIFEST_URL",
    "Error",
    "ErrorType",
    "ManifestType",
    "VersionInfo",
    "VersionManager",
    "VersionManifest",
    "VersionMetadata",
    "fetch_manifest",
    "fetch_manifest_async",
    "fetch_version_metadata",
    "fetch_version_metadata_async",
    "load_manifest",
    "load_version_metadata",
    "save_document",
]
