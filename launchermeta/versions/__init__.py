"""Version management module."""

from .manager import (
    MANIFEST_URL,
    VersionManager,
    decode_document,
    fetch_manifest,
    fetch_manifest_async,
    fetch_version_metadata,
    fetch_version_metadata_async,
    load_document,
    load_manifest,
    load_version_metadata,
    save_document,
)
from .models import (
    Library,
    ManifestType,
    Rule,
    RuleOs,
    VersionInfo,
    VersionManifest,
    VersionMetadata,
)

__all__ = [
    "MANIFEST_URL",
    "Library",
    "ManifestType",
    "Rule",
    "RuleOs",
    "VersionInfo",
    "VersionManager",
    "VersionManifest",
    "VersionMetadata",
    "decode_document",
    "fetch_manifest",
    "fetch_manifest_async",
    "fetch_version_metadata",
    "fetch_version_metadata_async",
    "load_document",
    "load_manifest",
    "load_version_metadata",
    "save_document",
]
