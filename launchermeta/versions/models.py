"""Data models for Minecraft versions."""

import json
import platform
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue

# u32 on the wire; numeric strings and floats are rejected.
UInt = Annotated[int, Field(strict=True, ge=0, le=2**32 - 1)]


class WireModel(BaseModel):
    """Immutable model that reads and writes the upstream JSON key names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """Wire form. Optional keys missing from the source stay missing."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


class ManifestType(str, Enum):
    SNAPSHOT = "snapshot"
    RELEASE = "release"
    OLD_BETA = "old_beta"
    OLD_ALPHA = "old_alpha"


class LatestVersions(WireModel):
    release: str
    snapshot: str


class VersionInfo(WireModel):
    """One entry of the version manifest."""

    id: str
    type: ManifestType
    url: str
    time: str
    release_time: str = Field(alias="releaseTime")


class VersionManifest(WireModel):
    latest: LatestVersions
    versions: List[VersionInfo]

    def get(self, version_id: str) -> Optional[VersionInfo]:
        """Find a version entry by id."""
        for version in self.versions:
            if version.id == version_id:
                return version
        return None

    def latest_release(self) -> Optional[VersionInfo]:
        return self.get(self.latest.release)

    def latest_snapshot(self) -> Optional[VersionInfo]:
        return self.get(self.latest.snapshot)


class AssetIndex(WireModel):
    id: str
    sha1: str
    size: UInt
    total_size: UInt = Field(alias="totalSize")
    url: str


class Download(WireModel):
    sha1: str
    size: UInt
    url: str


class Downloads(WireModel):
    client: Download
    client_mappings: Download
    server: Download
    server_mappings: Download


class JavaVersion(WireModel):
    component: str
    major_version: UInt = Field(alias="majorVersion")


class Artifact(WireModel):
    path: str
    sha1: str
    size: UInt
    url: str


class LibraryDownloads(WireModel):
    artifact: Artifact


class RuleOs(WireModel):
    name: Optional[str] = None
    arch: Optional[str] = None


class Rule(WireModel):
    action: str
    os: Optional[RuleOs] = None

    def matches(self, os_name: str, arch: str) -> bool:
        """Check if the rule's OS constraints hold for a platform."""
        if self.os is None:
            return True
        if self.os.name is not None and self.os.name != os_name:
            return False
        if self.os.arch is not None and self.os.arch != arch:
            return False
        return True


class Library(WireModel):
    downloads: LibraryDownloads
    name: str
    rules: Optional[List[Rule]] = None

    def applies_to(self, os_name: str, arch: str) -> bool:
        """Evaluate the library rules; the last matching rule decides."""
        if not self.rules:
            return True
        allowed = False
        for rule in self.rules:
            if rule.matches(os_name, arch):
                allowed = rule.action == "allow"
        return allowed


class LoggingFile(WireModel):
    id: str
    sha1: str
    size: UInt
    url: str


class ClientLogging(WireModel):
    argument: str
    file: LoggingFile
    type: str


class LoggingConfig(WireModel):
    client: ClientLogging


class VersionMetadata(WireModel):
    """Parsed version.json of a single version."""

    # Layout changed across releases (minecraftArguments, then game/jvm lists).
    arguments: JsonValue
    asset_index: AssetIndex = Field(alias="assetIndex")
    assets: str
    compliance_level: UInt = Field(alias="complianceLevel")
    downloads: Downloads
    id: str
    java_version: JavaVersion = Field(alias="javaVersion")
    libraries: List[Library]
    logging: LoggingConfig
    main_class: str = Field(alias="mainClass")
    minimum_launcher_version: UInt = Field(alias="minimumLauncherVersion")
    release_time: str = Field(alias="releaseTime")
    time: str
    type: ManifestType

    def applicable_libraries(self, os_name: Optional[str] = None,
                             arch: Optional[str] = None) -> List[Library]:
        """Libraries whose rules allow them on a platform (default: this host)."""
        host_os, host_arch = current_platform()
        os_name = os_name or host_os
        arch = arch or host_arch
        return [lib for lib in self.libraries if lib.applies_to(os_name, arch)]


def current_platform():
    """OS name and architecture in the launcher's vocabulary."""
    os_name = platform.system().lower()
    if os_name == "darwin":
        os_name = "osx"
    arch = platform.machine().lower()
    if arch == "amd64":
        arch = "x86_64"
    elif arch == "aarch64":
        arch = "arm64"
    return os_name, arch
