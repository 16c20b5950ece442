"""Version manifest and metadata fetching."""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Type, TypeVar, Union

import aiohttp
import requests

from .. import __version__
from ..handlers import Error
from ..utils import AsyncHTTPClient, HTTPClient
from .models import VersionInfo, VersionManifest, VersionMetadata, WireModel

MANIFEST_URL = "https://launchermeta.mojang.com/mc/game/version_manifest.json"

log = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=WireModel)
PathLike = Union[str, "os.PathLike[str]"]


def decode_document(raw: bytes, model: Type[DocumentT]) -> DocumentT:
    """Decode JSON bytes into ``model``, raising a classified ``Error`` on failure."""
    try:
        return model.model_validate(json.loads(raw))
    except (ValueError, TypeError, RecursionError) as exc:
        # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors;
        # RecursionError comes from deeply nested input
        error = Error.from_json(exc)
        log.warning("Could not decode %s: %s", model.__name__, error)
        raise error from exc


def load_document(path: PathLike, model: Type[DocumentT]) -> DocumentT:
    """Read a local JSON file and decode it as ``model``."""
    log.debug("Loading %s from %s", model.__name__, path)
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        error = Error.from_io(exc)
        log.warning("Could not read %s: %s", path, error)
        raise error from exc
    return decode_document(raw, model)


def load_manifest(path: PathLike) -> VersionManifest:
    return load_document(path, VersionManifest)


def load_version_metadata(path: PathLike) -> VersionMetadata:
    return load_document(path, VersionMetadata)


def save_document(document: WireModel, path: PathLike) -> Path:
    """Write a document to ``path`` using the upstream key names."""
    path = Path(path)
    log.debug("Saving %s to %s", type(document).__name__, path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(document.to_json())
    except OSError as exc:
        error = Error.from_io(exc)
        log.warning("Could not write %s: %s", path, error)
        raise error from exc
    return path


class VersionManager:
    """Fetches the launcher catalog, blocking or from a coroutine.

    Every call opens its own HTTP session and performs exactly one request;
    nothing is cached between calls.
    """

    MANIFEST_URL = MANIFEST_URL
    USER_AGENT = f"launchermeta/{__version__}"

    def __init__(self, manifest_url: Optional[str] = None,
                 headers: Optional[Dict[str, str]] = None,
                 timeout: Optional[float] = None):
        self.manifest_url = manifest_url or self.MANIFEST_URL
        self.headers = {"User-Agent": self.USER_AGENT, **(headers or {})}
        self.timeout = timeout

    def _get(self, url: str) -> bytes:
        log.debug("GET %s", url)
        try:
            with HTTPClient(self.headers, self.timeout) as client:
                return client.get_bytes(url)
        except requests.RequestException as exc:
            error = Error.from_transport(exc)
            log.warning("Request to %s failed: %s", url, error)
            raise error from exc

    async def _get_async(self, url: str) -> bytes:
        log.debug("GET %s", url)
        try:
            async with AsyncHTTPClient(self.headers, self.timeout) as client:
                return await client.get_bytes(url)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            error = Error.from_transport(exc)
            log.warning("Request to %s failed: %s", url, error)
            raise error from exc

    def fetch_manifest(self) -> VersionManifest:
        """Fetch the launcher version manifest."""
        return decode_document(self._get(self.manifest_url), VersionManifest)

    async def fetch_manifest_async(self) -> VersionManifest:
        """Fetch the launcher version manifest without blocking the event loop."""
        return decode_document(await self._get_async(self.manifest_url), VersionManifest)

    def fetch_version_metadata(self, version: Union[VersionInfo, str]) -> VersionMetadata:
        """Fetch and parse version.json for a manifest entry or a direct URL."""
        return decode_document(self._get(_version_url(version)), VersionMetadata)

    async def fetch_version_metadata_async(self, version: Union[VersionInfo, str]) -> VersionMetadata:
        return decode_document(await self._get_async(_version_url(version)), VersionMetadata)

    def get_version_info(self, version_id: str,
                         manifest: Optional[VersionManifest] = None) -> Optional[VersionInfo]:
        """Get version info for a specific version."""
        if not manifest:
            manifest = self.fetch_manifest()
        return manifest.get(version_id)

    async def get_version_info_async(self, version_id: str,
                                     manifest: Optional[VersionManifest] = None) -> Optional[VersionInfo]:
        if not manifest:
            manifest = await self.fetch_manifest_async()
        return manifest.get(version_id)


def _version_url(version: Union[VersionInfo, str]) -> str:
    if isinstance(version, VersionInfo):
        return version.url
    return version


def fetch_manifest() -> VersionManifest:
    return VersionManager().fetch_manifest()


async def fetch_manifest_async() -> VersionManifest:
    return await VersionManager().fetch_manifest_async()


def fetch_version_metadata(version: Union[VersionInfo, str]) -> VersionMetadata:
    return VersionManager().fetch_version_metadata(version)


async def fetch_version_metadata_async(version: Union[VersionInfo, str]) -> VersionMetadata:
    return await VersionManager().fetch_version_metadata_async(version)
