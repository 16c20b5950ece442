"""Command-line interface for browsing the launcher catalog."""

import argparse
import asyncio
import sys
from typing import List, Optional

from .handlers import Error
from .utils import setup_logging
from .versions import (
    ManifestType,
    VersionManager,
    VersionManifest,
    VersionMetadata,
    load_manifest,
    load_version_metadata,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchermeta",
        description="Inspect the Minecraft launcher version catalog.",
    )
    parser.add_argument("--manifest", metavar="PATH", help="Read the manifest from a local file.")
    parser.add_argument("--async", dest="use_async", action="store_true",
                        help="Use the asyncio HTTP client.")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds.")
    parser.add_argument("-v", "--verbose", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("latest", help="Print the latest release and snapshot ids.")

    list_cmd = sub.add_parser("list", help="List version ids in published order.")
    list_cmd.add_argument("--type", dest="version_type",
                          choices=[t.value for t in ManifestType])
    list_cmd.add_argument("--limit", type=int, default=None)

    show_cmd = sub.add_parser("show", help="Summarize a version's metadata.")
    show_cmd.add_argument("version", nargs="?", help="Version id to look up in the manifest.")
    show_cmd.add_argument("--file", metavar="PATH", help="Read version metadata from a local file.")
    return parser


def _manifest(args, manager: VersionManager) -> VersionManifest:
    if args.manifest:
        return load_manifest(args.manifest)
    if args.use_async:
        return asyncio.run(manager.fetch_manifest_async())
    return manager.fetch_manifest()


async def _metadata_async(manager: VersionManager, manifest: VersionManifest,
                          version_id: str) -> Optional[VersionMetadata]:
    info = manifest.get(version_id)
    if info is None:
        return None
    return await manager.fetch_version_metadata_async(info)


def _metadata(args, manager: VersionManager) -> Optional[VersionMetadata]:
    if args.file:
        return load_version_metadata(args.file)
    manifest = _manifest(args, manager)
    if args.use_async:
        return asyncio.run(_metadata_async(manager, manifest, args.version))
    info = manifest.get(args.version)
    if info is None:
        return None
    return manager.fetch_version_metadata(info)


def cmd_latest(args, manager: VersionManager) -> int:
    manifest = _manifest(args, manager)
    print(f"release: {manifest.latest.release}")
    print(f"snapshot: {manifest.latest.snapshot}")
    return 0


def cmd_list(args, manager: VersionManager) -> int:
    manifest = _manifest(args, manager)
    versions = manifest.versions
    if args.version_type:
        versions = [v for v in versions if v.type.value == args.version_type]
    if args.limit is not None:
        versions = versions[:args.limit]
    for version in versions:
        print(f"{version.id}\t{version.type.value}\t{version.release_time}")
    return 0


def cmd_show(args, manager: VersionManager) -> int:
    if not args.version and not args.file:
        print("show: a version id or --file is required", file=sys.stderr)
        return 2
    metadata = _metadata(args, manager)
    if metadata is None:
        print(f"Version {args.version} not found in manifest", file=sys.stderr)
        return 1
    print(f"id: {metadata.id}")
    print(f"type: {metadata.type.value}")
    print(f"main class: {metadata.main_class}")
    print(f"java: {metadata.java_version.component} ({metadata.java_version.major_version})")
    print(f"libraries: {len(metadata.libraries)}")
    print(f"assets: {metadata.asset_index.id}")
    return 0


COMMANDS = {
    "latest": cmd_latest,
    "list": cmd_list,
    "show": cmd_show,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    manager = VersionManager(timeout=args.timeout)
    try:
        return COMMANDS[args.command](args, manager)
    except Error as exc:
        print(str(exc), file=sys.stderr)
        return 1
