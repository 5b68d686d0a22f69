"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("layoutsync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="layoutsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    sync_parser = subparsers.add_parser("sync", help="Propagate content edits between desktop and mobile snapshots")
    sync_parser.add_argument("--config", default="./layoutsync.json", help="Path to layoutsync.json")
    sync_parser.add_argument(
        "--from",
        dest="source_platform",
        choices=["desktop", "mobile"],
        default=None,
        help="Platform whose edits are authoritative (default: from config)",
    )
    mode = sync_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Apply mode")
    sync_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    check_parser = subparsers.add_parser("check", help="Exit 1 when two snapshots differ in sync-relevant content")
    check_parser.add_argument("desktop", help="Desktop snapshot JSON")
    check_parser.add_argument("mobile", help="Mobile snapshot JSON")
    check_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    classify_parser = subparsers.add_parser("classify", help="Show how property names are classified")
    classify_parser.add_argument("names", nargs="+", metavar="NAME", help="Property names")
    classify_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    convert_parser = subparsers.add_parser("convert", help="Convert a desktop snapshot to a mobile layout")
    convert_parser.add_argument("desktop", help="Desktop snapshot JSON")
    convert_parser.add_argument("--output", "-o", default=None, help="Output file path (default: stdout)")
    convert_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    toggle_parser = subparsers.add_parser("toggle", help="Enable or disable cross-platform sync for one node")
    toggle_parser.add_argument("snapshot", help="Snapshot JSON, edited in place")
    toggle_parser.add_argument("node_id", help="Node id")
    state = toggle_parser.add_mutually_exclusive_group(required=True)
    state.add_argument("--enable", action="store_true", help="Sync this node across platforms")
    state.add_argument("--disable", action="store_true", help="Exempt this node from cross-platform sync")
    toggle_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
