"""Check command: cheap change detection between two snapshots."""

from __future__ import annotations

import argparse
from pathlib import Path

from layoutsync.cli.common import read_snapshot


def run_check(args: argparse.Namespace) -> int:
    import layoutsync.cli as cli

    desktop = read_snapshot(Path(args.desktop))
    mobile = read_snapshot(Path(args.mobile))
    if cli.has_structural_changes(desktop, mobile):
        print("sync needed: snapshots differ in nodes or syncable props")
        return 1
    print("in sync: no sync-relevant differences")
    return 0


__all__ = ["run_check"]
