"""Convert command: desktop snapshot to mobile layout."""

from __future__ import annotations

import argparse
from pathlib import Path

from layoutsync.cli.common import require_snapshot, write_snapshot


def run_convert(args: argparse.Namespace) -> int:
    import layoutsync.cli as cli

    desktop = require_snapshot(Path(args.desktop))
    cli.parse_tree(desktop, label="desktop")
    converted = cli.convert_desktop_content_to_mobile(desktop)
    if args.output:
        write_snapshot(Path(args.output), converted)
        print(f"Wrote mobile layout to {args.output}")
    else:
        print(converted)
    return 0


__all__ = ["run_convert"]
