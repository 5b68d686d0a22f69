"""Toggle command: per-node cross-platform sync opt-out."""

from __future__ import annotations

import argparse
from pathlib import Path

from layoutsync.cli.common import require_snapshot, write_snapshot


def run_toggle(args: argparse.Namespace) -> int:
    import layoutsync.cli as cli

    path = Path(args.snapshot)
    content = require_snapshot(path)
    enabled = bool(args.enable)
    write_snapshot(path, cli.set_cross_platform_sync(content, args.node_id, enabled))
    print(f"Cross-platform sync {'enabled' if enabled else 'disabled'} for node {args.node_id}")
    return 0


__all__ = ["run_toggle"]
