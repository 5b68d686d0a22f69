"""Sync command."""

from __future__ import annotations

import argparse

from layoutsync import BidirectionalSyncResult, ParseError, Platform, SyncConfig
from layoutsync.cli.common import format_comma_or_none, read_snapshot, require_snapshot, write_snapshot


def format_sync_summary(result: BidirectionalSyncResult, config: SyncConfig, *, dry_run: bool) -> str:
    mode = "dry-run" if dry_run else "apply"
    target = result.source_platform.counterpart

    lines = [
        "",
        f"layoutsync - sync complete ({mode})",
        "",
        f"  Source:     {result.source_platform} ({config.path_for(result.source_platform)})",
        f"  Target:     {target} ({config.path_for(target)})",
        f"  Mode:       {result.mode}",
    ]
    report = result.report
    if report is not None:
        lines.extend(
            [
                "",
                f"  Added:      {len(report.added)} ({format_comma_or_none(report.added)})",
                f"  Updated:    {len(report.updated)} ({format_comma_or_none(report.updated)})",
                f"  Removed:    {len(report.removed)} ({format_comma_or_none(report.removed)})",
                f"  Preserved:  {len(report.preserved)} ({format_comma_or_none(report.preserved)})",
                f"  Skipped:    {len(report.skipped)} ({format_comma_or_none(report.skipped)})",
            ]
        )
    if dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")
    lines.append("")
    return "\n".join(lines)


def run_sync(args: argparse.Namespace) -> BidirectionalSyncResult:
    import layoutsync.cli as cli

    config = cli.load_config(args.config)
    platform = Platform(args.source_platform) if args.source_platform else config.source_platform

    read = read_snapshot if config.create_missing else require_snapshot
    originals = {side: read(config.path_for(side)) for side in Platform}
    result = cli.bidirectional_sync(originals[Platform.DESKTOP], originals[Platform.MOBILE], platform)
    if result.report is not None and result.report.failed:
        raise ParseError(f"could not reconcile {platform} into {platform.counterpart}: snapshot is not valid JSON")

    if not args.dry_run:
        for side in Platform:
            content = result.content_for(side)
            if content is not None and content != originals[side]:
                write_snapshot(config.path_for(side), content)

    print(format_sync_summary(result, config, dry_run=args.dry_run))
    return result


__all__ = ["format_sync_summary", "run_sync"]
