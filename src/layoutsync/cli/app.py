"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from layoutsync import ConfigError, NodeNotFoundError, ParseError


def main(argv: list[str] | None = None) -> int:
    import layoutsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "sync":
            cli._run_sync(args)
            return 0
        if args.command == "check":
            return cli._run_check(args)
        if args.command == "classify":
            return cli._run_classify(args)
        if args.command == "convert":
            return cli._run_convert(args)
        if args.command == "toggle":
            return cli._run_toggle(args)
        print(f"error: unsupported command: {args.command}", file=sys.stderr)
        return 2
    except (ConfigError, ParseError, NodeNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
