"""Module entrypoint for ``python -m layoutsync``."""

from __future__ import annotations

from layoutsync.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
