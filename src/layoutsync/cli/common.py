"""Shared CLI helpers."""

from __future__ import annotations

from pathlib import Path

from layoutsync.exceptions import ConfigError


def format_comma_or_none(values: list[str]) -> str:
    if not values:
        return "none"
    return ", ".join(values)


def read_snapshot(path: Path) -> str | None:
    """Read a snapshot file; a missing or blank file yields ``None``."""
    if not path.exists():
        return None
    try:
        return path.read_text(encoding="utf-8").strip() or None
    except OSError as exc:
        raise ConfigError(f"failed reading snapshot file: {path}") from exc


def require_snapshot(path: Path) -> str:
    content = read_snapshot(path)
    if content is None:
        raise ConfigError(f"missing or empty snapshot file: {path}")
    return content


def write_snapshot(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content + "\n", encoding="utf-8")
