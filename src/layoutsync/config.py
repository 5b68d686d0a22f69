"""Configuration for a sync run.

:class:`SyncConfig` names the two snapshot files of a page and the platform
whose edits are authoritative. It is loaded from a ``layoutsync.json`` file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from layoutsync.exceptions import ConfigError
from layoutsync.models.sync import Platform


class SyncConfig(BaseModel):
    """Top-level configuration for a ``layoutsync`` run.

    Attributes:
        desktop_path: Path to the desktop snapshot JSON.
        mobile_path: Path to the mobile snapshot JSON.
        source_platform: Platform whose edits are propagated. Default is desktop.
        create_missing: When *True*, a missing or empty snapshot file is
            created from the other platform's content.
    """

    desktop_path: Path
    mobile_path: Path
    source_platform: Platform = Platform.DESKTOP
    create_missing: bool = True

    model_config = {"extra": "forbid"}

    def path_for(self, platform: Platform) -> Path:
        return self.desktop_path if platform is Platform.DESKTOP else self.mobile_path


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> SyncConfig:
    """Load and validate config from JSON, resolving relative paths against the config directory."""
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = SyncConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={
            "desktop_path": _resolve_path(parsed.desktop_path, base_dir=config_dir),
            "mobile_path": _resolve_path(parsed.mobile_path, base_dir=config_dir),
        }
    )
