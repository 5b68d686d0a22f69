"""Overlay merge of node props."""

from __future__ import annotations

import copy
from collections.abc import Mapping

from pydantic import JsonValue

from layoutsync.sync.classifier import should_sync_property


def merge_props(target: Mapping[str, JsonValue], source: Mapping[str, JsonValue]) -> dict[str, JsonValue]:
    """Overlay the syncable props of *source* onto a copy of *target*.

    Platform-specific keys and keys missing from *source* keep their target
    values. Syncable keys are inserted or overwritten, never removed.
    """
    merged = copy.deepcopy(dict(target))
    for key, value in source.items():
        if should_sync_property(key):
            merged[key] = copy.deepcopy(value)
    return merged
