"""Cheap pre-check deciding whether a reconciliation pass is worth running."""

from __future__ import annotations

import json
import logging
from typing import Any

from layoutsync.exceptions import ParseError
from layoutsync.models.node import parse_tree
from layoutsync.sync.classifier import filter_syncable_props

_LOG = logging.getLogger(__name__)


def _js_numbers(value: Any) -> Any:
    """Write integral floats as integers, the way ``JSON.stringify`` does."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, dict):
        return {key: _js_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_js_numbers(item) for item in value]
    return value


def _canonical(props: dict) -> str:
    return json.dumps(_js_numbers(props), separators=(",", ":"), ensure_ascii=False)


def has_structural_changes(first: str | None, second: str | None) -> bool:
    """True when the two snapshots differ in node ids or in any syncable prop.

    Missing or unparsable content always counts as changed. Prop comparison
    is order-sensitive, matching how the editor serializes props, and treats
    ``1`` and ``1.0`` as the same number.
    """
    if not first or not second:
        return True

    try:
        first_tree = parse_tree(first, label="first")
        second_tree = parse_tree(second, label="second")
    except ParseError as exc:
        _LOG.warning("Error checking structural changes: %s", exc)
        return True

    first_ids = sorted(first_tree)
    if first_ids != sorted(second_tree):
        return True

    for node_id in first_ids:
        first_node = first_tree[node_id]
        second_node = second_tree[node_id]
        if first_node is None or second_node is None:
            continue
        first_props = filter_syncable_props(first_node.props or {})
        second_props = filter_syncable_props(second_node.props or {})
        if _canonical(first_props) != _canonical(second_props):
            return True

    return False
