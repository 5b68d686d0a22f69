"""Shared test fixtures for layoutsync tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def _node(
    node_type: str,
    *,
    parent: str | None = "ROOT",
    nodes: list[str] | None = None,
    **props: Any,
) -> dict[str, Any]:
    return {
        "type": {"resolvedName": node_type},
        "isCanvas": False,
        "props": props,
        "displayName": node_type,
        "custom": {},
        "parent": parent,
        "hidden": False,
        "nodes": nodes if nodes is not None else [],
        "linkedNodes": {},
    }


@pytest.fixture
def desktop_tree() -> dict[str, Any]:
    """A desktop page: a root container holding a heading and a button."""
    return {
        "ROOT": _node("Container", parent=None, nodes=["heading", "cta"], width="960px", backgroundColor="#fff"),
        "heading": _node("Text", text="Welcome", color="#111", fontSize="32px", left=120, top=40),
        "cta": _node("Button", text="RSVP", backgroundColor="#e91e63", width="200px", left=380, top=300),
    }


@pytest.fixture
def mobile_tree() -> dict[str, Any]:
    """The same page laid out for mobile, with older content."""
    return {
        "ROOT": _node("Container", parent=None, nodes=["heading", "cta"], width="380px", backgroundColor="#fff"),
        "heading": _node("Text", text="Hello", color="#111", fontSize="20px", left=10, top=16),
        "cta": _node("Button", text="RSVP", backgroundColor="#2196f3", width="120px", left=130, top=200),
    }


@pytest.fixture
def sync_config_file(tmp_path: Path, desktop_tree: dict[str, Any], mobile_tree: dict[str, Any]) -> Path:
    """A layoutsync.json next to desktop and mobile snapshot files."""
    (tmp_path / "desktop.json").write_text(json.dumps(desktop_tree), encoding="utf-8")
    (tmp_path / "mobile.json").write_text(json.dumps(mobile_tree), encoding="utf-8")
    config_path = tmp_path / "layoutsync.json"
    config_path.write_text(
        json.dumps({"desktop_path": "desktop.json", "mobile_path": "mobile.json"}),
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def make_node():
    """Factory for serialized editor nodes."""
    return _node
