"""Custom exception hierarchy for layoutsync.

All layoutsync exceptions inherit from :class:`LayoutSyncError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations


class LayoutSyncError(Exception):
    """Base exception for all layoutsync errors."""


class ParseError(LayoutSyncError):
    """Raised when a tree snapshot is malformed JSON or has an unexpected shape.

    Attributes:
        label: Which snapshot failed to parse (e.g. "source", "target").
    """

    def __init__(self, message: str, *, label: str = "content") -> None:
        super().__init__(message)
        self.label = label


class ConfigError(LayoutSyncError):
    """Raised when the sync config cannot be read or validated."""


class NodeNotFoundError(LayoutSyncError):
    """Raised when an edit targets a node id that is not in the tree."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"node not found: {node_id}")
        self.node_id = node_id
