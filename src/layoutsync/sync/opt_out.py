"""Per-node cross-platform sync opt-out."""

from __future__ import annotations

from layoutsync.exceptions import NodeNotFoundError
from layoutsync.models.node import SYNC_FLAG, Node, dump_tree, parse_tree


def is_sync_enabled(node: Node | None) -> bool:
    """A missing flag means the node syncs; only an explicit ``false`` opts out."""
    return node is None or node.sync_enabled


def set_cross_platform_sync(content: str, node_id: str, enabled: bool) -> str:
    """Return *content* with ``props.syncCrossPlatform`` of *node_id* set to *enabled*.

    Raises:
        ParseError: If *content* is not a valid snapshot.
        NodeNotFoundError: If *node_id* is not a node of the snapshot.
    """
    tree = parse_tree(content)
    node = tree.get(node_id)
    if node is None:
        raise NodeNotFoundError(node_id)
    tree[node_id] = node.model_copy(update={"props": {**(node.props or {}), SYNC_FLAG: enabled}})
    return dump_tree(tree)
