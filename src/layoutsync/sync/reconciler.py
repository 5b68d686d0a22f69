"""Cross-platform tree reconciliation.

Merges a source platform snapshot into a target platform snapshot:

- nodes present on both sides get the source's syncable props overlaid on
  the target's props, and the source's structure (type, children, parent);
- nodes new on the source are copied in full with ``props.left`` reset to 0;
- nodes missing from the source are deleted from the target;
- nodes with ``props.syncCrossPlatform == false`` on either side are left alone.

A relink pass and a prune pass then restore parent/child consistency.
"""

from __future__ import annotations

import copy
import logging

from pydantic import JsonValue

from layoutsync.exceptions import ParseError
from layoutsync.models.node import Node, NodeTree, dump_tree, parse_tree
from layoutsync.models.sync import ReconcileResult
from layoutsync.sync.merger import merge_props

_LOG = logging.getLogger(__name__)

STRUCTURAL_FIELDS: frozenset[str] = frozenset(
    {"type", "is_canvas", "display_name", "custom", "hidden", "nodes", "linked_nodes", "parent"}
)

NEW_NODE_RESETS: dict[str, JsonValue] = {"left": 0}


def _adopt_structure(target: Node, source: Node, props: dict[str, JsonValue]) -> Node:
    """Target node with merged *props* and the source node's structural fields.

    A structural field the source never set is dropped, not kept from the target.
    """
    data = target.model_dump(by_alias=True, exclude_unset=True)
    for name in STRUCTURAL_FIELDS:
        key = Node.model_fields[name].alias or name
        data.pop(key, None)
        if name in source.model_fields_set:
            data[key] = copy.deepcopy(getattr(source, name))
    data["props"] = props
    return Node.model_validate(data)


def _as_new_node(source: Node) -> Node:
    if source.props is None:
        return source.model_copy(deep=True)
    return source.model_copy(deep=True, update={"props": {**copy.deepcopy(source.props), **NEW_NODE_RESETS}})


class TreeReconciler:
    """Produces a merged target tree from a source tree.

    The reconciler is stateless apart from its logger; one instance can serve
    any number of document pairs.
    """

    def __init__(self, *, logger: logging.Logger | logging.LoggerAdapter | None = None) -> None:
        self._log = logger or _LOG

    def reconcile(self, source: str, target: str | None) -> ReconcileResult:
        """Reconcile two serialized snapshots.

        Never raises on bad input: if either snapshot fails to parse, the
        result carries the unmodified target (or source when there is no
        target) and ``failed=True``.
        """
        try:
            source_tree = parse_tree(source, label="source")
            if not target:
                return ReconcileResult(content=source)
            target_tree = parse_tree(target, label="target")
        except ParseError as exc:
            self._log.warning("Error synchronizing content: %s", exc)
            return ReconcileResult(content=target or source, failed=True)

        result = ReconcileResult(content="")
        merged = self.merge_trees(source_tree, target_tree, result)
        return result.model_copy(update={"content": dump_tree(merged)})

    def merge_trees(self, source_tree: NodeTree, target_tree: NodeTree, result: ReconcileResult) -> NodeTree:
        """Merge parsed trees, recording each decision on *result*. Inputs are not mutated."""
        self._log.debug("Sync analysis: %d source nodes, %d target nodes", len(source_tree), len(target_tree))
        merged: NodeTree = {
            node_id: node.model_copy(deep=True) if node is not None else None for node_id, node in target_tree.items()
        }

        for node_id, source_node in source_tree.items():
            if source_node is None or source_node.type is None or source_node.type == "":
                continue
            if not source_node.sync_enabled:
                self._log.debug("Skipping node %s: cross-platform sync disabled on source", node_id)
                result.skipped.append(node_id)
                continue

            if node_id not in target_tree:
                merged[node_id] = _as_new_node(source_node)
                result.added.append(node_id)
                continue

            target_node = target_tree[node_id]
            if target_node is None or target_node.props is None or source_node.props is None:
                continue
            if not target_node.sync_enabled:
                self._log.debug("Skipping node %s: cross-platform sync disabled on target", node_id)
                result.skipped.append(node_id)
                continue

            props = merge_props(target_node.props, source_node.props)
            merged[node_id] = _adopt_structure(target_node, source_node, props)
            result.updated.append(node_id)

        for node_id, target_node in target_tree.items():
            if node_id in source_tree:
                continue
            if target_node is not None and not target_node.sync_enabled:
                self._log.debug("Preserving non-sync node %s on target platform", node_id)
                result.preserved.append(node_id)
                continue
            self._log.debug("Removing node %s deleted on source platform", node_id)
            del merged[node_id]
            result.removed.append(node_id)

        self._relink(merged, result)
        self._prune(merged, result)
        self._log.debug(
            "Sync complete: %d nodes (%d added, %d updated, %d removed)",
            len(merged),
            len(result.added),
            len(result.updated),
            len(result.removed),
        )
        return merged

    @staticmethod
    def _relink(merged: NodeTree, result: ReconcileResult) -> None:
        for node_id, node in merged.items():
            if node is None or not node.parent:
                continue
            parent = merged.get(node.parent)
            if parent is None or parent.nodes is None:
                continue
            if node_id not in parent.nodes:
                parent.nodes.append(node_id)
                result.relinked.append((node.parent, node_id))

    @staticmethod
    def _prune(merged: NodeTree, result: ReconcileResult) -> None:
        for node_id, node in merged.items():
            if node is None or node.nodes is None:
                continue
            valid = [child_id for child_id in node.nodes if merged.get(child_id) is not None]
            if len(valid) == len(node.nodes):
                continue
            result.pruned.extend((node_id, child_id) for child_id in node.nodes if child_id not in valid)
            merged[node_id] = node.model_copy(update={"nodes": valid})


def synchronize_content(
    source: str,
    target: str | None,
    *,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> str:
    """Return *target* updated with the content changes in *source*.

    With no *target*, *source* is returned verbatim. On malformed input the
    unmodified *target* (or *source*) is returned.
    """
    return TreeReconciler(logger=logger).reconcile(source, target).content
