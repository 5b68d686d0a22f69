"""Data models for node trees and sync results."""

from layoutsync.models.node import SYNC_FLAG, Node, NodeTree, dump_tree, parse_tree
from layoutsync.models.sync import BidirectionalSyncResult, Platform, ReconcileResult, SyncMode

__all__ = [
    "SYNC_FLAG",
    "BidirectionalSyncResult",
    "Node",
    "NodeTree",
    "Platform",
    "ReconcileResult",
    "SyncMode",
    "dump_tree",
    "parse_tree",
]
