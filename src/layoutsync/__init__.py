"""Public API surface for layoutsync."""

__version__ = "1.0.0"

from layoutsync.config import SyncConfig, load_config
from layoutsync.convert import convert_desktop_content_to_mobile
from layoutsync.exceptions import ConfigError, LayoutSyncError, NodeNotFoundError, ParseError
from layoutsync.models import (
    BidirectionalSyncResult,
    Node,
    NodeTree,
    Platform,
    ReconcileResult,
    dump_tree,
    parse_tree,
)
from layoutsync.sync import (
    PropertyClass,
    TreeReconciler,
    bidirectional_sync,
    classify,
    filter_syncable_props,
    has_structural_changes,
    is_sync_enabled,
    merge_props,
    set_cross_platform_sync,
    should_sync_property,
    synchronize_content,
)

__all__ = [
    "BidirectionalSyncResult",
    "ConfigError",
    "LayoutSyncError",
    "Node",
    "NodeNotFoundError",
    "NodeTree",
    "ParseError",
    "Platform",
    "PropertyClass",
    "ReconcileResult",
    "SyncConfig",
    "TreeReconciler",
    "__version__",
    "bidirectional_sync",
    "classify",
    "convert_desktop_content_to_mobile",
    "dump_tree",
    "filter_syncable_props",
    "has_structural_changes",
    "is_sync_enabled",
    "load_config",
    "merge_props",
    "parse_tree",
    "set_cross_platform_sync",
    "should_sync_property",
    "synchronize_content",
]
