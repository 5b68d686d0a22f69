"""Cross-platform sync engine: classification, merge, reconciliation."""

from layoutsync.sync.changes import has_structural_changes
from layoutsync.sync.classifier import (
    KEYWORD_PLATFORM_SPECIFIC_PROPERTIES,
    PLATFORM_SPECIFIC_PROPERTIES,
    SYNC_PROPERTIES,
    PropertyClass,
    classification_rule,
    classify,
    filter_syncable_props,
    should_sync_property,
)
from layoutsync.sync.merger import merge_props
from layoutsync.sync.opt_out import is_sync_enabled, set_cross_platform_sync
from layoutsync.sync.orchestrator import bidirectional_sync
from layoutsync.sync.reconciler import TreeReconciler, synchronize_content

__all__ = [
    "KEYWORD_PLATFORM_SPECIFIC_PROPERTIES",
    "PLATFORM_SPECIFIC_PROPERTIES",
    "SYNC_PROPERTIES",
    "PropertyClass",
    "TreeReconciler",
    "bidirectional_sync",
    "classification_rule",
    "classify",
    "filter_syncable_props",
    "has_structural_changes",
    "is_sync_enabled",
    "merge_props",
    "set_cross_platform_sync",
    "should_sync_property",
    "synchronize_content",
]
