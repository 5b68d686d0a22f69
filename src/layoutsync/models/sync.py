"""Models for reconciliation and bidirectional sync results."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field


class Platform(StrEnum):
    """One of the two parallel documents being reconciled."""

    DESKTOP = "desktop"
    MOBILE = "mobile"

    @property
    def counterpart(self) -> Platform:
        return Platform.MOBILE if self is Platform.DESKTOP else Platform.DESKTOP


SyncMode = Literal["noop", "bootstrap", "reconcile"]


class ReconcileResult(BaseModel):
    """Value returned by :meth:`TreeReconciler.reconcile`.

    Attributes:
        content: The merged target snapshot (or the fallback content on failure).
        added: Ids copied from the source as new nodes.
        updated: Ids whose props were merged and structure taken from the source.
        removed: Ids deleted because they vanished from the source.
        preserved: Opted-out ids kept although the source no longer has them.
        skipped: Ids left untouched because either side opted out of sync.
        relinked: ``(parent_id, child_id)`` back-links appended by the relink pass.
        pruned: ``(parent_id, child_id)`` dangling references dropped by the prune pass.
        failed: True when parsing failed and *content* is the unmodified fallback.
    """

    content: str
    added: list[str] = Field(default_factory=list)
    updated: list[str] = Field(default_factory=list)
    removed: list[str] = Field(default_factory=list)
    preserved: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    relinked: list[tuple[str, str]] = Field(default_factory=list)
    pruned: list[tuple[str, str]] = Field(default_factory=list)
    failed: bool = False


class BidirectionalSyncResult(BaseModel):
    """Value returned by :func:`bidirectional_sync`."""

    desktop_content: str | None
    mobile_content: str | None
    source_platform: Platform
    mode: SyncMode
    report: ReconcileResult | None = None

    def content_for(self, platform: Platform) -> str | None:
        return self.desktop_content if platform is Platform.DESKTOP else self.mobile_content
