"""Direction-aware entry point for desktop/mobile sync."""

from __future__ import annotations

import logging

from layoutsync.models.sync import BidirectionalSyncResult, Platform
from layoutsync.sync.reconciler import TreeReconciler

_LOG = logging.getLogger(__name__)


def bidirectional_sync(
    desktop_content: str | None,
    mobile_content: str | None,
    source_platform: Platform | str,
    *,
    logger: logging.Logger | logging.LoggerAdapter | None = None,
) -> BidirectionalSyncResult:
    """Propagate the edits of *source_platform* to the other platform.

    - Neither side has content: both are returned as given.
    - One side is empty: the other side's content is copied over verbatim.
    - Both have content: the non-initiating side is reconciled against the
      initiating side; the initiating side is returned unchanged.

    Raises:
        ValueError: If *source_platform* is not ``desktop`` or ``mobile``.
    """
    platform = Platform(source_platform)
    log = logger or _LOG

    if not desktop_content and not mobile_content:
        return BidirectionalSyncResult(
            desktop_content=desktop_content,
            mobile_content=mobile_content,
            source_platform=platform,
            mode="noop",
        )

    if not desktop_content or not mobile_content:
        present = desktop_content or mobile_content
        log.debug("Bootstrapping %s content from the other platform", "desktop" if not desktop_content else "mobile")
        return BidirectionalSyncResult(
            desktop_content=present,
            mobile_content=present,
            source_platform=platform,
            mode="bootstrap",
        )

    reconciler = TreeReconciler(logger=log)
    if platform is Platform.DESKTOP:
        report = reconciler.reconcile(desktop_content, mobile_content)
        synced_desktop, synced_mobile = desktop_content, report.content
    else:
        report = reconciler.reconcile(mobile_content, desktop_content)
        synced_desktop, synced_mobile = report.content, mobile_content

    log.debug("Cross-platform sync from %s completed", platform)
    return BidirectionalSyncResult(
        desktop_content=synced_desktop,
        mobile_content=synced_mobile,
        source_platform=platform,
        mode="reconcile",
        report=report,
    )
