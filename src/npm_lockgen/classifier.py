"""Derive ``dev`` and ``optional`` flags from root requirement reachability."""

from __future__ import annotations

import logging

from .models.context import BuildContext
from .models.entry import Entry
from .models.manifest import Manifest
from .walkers import walk_non_subset_entries

logger = logging.getLogger(__name__)


def mark_dev_entries(ctx: BuildContext, manifest: Manifest) -> int:
    """Flag every entry not needed by the non-dev root requirements.

    Returns the number of entries flagged.
    """
    flagged = 0

    def _mark(entry: Entry) -> None:
        nonlocal flagged
        entry.dev = True
        flagged += 1

    walk_non_subset_entries(ctx.root_deps, ctx.root, manifest.non_dev_names(), _mark)
    logger.debug("Marked %d dev entries for %s", flagged, ctx.start_dir)
    return flagged


def mark_optional_entries(ctx: BuildContext, manifest: Manifest) -> int:
    """Flag every entry not needed by the non-optional root requirements."""
    flagged = 0

    def _mark(entry: Entry) -> None:
        nonlocal flagged
        entry.optional = True
        flagged += 1

    walk_non_subset_entries(ctx.root_deps, ctx.root, manifest.non_optional_names(), _mark)
    logger.debug("Marked %d optional entries for %s", flagged, ctx.start_dir)
    return flagged
