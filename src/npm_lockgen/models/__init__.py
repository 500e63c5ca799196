"""Data models for lockfile generation."""

from __future__ import annotations

from .context import BuildContext
from .entry import Entry, EntryDeps, Scope, TreeRoot
from .manifest import Manifest

__all__ = [
    "BuildContext",
    "Entry",
    "EntryDeps",
    "Manifest",
    "Scope",
    "TreeRoot",
]
