"""Per-run build state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .entry import Entry, EntryDeps, TreeRoot

if TYPE_CHECKING:
    from ..locator import ModuleLocator
    from ..parsers.package_json import ManifestReader


@dataclass(slots=True)
class BuildContext:
    """Mutable state owned by exactly one lockfile generation run.

    A context must not be shared between runs: ``visited``, ``module_dirs`` and
    ``resolves`` describe a single install tree.
    """

    start_dir: Path
    packages_dir: Path
    manifests: ManifestReader
    locator: ModuleLocator
    root: TreeRoot = field(default_factory=TreeRoot)
    visited: set[Path] = field(default_factory=set)
    module_dirs: dict[Path, Entry] = field(default_factory=dict)
    resolves: dict[Entry, dict[str, Entry]] = field(default_factory=dict)

    @property
    def root_deps(self) -> EntryDeps:
        return self.root.dependencies
