"""Core lockfile generation entrypoints.

This module MUST NOT depend on the CLI so it can be driven from other tooling.
Each package directory gets its own build context; a failure in one directory
is recorded and does not stop the others.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .builder import assemble_lockfile, build_tree
from .config import Settings
from .discovery import discover_package_dirs
from .locator import ModuleLocator, PackageNotFoundError
from .lockfile import save_lockfile
from .models.entry import Entry
from .parsers.package_json import ManifestError, ManifestReader
from .scope import ScopeResolutionError
from .validators.lockfile import LockfileValidationError
from .walkers import walk_entries

logger = logging.getLogger(__name__)

GENERATION_ERRORS = (
    ManifestError,
    PackageNotFoundError,
    ScopeResolutionError,
    LockfileValidationError,
    OSError,
)


def _tree_counts(deps: dict[str, Entry]) -> dict[str, int]:
    counts = {"packages": 0, "dev": 0, "optional": 0}

    def _count(entry: Entry) -> None:
        counts["packages"] += 1
        counts["dev"] += int(entry.dev)
        counts["optional"] += int(entry.optional)

    walk_entries(deps, _count)
    return counts


def update_lock(
    directory: Path,
    packages_dir: Path,
    settings: Settings,
    manifests: ManifestReader | None = None,
    locator: ModuleLocator | None = None,
) -> dict[str, Any]:
    """Generate and save the lockfile for one package directory.

    Returns a result record with ``path``, ``status`` and tree counts. Errors
    are logged and reported with ``status: failed``; nothing is written then.
    """
    result: dict[str, Any] = {
        "path": str(directory),
        "status": "skipped",
        "packages": 0,
        "dev": 0,
        "optional": 0,
        "error": None,
    }

    try:
        built = build_tree(directory, packages_dir, manifests=manifests, locator=locator)
        if built is None:
            logger.info("No package.json in %s, skipping", directory)
            return result

        manifest, ctx = built
        save_lockfile(directory, assemble_lockfile(manifest, ctx), settings)
    except GENERATION_ERRORS as exc:
        logger.error("Failed to generate lockfile for %s: %s", directory, exc)
        result["status"] = "failed"
        result["error"] = str(exc)
        return result

    result.update(_tree_counts(ctx.root_deps))
    result["status"] = "generated"
    return result


def update_locks(packages_dir: Path, settings: Settings) -> list[dict[str, Any]]:
    """Regenerate lockfiles for every package in ``packages_dir``.

    Params:
        packages_dir: directory holding one subdirectory per workspace package
        settings: loaded configuration

    Returns: one result record per processed directory, workspace root last
    """
    packages_dir = Path(packages_dir).resolve()
    locator = ModuleLocator()

    results: list[dict[str, Any]] = []
    for package_dir in discover_package_dirs(packages_dir):
        logger.info("Generating lockfile for %s...", package_dir.name)
        results.append(update_lock(package_dir, packages_dir, settings, locator=locator))

    if settings.include_workspace_root:
        logger.info("Generating lockfile for workspace root...")
        results.append(
            update_lock(packages_dir.parent, packages_dir, settings, locator=locator)
        )

    workspace = packages_dir.parent
    for result in results:
        result["path"] = str(Path(result["path"]).relative_to(workspace))

    return results
