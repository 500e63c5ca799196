"""Rebuild a lockfile entry tree from an installed ``node_modules`` layout.

The physical directory nesting already encodes the installer's hoisting
decisions, so placement is discovered from ancestor directories rather than
computed: a package found in ``<dir>/node_modules`` lands in the
``dependencies`` of the entry built for ``<dir>``, or at the top level when no
entry exists for that directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .classifier import mark_dev_entries, mark_optional_entries
from .locator import ModuleLocator, get_modules_dir
from .models.context import BuildContext
from .models.entry import Entry, EntryDeps, Scope, deps_to_dict
from .models.manifest import Manifest
from .parsers.package_json import ManifestReader
from .walkers import walk_entries

logger = logging.getLogger(__name__)

LOCKFILE_VERSION = 1


def get_requires(ctx: BuildContext, directory: Path, include_dev: bool) -> dict[str, str]:
    """Return declared ranges of the package at ``directory`` that are installed.

    An optional dependency that was not installed is dropped here without error.
    """
    manifest = ctx.manifests.read(directory)
    requires = manifest.requires(include_dev)
    return {
        name: version_range
        for name, version_range in requires.items()
        if ctx.locator.locate(directory, name) is not None
    }


def get_dependency_target(ctx: BuildContext, location: Path) -> tuple[EntryDeps, Scope]:
    """Return the map an entry installed at ``location`` belongs in, and its owner."""
    modules_dir = get_modules_dir(location)
    if modules_dir is None:
        return ctx.root_deps, ctx.root

    container = ctx.module_dirs.get(modules_dir.parent)
    if container is None:
        return ctx.root_deps, ctx.root
    if container.dependencies is None:
        container.dependencies = {}
    return container.dependencies, container


def build_entry(ctx: BuildContext, directory: Path, include_dev: bool, owner: Scope) -> Entry:
    """Create the entry for the package at ``directory`` and everything below it.

    ``include_dev`` is only ever true for the package the lockfile is generated
    for; devDependencies of installed packages are never part of the tree.
    """
    manifest = ctx.manifests.read(directory)
    requires = get_requires(ctx, directory, include_dev)

    entry = Entry(
        version=manifest.version,
        integrity=manifest.integrity,
        resolved=manifest.resolved,
        requires=requires,
        dependencies={},
        owner=owner,
    )
    logger.debug("Built entry for %s@%s at %s", manifest.name, manifest.version, directory)

    ctx.visited.add(directory)
    ctx.module_dirs[directory] = entry

    entry_resolves: dict[str, Entry] = {}
    ctx.resolves[entry] = entry_resolves

    for dep_name in requires:
        # requires was filtered to installed names; a miss now means the tree changed.
        resolved_dir = ctx.locator.require(directory, dep_name)
        if resolved_dir in ctx.visited:
            continue

        target, container = get_dependency_target(ctx, resolved_dir)
        dep_entry = target.get(dep_name)
        if dep_entry is None:
            dep_entry = build_entry(ctx, resolved_dir, False, container)
            target[dep_name] = dep_entry
        entry_resolves[dep_name] = dep_entry

    return entry


def strip_empty_maps(deps: EntryDeps) -> None:
    def _strip(entry: Entry) -> None:
        if entry.dependencies is not None and not entry.dependencies:
            entry.dependencies = None
        if entry.requires is not None and not entry.requires:
            entry.requires = None

    walk_entries(deps, _strip)


def build_tree(
    directory: Path,
    packages_dir: Path | None = None,
    *,
    manifests: ManifestReader | None = None,
    locator: ModuleLocator | None = None,
) -> tuple[Manifest, BuildContext] | None:
    """Build, clean and classify the entry tree for the package at ``directory``.

    Returns None when ``directory`` has no package.json.
    """
    directory = Path(directory).resolve()
    manifests = manifests or ManifestReader()
    locator = locator or ModuleLocator()

    manifest = manifests.read_if_exists(directory)
    if manifest is None:
        logger.debug("No package.json in %s, skipping", directory)
        return None

    ctx = BuildContext(
        start_dir=directory,
        packages_dir=Path(packages_dir).resolve() if packages_dir else directory.parent,
        manifests=manifests,
        locator=locator,
    )

    root_entry = build_entry(ctx, directory, True, ctx.root)
    # Entries already placed at the top level win over the root package's own.
    ctx.root.dependencies = {**(root_entry.dependencies or {}), **ctx.root_deps}

    strip_empty_maps(ctx.root_deps)
    mark_dev_entries(ctx, manifest)
    mark_optional_entries(ctx, manifest)

    return manifest, ctx


def assemble_lockfile(manifest: Manifest, ctx: BuildContext) -> dict[str, Any]:
    return {
        "name": manifest.name,
        "version": manifest.version,
        "lockfileVersion": LOCKFILE_VERSION,
        "requires": True,
        "dependencies": deps_to_dict(ctx.root_deps),
    }


def generate_lockfile(
    directory: Path,
    packages_dir: Path | None = None,
    *,
    manifests: ManifestReader | None = None,
    locator: ModuleLocator | None = None,
) -> dict[str, Any] | None:
    """Generate the lockfile document for the package at ``directory``.

    Params:
        directory: package directory (the one holding package.json)
        packages_dir: workspace packages directory bounding the run; defaults
            to the parent of ``directory``
        manifests: manifest reader to use; a fresh one when omitted
        locator: module locator to use; a default one when omitted

    Returns: the lockfile document, or None when there is no package.json

    Raises:
        ManifestError: a manifest in the tree is malformed
        PackageNotFoundError: an installed package disappeared mid-run
        ScopeResolutionError: the built tree is internally inconsistent
    """
    built = build_tree(directory, packages_dir, manifests=manifests, locator=locator)
    if built is None:
        return None

    manifest, ctx = built
    return assemble_lockfile(manifest, ctx)
