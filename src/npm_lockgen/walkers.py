"""Traversals over entry trees and the logical ``requires`` graph."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .models.entry import Entry, EntryDeps, Scope
from .scope import find_entry, resolve_entry

Visitor = Callable[[Entry], None]


def walk_entries(deps: EntryDeps | None, visitor: Visitor) -> None:
    """Visit every entry nested in ``deps``, children before their container."""
    if not deps:
        return

    # Snapshot so a visitor may drop an entry's (already walked) maps.
    for entry in list(deps.values()):
        walk_entries(entry.dependencies, visitor)
        visitor(entry)


def walk_requires(
    entry: Entry,
    visitor: Visitor,
    walked: set[Entry] | None = None,
    entry_name: str = "",
) -> None:
    """Visit every entry reachable from ``entry`` through ``requires`` edges.

    Each edge is resolved through the owner chain. An entry is expanded at
    most once per ``walked`` set, which keeps logical cycles finite.
    """
    if walked is None:
        walked = set()

    stack = [(entry_name, entry)]
    while stack:
        name, current = stack.pop()
        if current in walked:
            continue
        walked.add(current)

        if not current.requires:
            continue

        resolved = [
            (dep_name, resolve_entry(current, dep_name, requirer=name))
            for dep_name in current.requires
        ]
        for _, dep in resolved:
            visitor(dep)
        stack.extend(reversed(resolved))


def collect_logical_reachable(scope: Scope, names: Iterable[str]) -> set[Entry]:
    """Return every entry reachable from the given root requirement names.

    Names that are not installed (an absent optional or peer dependency) are
    skipped.
    """
    reachable: set[Entry] = set()
    walked: set[Entry] = set()
    for name in names:
        entry = find_entry(scope, name)
        if entry is None:
            continue
        reachable.add(entry)
        walk_requires(entry, reachable.add, walked, entry_name=name)
    return reachable


def walk_non_subset_entries(
    deps: EntryDeps | None,
    scope: Scope,
    subset: Iterable[str],
    visitor: Visitor,
) -> None:
    """Visit every entry in ``deps`` not required by the ``subset`` packages."""
    if not deps:
        return

    reachable = collect_logical_reachable(scope, subset)

    def _visit(entry: Entry) -> None:
        if entry not in reachable:
            visitor(entry)

    walk_entries(deps, _visit)
