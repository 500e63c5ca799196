"""Resolve logical ``requires`` edges to physical entries."""

from __future__ import annotations

from .models.entry import Entry, Scope


class ScopeResolutionError(RuntimeError):
    """Raised when no enclosing container provides a required package.

    This means the entry tree was built incorrectly; it is never a user error.
    """


def find_entry(scope: Scope | None, name: str) -> Entry | None:
    """Return the entry for ``name`` visible from ``scope``, or None.

    The lookup starts in ``scope.dependencies`` and climbs ``owner`` links, so
    the nearest enclosing container providing ``name`` wins, as it does at
    runtime in Node.
    """
    current = scope
    while current is not None:
        if current.dependencies:
            entry = current.dependencies.get(name)
            if entry is not None:
                return entry
        current = current.owner
    return None


def resolve_entry(scope: Scope, name: str, requirer: str = "") -> Entry:
    entry = find_entry(scope, name)
    if entry is None:
        raise ScopeResolutionError(
            f"Internal error: failed to resolve entry for {requirer or '<root>'} -> {name}"
        )
    return entry
