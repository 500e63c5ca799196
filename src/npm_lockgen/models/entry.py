"""Lockfile entry model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias, Union


@dataclass(slots=True, eq=False)
class Entry:
    """One installed copy of a package, identified by its directory on disk.

    Entries compare and hash by identity: every requirer of the same installed
    directory shares a single instance. ``owner`` points at the container whose
    ``dependencies`` map holds this entry and is only used for scope lookups.
    """

    version: str
    integrity: str | None = None
    resolved: str | None = None
    requires: dict[str, str] | None = None
    dependencies: dict[str, Entry] | None = None
    dev: bool = False
    optional: bool = False
    owner: Scope | None = field(default=None, repr=False)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"version": self.version}
        if self.integrity is not None:
            data["integrity"] = self.integrity
        if self.resolved is not None:
            data["resolved"] = self.resolved
        if self.requires is not None:
            data["requires"] = dict(self.requires)
        if self.dev:
            data["dev"] = True
        if self.optional:
            data["optional"] = True
        if self.dependencies is not None:
            data["dependencies"] = deps_to_dict(self.dependencies)
        return data


@dataclass(slots=True, eq=False)
class TreeRoot:
    """Synthetic top of an entry tree; terminates every owner chain."""

    dependencies: dict[str, Entry] = field(default_factory=dict)
    owner: None = None


EntryDeps: TypeAlias = dict[str, Entry]
Scope: TypeAlias = Union[Entry, TreeRoot]


def deps_to_dict(deps: EntryDeps) -> dict[str, object]:
    return {name: entry.to_dict() for name, entry in deps.items()}
