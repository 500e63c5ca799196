"""Package manifest model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Manifest:
    """The subset of ``package.json`` needed to rebuild a lockfile."""

    name: str
    version: str
    dependencies: dict[str, str] = field(default_factory=dict)
    optional_dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    peer_dependencies: dict[str, str] = field(default_factory=dict)
    integrity: str | None = None
    resolved: str | None = None

    def requires(self, include_dev: bool = False) -> dict[str, str]:
        """Return declared ranges merged in install precedence order.

        Optional ranges overwrite regular ones on a name collision, and dev
        ranges (only when ``include_dev``) overwrite both.
        """
        merged = dict(self.dependencies)
        merged.update(self.optional_dependencies)
        if include_dev:
            merged.update(self.dev_dependencies)
        return merged

    def non_dev_names(self) -> list[str]:
        return _ordered_names(
            self.dependencies, self.optional_dependencies, self.peer_dependencies
        )

    def non_optional_names(self) -> list[str]:
        return _ordered_names(self.dependencies, self.dev_dependencies, self.peer_dependencies)


def _ordered_names(*sections: dict[str, str]) -> list[str]:
    names: dict[str, None] = {}
    for section in sections:
        for name in section:
            names.setdefault(name, None)
    return list(names)
