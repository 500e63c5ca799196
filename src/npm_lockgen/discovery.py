"""Workspace package discovery utilities."""

from __future__ import annotations

from pathlib import Path


EXCLUDES = {"node_modules", ".git", ".venv"}


def discover_package_dirs(packages_dir: Path) -> list[Path]:
    """Return the immediate package directories under ``packages_dir``, sorted.

    Hidden directories and vendor directories are skipped. A returned directory
    is not guaranteed to hold a package.json.
    """
    packages_dir = packages_dir.resolve()
    found: list[Path] = []

    for path in sorted(packages_dir.iterdir()):
        if not path.is_dir():
            continue
        if path.name in EXCLUDES or path.name.startswith("."):
            continue
        found.append(path)

    return found
