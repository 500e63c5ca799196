"""Locate installed packages using Node's module resolution rules."""

from __future__ import annotations

import os
from pathlib import Path

MODULES_DIR_NAME = "node_modules"


class PackageNotFoundError(RuntimeError):
    """Raised when a package that must be installed cannot be located."""


def node_modules_paths(from_dir: Path) -> list[Path]:
    """Return the ``node_modules`` directories searched from ``from_dir``.

    Mirrors Node's lookup order: the directory itself first, then each parent,
    never descending into ``node_modules/node_modules``.
    """
    paths: list[Path] = []
    for directory in (from_dir, *from_dir.parents):
        if directory.name == MODULES_DIR_NAME:
            continue
        paths.append(directory / MODULES_DIR_NAME)
    return paths


def get_modules_dir(location: Path) -> Path | None:
    """Return the closest ``node_modules`` directory containing ``location``."""
    for directory in (location, *location.parents):
        if directory.name == MODULES_DIR_NAME:
            return directory
    return None


class ModuleLocator:
    """Resolve the directory a package is loaded from when required.

    ``locate`` answers ``None`` when the package is not installed; any other
    filesystem failure (permissions, I/O) propagates to the caller.
    """

    def __init__(self, global_paths: list[Path] | None = None) -> None:
        if global_paths is None:
            global_paths = _node_path_from_env()
        self.global_paths = global_paths

    def locate(self, from_dir: Path, package_name: str) -> Path | None:
        candidates = [*node_modules_paths(Path(from_dir)), *self.global_paths]
        for modules_dir in candidates:
            package_dir = modules_dir / package_name
            if (package_dir / "package.json").is_file():
                return package_dir.resolve()
        return None

    def require(self, from_dir: Path, package_name: str) -> Path:
        location = self.locate(from_dir, package_name)
        if location is None:
            raise PackageNotFoundError(
                f"Cannot find package '{package_name}' required from {from_dir}"
            )
        return location


def _node_path_from_env() -> list[Path]:
    raw = os.environ.get("NODE_PATH", "")
    return [Path(p) for p in raw.split(os.pathsep) if p]
