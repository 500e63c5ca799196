"""Read package.json manifests from installed package directories."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..models.manifest import Manifest

MANIFEST_NAME = "package.json"

_SECTIONS = {
    "dependencies": "dependencies",
    "optionalDependencies": "optional_dependencies",
    "devDependencies": "dev_dependencies",
    "peerDependencies": "peer_dependencies",
}


class ManifestError(RuntimeError):
    """Raised when a package.json cannot be read or has an invalid shape."""


def parse(path: Path) -> Manifest:
    """Return the manifest stored at ``path``.

    Sections: dependencies, optionalDependencies, devDependencies,
    peerDependencies. Missing sections read as empty mappings. The
    ``_integrity`` and ``_resolved`` fields written by npm into installed
    manifests are carried over as-is.
    """
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid JSON in {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ManifestError(f"Manifest {path} is not valid UTF-8: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest {path} must be a JSON object")

    sections: dict[str, dict[str, str]] = {}
    for key, attr in _SECTIONS.items():
        deps = data.get(key) or {}
        if not isinstance(deps, dict):
            raise ManifestError(f"Manifest {path} has invalid '{key}' field (must be object)")
        sections[attr] = {str(name): str(version) for name, version in deps.items()}

    return Manifest(
        name=str(data.get("name", "")),
        version=str(data.get("version", "")),
        integrity=_optional_str(data.get("_integrity")),
        resolved=_optional_str(data.get("_resolved")),
        **sections,
    )


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


class ManifestReader:
    """Caching reader for manifests, keyed by package directory."""

    def __init__(self) -> None:
        self._cache: dict[Path, Manifest] = {}

    def read(self, directory: Path) -> Manifest:
        directory = Path(directory)
        manifest = self._cache.get(directory)
        if manifest is None:
            manifest = parse(directory / MANIFEST_NAME)
            self._cache[directory] = manifest
        return manifest

    def read_if_exists(self, directory: Path) -> Manifest | None:
        directory = Path(directory)
        if directory not in self._cache and not (directory / MANIFEST_NAME).is_file():
            return None
        return self.read(directory)
