from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_manifest(directory: Path, name: str, version: str = "1.0.0", **fields) -> Path:
    """Write a package.json into ``directory`` and return the directory."""
    directory.mkdir(parents=True, exist_ok=True)
    data = {"name": name, "version": version, **fields}
    (directory / "package.json").write_text(json.dumps(data), encoding="utf-8")
    return directory


@pytest.fixture
def project(tmp_path: Path) -> Path:
    return (tmp_path / "project").resolve()


@pytest.fixture
def install(project: Path):
    """Install a fake package under ``<base>/node_modules/<name>``.

    Usage:
        install("a", "1.0.0", dependencies={"b": "^1.0.0"})
        install("c", "1.0.0", base=project / "node_modules" / "a")
    """

    def _install(name: str, version: str = "1.0.0", base: Path | None = None, **fields) -> Path:
        base = base or project
        return write_manifest(base / "node_modules" / name, name, version, **fields)

    return _install


@pytest.fixture
def package():
    return write_manifest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.delenv("NODE_PATH", raising=False)
    monkeypatch.delenv("NPM_LOCKGEN_CONFIG", raising=False)
