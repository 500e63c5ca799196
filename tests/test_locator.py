from __future__ import annotations

import os

from npm_lockgen.locator import ModuleLocator, get_modules_dir, node_modules_paths


def test_search_paths_skip_node_modules_directories(tmp_path):
    start = tmp_path / "node_modules" / "a"

    paths = node_modules_paths(start)

    assert paths[0] == start / "node_modules"
    assert paths[1] == tmp_path / "node_modules"
    assert tmp_path / "node_modules" / "node_modules" not in paths


def test_get_modules_dir_handles_scoped_packages(tmp_path):
    location = tmp_path / "node_modules" / "@scope" / "pkg"

    assert get_modules_dir(location) == tmp_path / "node_modules"
    assert get_modules_dir(tmp_path / "src") is None


def test_locate_prefers_nearest_install(project, package, install):
    package(project, "root")
    a_dir = install("a")
    install("b", "2.0.0")
    nested_b = install("b", "1.0.0", base=a_dir)
    locator = ModuleLocator(global_paths=[])

    assert locator.locate(a_dir, "b") == nested_b
    assert locator.locate(project, "b") == project / "node_modules" / "b"


def test_locate_scoped_package(project, package, install):
    package(project, "root")
    scoped = install("@scope/pkg")

    assert ModuleLocator(global_paths=[]).locate(project, "@scope/pkg") == scoped


def test_locate_returns_none_when_missing(project, package):
    package(project, "root")

    assert ModuleLocator(global_paths=[]).locate(project, "nope") is None


def test_locate_requires_package_json(project, package):
    package(project, "root")
    (project / "node_modules" / "empty").mkdir(parents=True)

    assert ModuleLocator(global_paths=[]).locate(project, "empty") is None


def test_locate_follows_symlinks(tmp_path, package):
    workspace = tmp_path.resolve()
    target = package(workspace / "packages" / "lib", "lib")
    app = package(workspace / "packages" / "app", "app")
    (app / "node_modules").mkdir()
    (app / "node_modules" / "lib").symlink_to(target, target_is_directory=True)

    assert ModuleLocator(global_paths=[]).locate(app, "lib") == target


def test_node_path_is_searched_last(tmp_path, monkeypatch, package):
    global_dir = tmp_path.resolve() / "global"
    package(global_dir / "tool", "tool")
    monkeypatch.setenv("NODE_PATH", os.pathsep.join([str(global_dir), ""]))
    app = package(tmp_path.resolve() / "app", "app")

    assert ModuleLocator().locate(app, "tool") == global_dir / "tool"
