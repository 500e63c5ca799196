from __future__ import annotations

import json

import pytest

from npm_lockgen.parsers.package_json import ManifestError, ManifestReader, parse


def test_parse_reads_all_sections(tmp_path, package):
    package(
        tmp_path,
        "root",
        "2.0.0",
        dependencies={"a": "^1.0.0"},
        optionalDependencies={"o": "^1.0.0"},
        devDependencies={"d": "^1.0.0"},
        peerDependencies={"p": "^1.0.0"},
        _integrity="sha512-xyz",
        _resolved="https://example.test/root.tgz",
    )

    manifest = parse(tmp_path / "package.json")

    assert manifest.name == "root"
    assert manifest.version == "2.0.0"
    assert manifest.dependencies == {"a": "^1.0.0"}
    assert manifest.optional_dependencies == {"o": "^1.0.0"}
    assert manifest.dev_dependencies == {"d": "^1.0.0"}
    assert manifest.peer_dependencies == {"p": "^1.0.0"}
    assert manifest.integrity == "sha512-xyz"
    assert manifest.resolved == "https://example.test/root.tgz"
    assert manifest.non_dev_names() == ["a", "o", "p"]
    assert manifest.non_optional_names() == ["a", "d", "p"]


def test_missing_sections_are_empty(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({"name": "x"}), encoding="utf-8")

    manifest = parse(tmp_path / "package.json")

    assert manifest.version == ""
    assert manifest.requires(include_dev=True) == {}
    assert manifest.integrity is None


@pytest.mark.parametrize(
    "content",
    ["{not json", "[]", json.dumps({"name": "x", "dependencies": ["a"]})],
)
def test_invalid_manifests_raise(tmp_path, content):
    (tmp_path / "package.json").write_text(content, encoding="utf-8")

    with pytest.raises(ManifestError):
        parse(tmp_path / "package.json")


def test_reader_read_if_exists(tmp_path, package):
    reader = ManifestReader()

    assert reader.read_if_exists(tmp_path) is None
    with pytest.raises(ManifestError):
        reader.read(tmp_path)

    package(tmp_path, "root")
    manifest = reader.read_if_exists(tmp_path)
    assert manifest is not None
    assert reader.read(tmp_path) is manifest
