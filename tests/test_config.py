from __future__ import annotations

import json
import logging

import pytest

from npm_lockgen import config
from npm_lockgen.config import ConfigError, Settings, load_settings


def test_defaults_when_default_file_is_missing(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", tmp_path / "settings.json")

    assert load_settings() == Settings()


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path / "nope.json")


def test_load_json(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"packagesDir": "libs", "validate": False, "logLevel": "debug"}),
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.packages_dir == "libs"
    assert settings.validate is False
    assert settings.log_level == "DEBUG"
    assert settings.log_level_value == logging.DEBUG
    assert settings.lockfile_name == "package-lock.json"


def test_load_yaml_from_env(tmp_path, monkeypatch):
    path = tmp_path / "lockgen.yaml"
    path.write_text("lockfileName: npm-shrinkwrap.json\nincludeWorkspaceRoot: false\n")
    monkeypatch.setenv(config.CONFIG_PATH_ENV_VAR, str(path))

    settings = load_settings()

    assert settings.lockfile_name == "npm-shrinkwrap.json"
    assert settings.include_workspace_root is False


@pytest.mark.parametrize(
    "data, message",
    [
        ({"packagesDir": ""}, "packagesDir"),
        ({"lockfileName": "sub/package-lock.json"}, "lockfileName"),
        ({"validate": "yes"}, "validate"),
        ({"logLevel": "LOUD"}, "logLevel"),
    ],
)
def test_invalid_values(tmp_path, data, message):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_settings(path)


def test_invalid_documents(tmp_path):
    bad_json = tmp_path / "settings.json"
    bad_json.write_text("{", encoding="utf-8")
    not_object = tmp_path / "settings.yml"
    not_object.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(bad_json)
    with pytest.raises(ConfigError, match="must be an object"):
        load_settings(not_object)
