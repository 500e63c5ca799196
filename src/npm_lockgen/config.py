"""Configuration loader for lockfile generation.

Reads settings from a JSON file (default: settings.json at the repository
root) or, when the file name ends in ``.yaml``/``.yml``, from YAML. Every key is
optional; missing keys take the defaults below. This module performs its own
lightweight validation rather than invoking a full JSON Schema validator.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "settings.json"
CONFIG_PATH_ENV_VAR = "NPM_LOCKGEN_CONFIG"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    packages_dir: str = "packages"
    lockfile_name: str = "package-lock.json"
    include_workspace_root: bool = True
    read_prior_from_git_head: bool = True
    validate: bool = True
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating every known field."""
        defaults = cls()

        packages_dir = data.get("packagesDir", defaults.packages_dir)
        if not isinstance(packages_dir, str) or not packages_dir:
            raise ConfigError("'packagesDir' must be a non-empty string")

        lockfile_name = data.get("lockfileName", defaults.lockfile_name)
        if not isinstance(lockfile_name, str) or not lockfile_name:
            raise ConfigError("'lockfileName' must be a non-empty string")
        if "/" in lockfile_name or "\\" in lockfile_name:
            raise ConfigError("'lockfileName' must be a file name, not a path")

        flags: dict[str, bool] = {}
        for key, attr in (
            ("includeWorkspaceRoot", "include_workspace_root"),
            ("readPriorFromGitHead", "read_prior_from_git_head"),
            ("validate", "validate"),
        ):
            value = data.get(key, getattr(defaults, attr))
            if not isinstance(value, bool):
                raise ConfigError(f"'{key}' must be a boolean")
            flags[attr] = value

        log_level = data.get("logLevel", defaults.log_level)
        if not isinstance(log_level, str) or log_level.upper() not in _LOG_LEVELS:
            known = ", ".join(sorted(_LOG_LEVELS))
            raise ConfigError(f"'logLevel' must be one of: {known}")

        return cls(
            packages_dir=packages_dir,
            lockfile_name=lockfile_name,
            log_level=log_level.upper(),
            **flags,
        )


def _resolve_config_path(path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the configuration file path and whether it was asked for.

    Priority:
    1. Explicit path argument
    2. NPM_LOCKGEN_CONFIG environment variable
    3. Default path (settings.json in repo root)
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return DEFAULT_CONFIG_PATH, False


def _parse(config_path: Path, content: str) -> Any:
    if config_path.suffix in {".yaml", ".yml"}:
        import yaml

        try:
            return yaml.safe_load(content) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to the config file. If not provided, uses the
            NPM_LOCKGEN_CONFIG env var or falls back to settings.json.

    Returns:
        A Settings object. Defaults are returned when the default file is absent.

    Raises:
        ConfigError: If a requested file is missing, unreadable or invalid.
    """
    config_path, explicit = _resolve_config_path(path)

    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return Settings()

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    data = _parse(config_path, content)
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be an object")

    return Settings.from_dict(data)
