"""Persist generated lockfiles next to their package.json."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from .config import Settings
from .git import read_file_from_head_or_now
from .merge import transform_into
from .validators.lockfile import validate_lockfile

logger = logging.getLogger(__name__)


def load_prior_lockfile(location: Path, use_git_head: bool = True) -> dict[str, Any]:
    """Return the previously committed lockfile document, or {} if there is none.

    Unparsable content is treated as no prior lockfile.
    """
    try:
        contents = read_file_from_head_or_now(location, use_head=use_git_head)
        if not contents:
            return {}
        original = json.loads(contents)
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Ignoring unparsable prior lockfile %s", location)
        return {}

    return original if isinstance(original, dict) else {}


def save_lockfile(directory: Path, lockfile: dict[str, Any], settings: Settings) -> Path:
    """Validate ``lockfile``, merge it into the prior one and write it.

    Returns the path written.
    """
    if settings.validate:
        validate_lockfile(lockfile)

    location = Path(directory) / settings.lockfile_name
    original = load_prior_lockfile(location, use_git_head=settings.read_prior_from_git_head)
    document = transform_into(original, lockfile)

    _write_atomic(location, json.dumps(document, indent=2) + "\n")
    logger.debug("Wrote %s", location)
    return location


def _write_atomic(location: Path, text: str) -> None:
    """Replace ``location`` with ``text``; the old file survives a failed write."""
    mode = location.stat().st_mode & 0o777 if location.exists() else 0o644
    fd, tmp_name = tempfile.mkstemp(prefix=f".{location.name}.", dir=location.parent)
    try:
        os.chmod(tmp_name, mode)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp_name, location)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
