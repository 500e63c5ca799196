"""Read the committed version of a file, falling back to the working tree."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def read_file_from_head(path: Path) -> str | None:
    """Return the content of ``path`` at git HEAD, or None if unavailable.

    None covers every "not in git" case: no repository, file not committed,
    or git not installed.
    """
    try:
        proc = subprocess.run(
            ["git", "show", f"HEAD:./{path.name}"],
            cwd=path.parent,
            capture_output=True,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("git executable not found, reading %s from the working tree", path)
        return None

    if proc.returncode != 0:
        return None
    return proc.stdout.decode("utf-8")


def read_file_from_head_or_now(path: Path, use_head: bool = True) -> str | None:
    if use_head:
        content = read_file_from_head(path)
        if content is not None:
            return content

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
