#!/usr/bin/env python3
"""Local CLI entrypoint to regenerate lockfiles outside of an installed package.

Usage:
  python scripts/update_locks.py [packages_dir] [--config settings.json] [-v]

This calls the same core update_locks used by the ``npm-lockgen`` console script.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from npm_lockgen.cli import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
