"""Command line entrypoint for regenerating workspace lockfiles."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import update_locks
from .report import aggregate
from .summary import render_summary

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Regenerate package-lock.json files from installed node_modules trees."
    )
    parser.add_argument(
        "packages_dir",
        nargs="?",
        type=Path,
        default=None,
        help="Directory holding one subdirectory per package (default: from settings)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to settings file")
    parser.add_argument("--summary", type=Path, default=None, help="Write a Markdown summary")
    parser.add_argument("--report", type=Path, default=None, help="Write a JSON run report")
    parser.add_argument(
        "--no-git",
        action="store_true",
        help="Read the prior lockfile from the working tree instead of git HEAD",
    )
    parser.add_argument(
        "--no-validate", action="store_true", help="Skip schema validation before writing"
    )
    parser.add_argument(
        "--no-workspace-root",
        action="store_true",
        help="Do not generate a lockfile for the parent of the packages directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    overrides: dict[str, object] = {}
    if args.no_git:
        overrides["read_prior_from_git_head"] = False
    if args.no_validate:
        overrides["validate"] = False
    if args.no_workspace_root:
        overrides["include_workspace_root"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    settings = dataclasses.replace(settings, **overrides)

    logging.basicConfig(level=settings.log_level_value, format="%(levelname)s %(message)s")

    packages_dir = args.packages_dir or Path(settings.packages_dir)
    packages_dir = packages_dir.resolve()
    if not packages_dir.is_dir():
        logger.error("Packages directory %s does not exist", packages_dir)
        return 1

    report = aggregate(update_locks(packages_dir, settings))

    if args.report:
        args.report.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")
    if args.summary:
        args.summary.write_text(render_summary(report), encoding="utf-8")

    return 1 if report["hasFailures"] else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
