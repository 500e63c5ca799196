"""Run report aggregation."""

from __future__ import annotations

from typing import Any


def aggregate(projects: list[dict[str, Any]]) -> dict[str, Any]:
    """Aggregate per-directory results into a single report.

    The input ``projects`` is expected to be a list of dicts with at least
    ``path`` and ``status`` keys, as returned by ``core.update_locks``.
    """

    statuses = [p.get("status") for p in projects]
    failed = statuses.count("failed")

    report: dict[str, Any] = {
        "version": "1",
        "hasFailures": failed > 0,
        "projects": projects,
        "totals": {
            "projects": len(projects),
            "generated": statuses.count("generated"),
            "skipped": statuses.count("skipped"),
            "failed": failed,
        },
    }

    return report
