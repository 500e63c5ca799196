"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and one table row per directory."""
    totals = report.get("totals", {})
    projects = report.get("projects", [])

    lines = []
    lines.append("# npm-lockgen Summary")
    lines.append("")
    lines.append(
        f"Generated: {totals.get('generated', 0)} | Skipped: {totals.get('skipped', 0)}"
        f" | Failed: {totals.get('failed', 0)}"
    )
    lines.append("")
    lines.append("| Project | Status | Packages | Dev | Optional |")
    lines.append("| --- | --- | --- | --- | --- |")

    for proj in projects:
        path = proj.get("path") or "(unknown project)"
        status = proj.get("status", "")
        if status == "generated":
            lines.append(
                f"| {path} | {status} | {proj.get('packages', 0)} | {proj.get('dev', 0)}"
                f" | {proj.get('optional', 0)} |"
            )
        elif status == "failed":
            error = _one_line(proj.get("error"))
            lines.append(f"| {path} | failed: {error} | n/a | n/a | n/a |")
        else:
            lines.append(f"| {path} | {status} | n/a | n/a | n/a |")

    if not projects:
        lines.append("| (no projects found) | n/a | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"


def _one_line(error: str | None) -> str:
    if not error:
        return "unknown error"
    return " ".join(error.split())
