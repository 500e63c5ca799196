from __future__ import annotations

from npm_lockgen.report import aggregate
from npm_lockgen.summary import render_summary


def test_aggregate_totals():
    report = aggregate(
        [
            {"path": "packages/a", "status": "generated", "packages": 3, "dev": 1, "optional": 0},
            {"path": "packages/b", "status": "skipped"},
            {"path": "packages/c", "status": "failed", "error": "boom"},
        ]
    )

    assert report["hasFailures"] is True
    assert report["totals"] == {"projects": 3, "generated": 1, "skipped": 1, "failed": 1}


def test_render_summary_rows():
    report = aggregate(
        [
            {"path": "packages/a", "status": "generated", "packages": 3, "dev": 1, "optional": 2},
            {"path": "packages/c", "status": "failed", "error": "line one\nline two"},
        ]
    )

    text = render_summary(report)

    assert "Generated: 1 | Skipped: 0 | Failed: 1" in text
    assert "| packages/a | generated | 3 | 1 | 2 |" in text
    assert "| packages/c | failed: line one line two | n/a | n/a | n/a |" in text


def test_render_summary_without_projects():
    text = render_summary(aggregate([]))

    assert "(no projects found)" in text
