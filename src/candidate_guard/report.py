"""Deterministic JSON report for candidate-guard runs."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from candidate_guard.patterns import DEFAULT_PATTERNS, PatternSet

if TYPE_CHECKING:
    from pathlib import Path

    from candidate_guard.types import CheckReport

REPORT_SCHEMA_VERSION = "1.0"


def report_to_dict(report: CheckReport, patterns: PatternSet = DEFAULT_PATTERNS) -> dict[str, Any]:
    """Convert a run report into a JSON-compatible dict."""
    return {
        "schema_version": REPORT_SCHEMA_VERSION,
        "status": report.status,
        "exit_code": report.exit_code,
        "workflow_root": str(report.workflow_root),
        "checked_files": [str(p) for p in report.checked_files],
        "skipped_files": [str(p) for p in report.skipped_files],
        "violations": [
            {
                "file": str(v.file),
                "lines": [
                    {
                        "line": m.line_number,
                        "text": m.text,
                        "rules": patterns.matching_rules(m.text),
                    }
                    for m in v.matches
                ],
            }
            for v in report.violations
        ],
        "rules": [rule.id for rule in patterns],
    }


def dumps_report(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def write_json_report(path: Path, report: CheckReport, patterns: PatternSet = DEFAULT_PATTERNS) -> None:
    """Write the JSON report as UTF-8, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_report(report_to_dict(report, patterns)), encoding="utf-8")
