"""Markdown run summary for CI step-summary files."""

from __future__ import annotations

from pathlib import Path

from candidate_guard.collector import WorkflowScanError
from candidate_guard.patterns import CANDIDATE_BRANCH, DEFAULT_PATTERNS, PatternSet
from candidate_guard.types import CheckReport


def render_summary(report: CheckReport, patterns: PatternSet = DEFAULT_PATTERNS) -> str:
    """Render the Markdown block appended to the step summary."""
    lines: list[str] = []

    if report.violations:
        lines.append("## ❌ Candidate Branch Check Failed")
        lines.append("")
        lines.append(
            f"Workflow files targeting the `main` branch must not reference the `{CANDIDATE_BRANCH}` branch. "
            f"Found references in {len(report.violations)} file(s):"
        )
        lines.append("")
        for violation in report.violations:
            lines.append(f"### `{violation.file}`")
            lines.append("")
            lines.append("```yaml")
            for match in violation.matches:
                lines.append(f"Line {match.line_number}: {match.text}")
            lines.append("```")
            lines.append("")
        lines.append("### Disallowed patterns")
        lines.append("")
        for rule in patterns:
            lines.append(f"- {rule.description} (e.g. `{rule.example}`)")
    else:
        lines.append("## ✅ Candidate Branch Check Passed")
        lines.append("")
        lines.append(
            f"No `{CANDIDATE_BRANCH}` branch references found in {len(report.checked_files)} workflow file(s)."
        )

    return "\n".join(lines) + "\n"


def append_summary(path: Path, text: str) -> None:
    """Append ``text`` to the summary file, creating it if needed."""
    try:
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as exc:
        raise WorkflowScanError(f"Failed to write step summary {path}: {exc}", path=path) from exc
