"""Candidate-branch workflow check.

Walks the workflow directory, matches each non-allowlisted file against the
fixed rule set, and reports one of three outcomes:

1. No workflow directory: nothing to validate, exit 0
2. Violations found: failure banner, exit 1
3. No violations: success banner, exit 0
"""

from __future__ import annotations

import logging

from rich.console import Console

from candidate_guard.collector import find_workflow_files, read_workflow
from candidate_guard.config import GuardConfig
from candidate_guard.patterns import CANDIDATE_BRANCH, find_candidate_references, is_allowlisted
from candidate_guard.summary import append_summary, render_summary
from candidate_guard.types import CheckReport, Violation
from candidate_guard.ui import banner, console as default_console, plain, verbatim

logger = logging.getLogger(__name__)

FAILED_BANNER = (
    f"❌ VALIDATION FAILED: Workflow files targeting the 'main' branch must not contain "
    f"'{CANDIDATE_BRANCH}' branch references"
)
PASSED_BANNER = (
    f"✅ VALIDATION PASSED: No '{CANDIDATE_BRANCH}' branch references found in main branch workflow files"
)
NO_WORKFLOWS_MESSAGE = "No workflow directory found; skipping validation."


def run_check(config: GuardConfig, console: Console | None = None) -> CheckReport:
    """Run the candidate-branch check described by ``config``.

    Args:
        config: Workflow root, allowlist, rules and summary target
        console: Console for progress output (default: stdout console)

    Returns:
        CheckReport; ``report.exit_code`` is the process exit status

    Raises:
        WorkflowScanError: If the tree, a workflow file or the summary file
            cannot be read or written
    """
    out = console or default_console
    report = CheckReport(workflow_root=config.workflow_root)

    plain(out, "Checking workflow files that target the 'main' branch...\n")

    if not config.workflow_root.exists():
        plain(out, NO_WORKFLOWS_MESSAGE)
        report.status = "no_workflows"
        return report

    workflow_files = find_workflow_files(config.workflow_root)
    logger.debug("Found %d workflow file(s) under %s", len(workflow_files), config.workflow_root)

    for path in workflow_files:
        if is_allowlisted(path.name, config.allowlist):
            plain(out, f"Skipping: {path}")
            report.skipped_files.append(path)
            continue

        plain(out, f"Checking: {path}")
        report.checked_files.append(path)

        matches = find_candidate_references(read_workflow(path), config.patterns)
        if matches:
            plain(
                out,
                f"ERROR: Found '{CANDIDATE_BRANCH}' reference in {path} (which targets the main branch)",
                style="red",
            )
            for match in matches:
                verbatim(out, f"{path}:{match.render()}")
            report.violations.append(Violation(file=path, matches=matches))
        else:
            plain(out, f"  -> No '{CANDIDATE_BRANCH}' reference found")

    plain(out, "")
    plain(
        out,
        f"Checked {len(report.checked_files)} workflow file(s), skipped {len(report.skipped_files)}",
    )

    if report.violations:
        report.status = "failed"
        banner(out, FAILED_BANNER, ok=False)
    else:
        report.status = "passed"
        banner(out, PASSED_BANNER, ok=True)

    target = config.summary_target
    if target is not None:
        append_summary(target, render_summary(report, config.patterns))
        logger.debug("Appended step summary to %s", target)
    elif config.ci:
        logger.debug("Running in CI but no step summary file configured; skipping summary")

    return report
