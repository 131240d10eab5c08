"""Run configuration for candidate-guard.

Environment lookups happen once, here, so the checker itself never reads
``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from candidate_guard.patterns import DEFAULT_ALLOWLIST, DEFAULT_PATTERNS, PatternSet

WORKFLOW_DIR = Path(".github") / "workflows"

CI_ENV_VAR = "GITHUB_ACTIONS"
SUMMARY_ENV_VAR = "GITHUB_STEP_SUMMARY"


@dataclass(frozen=True)
class GuardConfig:
    """Immutable inputs for a single validation run."""

    workflow_root: Path = WORKFLOW_DIR
    allowlist: frozenset[str] = DEFAULT_ALLOWLIST
    patterns: PatternSet = field(default=DEFAULT_PATTERNS)
    ci: bool = False
    summary_path: Path | None = None

    @property
    def summary_target(self) -> Path | None:
        """Summary destination, or None when no summary should be written."""
        if not self.ci:
            return None
        return self.summary_path

    @classmethod
    def from_env(
        cls,
        repo_root: Path | None = None,
        environ: Mapping[str, str] | None = None,
        *,
        ci: bool | None = None,
        summary_path: Path | None = None,
    ) -> GuardConfig:
        """Build a config from the process environment.

        Args:
            repo_root: Repository root; workflows live in ``.github/workflows``
                below it (default: relative to the current directory)
            environ: Environment mapping (default: ``os.environ``)
            ci: Explicit CI flag, overriding ``GITHUB_ACTIONS``
            summary_path: Explicit summary file, overriding ``GITHUB_STEP_SUMMARY``
        """
        env = os.environ if environ is None else environ

        if ci is None:
            ci = env.get(CI_ENV_VAR) == "true"

        if summary_path is None:
            raw = env.get(SUMMARY_ENV_VAR, "")
            summary_path = Path(raw) if raw else None

        workflow_root = WORKFLOW_DIR if repo_root is None else repo_root / WORKFLOW_DIR
        return cls(workflow_root=workflow_root, ci=ci, summary_path=summary_path)
