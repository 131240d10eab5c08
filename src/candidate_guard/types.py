"""Types for candidate-guard workflow checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

CheckStatus = Literal["passed", "failed", "no_workflows"]


@dataclass(frozen=True)
class LineMatch:
    """Single workflow line that references the candidate branch."""

    line_number: int  # 1-based
    text: str

    def render(self) -> str:
        return f"{self.line_number}:{self.text}"


@dataclass(frozen=True)
class Violation:
    """All offending lines found in one workflow file."""

    file: Path
    matches: list[LineMatch]


@dataclass
class CheckReport:
    """Outcome of one workflow validation run."""

    workflow_root: Path
    status: CheckStatus = "passed"
    checked_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    violations: list[Violation] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 1 if self.status == "failed" else 0

    @property
    def clean_count(self) -> int:
        """Number of scanned files without any violation."""
        return len(self.checked_files) - len(self.violations)
