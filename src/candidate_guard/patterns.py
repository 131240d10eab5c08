"""Fixed candidate-branch reference rules and the per-line matcher."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from candidate_guard.types import LineMatch

CANDIDATE_BRANCH = "candidate"
ACTION_ORG_PREFIX = "j708-zp9u"


@dataclass(frozen=True)
class PatternRule:
    """One disallowed reference shape."""

    id: str
    description: str
    example: str
    regex: re.Pattern[str]

    def matches(self, line: str) -> bool:
        return self.regex.search(line) is not None


@dataclass(frozen=True)
class PatternSet:
    """Immutable collection of rules tested against every line."""

    rules: tuple[PatternRule, ...]

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def matches(self, line: str) -> bool:
        return any(rule.matches(line) for rule in self.rules)

    def matching_rules(self, line: str) -> list[str]:
        return [rule.id for rule in self.rules if rule.matches(line)]


DEFAULT_PATTERNS = PatternSet(
    rules=(
        PatternRule(
            id="sdlc-branch-env",
            description=f"`SDLC_BRANCH` environment variable set to `{CANDIDATE_BRANCH}`",
            example=f"SDLC_BRANCH: {CANDIDATE_BRANCH}",
            regex=re.compile(rf"SDLC_BRANCH\s*:\s*{CANDIDATE_BRANCH}"),
        ),
        PatternRule(
            id="branches-trigger",
            description=f"`branches:` trigger list naming `{CANDIDATE_BRANCH}`",
            example=f"branches: [main, {CANDIDATE_BRANCH}]",
            regex=re.compile(rf"branches:.*{CANDIDATE_BRANCH}"),
        ),
        PatternRule(
            id="sequence-item",
            description=f"YAML list item naming `{CANDIDATE_BRANCH}`",
            example=f"- {CANDIDATE_BRANCH}",
            regex=re.compile(rf"-\s*{CANDIDATE_BRANCH}"),
        ),
        PatternRule(
            id="action-pin",
            description=f"`{ACTION_ORG_PREFIX}/*` action pinned to `@{CANDIDATE_BRANCH}`",
            example=f"uses: {ACTION_ORG_PREFIX}/shared-actions/setup@{CANDIDATE_BRANCH}",
            regex=re.compile(rf"uses:\s*{re.escape(ACTION_ORG_PREFIX)}/\S+@{CANDIDATE_BRANCH}"),
        ),
    )
)

DEFAULT_ALLOWLIST: frozenset[str] = frozenset({"pr-validation.yml", "pr-validation.yaml"})


def is_allowlisted(name: str, allowlist: Iterable[str] = DEFAULT_ALLOWLIST) -> bool:
    """Exact, case-sensitive basename comparison."""
    return name in frozenset(allowlist)


def find_candidate_references(content: str, patterns: PatternSet = DEFAULT_PATTERNS) -> list[LineMatch]:
    """Return every line of ``content`` matching a disallowed rule.

    Lines are split on ``\\n`` only, so a trailing ``\\r`` stays part of the
    reported text. Each line is tested on its own; list items continued on
    following lines under a ``branches:`` key are not seen.
    """
    matches: list[LineMatch] = []
    for index, line in enumerate(content.split("\n"), start=1):
        if patterns.matches(line):
            matches.append(LineMatch(line_number=index, text=line))
    return matches
