"""Tests for GuardConfig environment handling."""

from __future__ import annotations

from pathlib import Path

from candidate_guard.config import WORKFLOW_DIR, GuardConfig


def test_defaults_outside_ci() -> None:
    config = GuardConfig.from_env(environ={})
    assert config.workflow_root == WORKFLOW_DIR
    assert config.ci is False
    assert config.summary_path is None
    assert config.summary_target is None


def test_ci_requires_exact_true() -> None:
    assert GuardConfig.from_env(environ={"GITHUB_ACTIONS": "true"}).ci is True
    assert GuardConfig.from_env(environ={"GITHUB_ACTIONS": "TRUE"}).ci is False
    assert GuardConfig.from_env(environ={"GITHUB_ACTIONS": "1"}).ci is False


def test_summary_target_only_in_ci(tmp_path: Path) -> None:
    summary = tmp_path / "step.md"
    env = {"GITHUB_STEP_SUMMARY": str(summary)}

    assert GuardConfig.from_env(environ=env).summary_target is None
    assert GuardConfig.from_env(environ={**env, "GITHUB_ACTIONS": "true"}).summary_target == summary


def test_empty_summary_variable_is_unset() -> None:
    config = GuardConfig.from_env(environ={"GITHUB_ACTIONS": "true", "GITHUB_STEP_SUMMARY": ""})
    assert config.summary_target is None


def test_explicit_overrides_win(tmp_path: Path) -> None:
    config = GuardConfig.from_env(
        tmp_path,
        environ={"GITHUB_STEP_SUMMARY": "/ignored"},
        ci=True,
        summary_path=tmp_path / "s.md",
    )
    assert config.workflow_root == tmp_path / ".github" / "workflows"
    assert config.summary_target == tmp_path / "s.md"


def test_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    monkeypatch.delenv("GITHUB_STEP_SUMMARY", raising=False)
    config = GuardConfig.from_env()
    assert config.ci is True
    assert config.summary_path is None
