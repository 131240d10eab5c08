"""Tests for console and logging setup."""

from __future__ import annotations

import logging

import pytest

from candidate_guard.ui import color_enabled, configure_logging, make_console


@pytest.fixture(autouse=True)
def _clear_color_env(monkeypatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("CANDIDATE_GUARD_COLOR", raising=False)


def test_color_enabled_by_default() -> None:
    assert color_enabled() is True
    assert make_console().no_color is False


def test_no_color_disables_color(monkeypatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert color_enabled() is False
    assert make_console().no_color is True


def test_empty_no_color_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert color_enabled() is True


def test_candidate_guard_color_toggle(monkeypatch) -> None:
    monkeypatch.setenv("CANDIDATE_GUARD_COLOR", "0")
    assert color_enabled() is False
    assert make_console(stderr=True).no_color is True

    monkeypatch.setenv("CANDIDATE_GUARD_COLOR", "1")
    assert color_enabled() is True


def test_verbose_logging_goes_to_stderr(capsys) -> None:
    configure_logging(True)
    logging.getLogger("candidate_guard.collector").debug("walking workflows")

    captured = capsys.readouterr()
    assert "walking workflows" in captured.err
    assert "walking workflows" not in captured.out


def test_quiet_logging_drops_debug(capsys) -> None:
    configure_logging(False)
    logging.getLogger("candidate_guard.collector").debug("walking workflows")

    captured = capsys.readouterr()
    assert "walking workflows" not in captured.err
