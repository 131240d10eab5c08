"""Shared fixtures for candidate-guard tests."""

import logging

import pytest
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo ``configure_logging`` so a --verbose test does not leak into the next one."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    root.setLevel(level)
