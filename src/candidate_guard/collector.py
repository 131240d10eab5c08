"""Workflow file discovery and reading.

Traversal is fail-closed: a directory that cannot be listed, a broken
symlink, or a workflow that cannot be read or decoded aborts the run with
``WorkflowScanError`` instead of being skipped.

Symlinked directories that point back inside the root are not descended:
their files are reported under their real path. Symlinks leading outside
the root are followed, and each real directory is walked at most once.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path

logger = logging.getLogger(__name__)

WORKFLOW_SUFFIXES = (".yml", ".yaml")


class WorkflowScanError(RuntimeError):
    """Raised when the workflow tree or a workflow file cannot be read."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


def is_workflow_name(name: str) -> bool:
    return name.endswith(WORKFLOW_SUFFIXES)


def find_workflow_files(root: Path) -> list[Path]:
    """Recursively collect ``.yml``/``.yaml`` files under ``root``.

    Args:
        root: Workflow directory to walk

    Returns:
        Workflow file paths (entries sorted by name within each directory),
        or an empty list if ``root`` does not exist

    Raises:
        WorkflowScanError: If a directory cannot be listed or an entry
            cannot be stat'ed (broken symlink, permission denied)
    """
    if not root.exists():
        return []

    files: list[Path] = []
    _walk(root, files, visited=set(), root_real=_resolve(root))
    return files


def _resolve(directory: Path) -> Path:
    try:
        return directory.resolve(strict=True)
    except OSError as exc:
        raise WorkflowScanError(f"Failed to resolve workflow directory {directory}: {exc}", path=directory) from exc


def _walk(directory: Path, files: list[Path], visited: set[Path], root_real: Path) -> None:
    real = _resolve(directory)

    if real in visited:
        logger.debug("Already visited %s (via %s); not descending again", real, directory)
        return
    visited.add(real)

    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise WorkflowScanError(f"Failed to list workflow directory {directory}: {exc}", path=directory) from exc

    for entry in entries:
        try:
            mode = entry.stat().st_mode
        except OSError as exc:
            raise WorkflowScanError(f"Failed to stat {entry}: {exc}", path=entry) from exc

        if stat.S_ISDIR(mode):
            if entry.is_symlink() and _resolve(entry).is_relative_to(root_real):
                logger.debug("Not following %s; its target is walked under the root directly", entry)
                continue
            _walk(entry, files, visited, root_real)
        elif stat.S_ISREG(mode) and is_workflow_name(entry.name):
            files.append(entry)
        else:
            logger.debug("Ignoring non-workflow entry %s", entry)


def read_workflow(path: Path) -> str:
    """Read a workflow as UTF-8 text, keeping line endings untouched."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as exc:
        raise WorkflowScanError(f"Workflow file {path} is not valid UTF-8: {exc}", path=path) from exc
    except OSError as exc:
        raise WorkflowScanError(f"Failed to read workflow file {path}: {exc}", path=path) from exc
