from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


def color_enabled() -> bool:
    if os.getenv("NO_COLOR"):
        return False
    return os.getenv("CANDIDATE_GUARD_COLOR", "1") == "1"


def make_console(*, stderr: bool = False) -> Console:
    # Workflow text is printed verbatim: no markup, no emoji codes, no re-wrapping.
    return Console(
        stderr=stderr,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        no_color=not color_enabled(),
    )


console = make_console()
err_console = make_console(stderr=True)


def plain(out: Console, message: str, style: str | None = None) -> None:
    out.print(Text(message, style=style or ""))


def verbatim(out: Console, message: str) -> None:
    """Write ``message`` untouched: tabs, trailing spaces and control characters survive."""
    out.file.write(f"{message}\n")
    out.file.flush()


def banner(out: Console, message: str, *, ok: bool) -> None:
    plain(out, message, style="bold green" if ok else "bold red")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
        force=True,
    )
