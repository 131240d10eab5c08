"""candidate-guard CLI."""

from pathlib import Path

import typer

from candidate_guard import __version__
from candidate_guard.checker import run_check
from candidate_guard.collector import WorkflowScanError
from candidate_guard.config import GuardConfig
from candidate_guard.patterns import DEFAULT_ALLOWLIST, DEFAULT_PATTERNS
from candidate_guard.report import write_json_report
from candidate_guard.ui import configure_logging, console, err_console, plain

cli = typer.Typer(
    name="candidate-guard",
    help="Fail when main-branch workflows reference the candidate branch.",
    no_args_is_help=True,
)


def _version_option_callback(value: bool) -> None:
    """Handle eager --version option."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@cli.callback()
def _cli_callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show candidate-guard version and exit.",
        is_eager=True,
        callback=_version_option_callback,
    ),
) -> None:
    """Release-hygiene checks for GitHub workflow files."""
    _ = version


@cli.command("check")
def check_cmd(
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Repository root containing .github/workflows (default: current directory)",
    ),
    ci: bool = typer.Option(
        False,
        "--ci",
        help="Force CI mode (default: GITHUB_ACTIONS == 'true')",
    ),
    summary_file: Path | None = typer.Option(
        None,
        "--summary-file",
        help="Step summary file to append to in CI mode (default: $GITHUB_STEP_SUMMARY)",
    ),
    json_out: Path | None = typer.Option(
        None,
        "--json-out",
        help="Write a machine-readable JSON report to this path",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Emit debug logging on stderr",
    ),
) -> None:
    """Check workflow files for candidate-branch references.

    Exit codes:
      0 - No references found (or no workflow directory)
      1 - References found, or workflows could not be read
    """
    configure_logging(verbose)
    config = GuardConfig.from_env(repo, ci=True if ci else None, summary_path=summary_file)

    try:
        report = run_check(config, console=console)
    except WorkflowScanError as exc:
        plain(err_console, f"ERROR: {exc}", style="bold red")
        raise typer.Exit(1) from exc

    if json_out is not None:
        write_json_report(json_out, report, config.patterns)

    raise typer.Exit(report.exit_code)


@cli.command("rules")
def rules_cmd() -> None:
    """List the disallowed reference rules and allowlisted workflow names."""
    plain(console, "Disallowed references:", style="bold")
    for rule in DEFAULT_PATTERNS:
        plain(console, f"  {rule.id}: {rule.description}")
        plain(console, f"      e.g. {rule.example}")
    plain(console, "Always skipped:", style="bold")
    for name in sorted(DEFAULT_ALLOWLIST):
        plain(console, f"  {name}")


def main() -> None:
    cli()


if __name__ == "__main__":

    main()
