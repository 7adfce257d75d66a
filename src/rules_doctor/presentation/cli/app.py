"""Thin CLI wrapper — Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.logging import RichHandler

from rules_doctor.domain.errors import RulesDoctorError
from rules_doctor.presentation.cli.formatters import (
    config_summary,
    console,
    error_message,
    results_report,
)

DEFAULT_REPORT = "report.md"

app = typer.Typer(
    name="rules-doctor",
    help="🩺 Audit repositories for compliance with declarative file checks.",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Rules Doctor — keep a fleet of repositories consistent."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# ---------------------------------------------------------------------------
# rules-doctor run
# ---------------------------------------------------------------------------


@app.command()
def run(
    check_name: Annotated[
        Optional[str], typer.Argument(help="Run only the check with this name")
    ] = None,
    config: Annotated[
        str, typer.Option("--config", "-c", help="Path to the JSON configuration")
    ] = "config.json",
    report: Annotated[
        str, typer.Option("--report", "-r", help="Markdown report destination")
    ] = DEFAULT_REPORT,
) -> None:
    """Run the configured checks and write a markdown report.

    Exits with status 1 if any check failed.
    """
    from rules_doctor.bootstrap import Container

    container = Container(config_path=config)

    try:
        logger.info("Loading configuration from: %s", config)
        cfg = container.config
        checks = container.select_checks().execute(cfg, check_name)
        repositories = container.collect_repositories().execute(cfg)
    except RulesDoctorError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    if check_name:
        logger.info("Running only check: %s", check_name)
    else:
        logger.info("Found %d repositories and %d checks", len(repositories), len(checks))

    results = container.run_checks().execute(repositories, checks)
    grouped = container.aggregate_results().execute(results)

    results_report(grouped)

    try:
        output_path = container.renderer.write(grouped, Path(report))
    except OSError as e:
        error_message(f"Could not write report to {report}: {e}")
        raise typer.Exit(code=1)

    console.print(f"\n📄 Report written to [bold]{output_path}[/]")

    if not grouped.all_passed:
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# rules-doctor validate
# ---------------------------------------------------------------------------


@app.command()
def validate(
    config_file: Annotated[
        str, typer.Argument(help="Path to the JSON configuration to validate")
    ] = "config.json",
) -> None:
    """Validate a configuration file without fetching anything."""
    from rules_doctor.config import load_config

    try:
        cfg = load_config(Path(config_file))
    except RulesDoctorError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    config_summary(cfg, config_file)


if __name__ == "__main__":
    app()
