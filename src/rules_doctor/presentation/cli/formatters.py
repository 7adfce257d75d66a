"""Rich formatting utilities for the CLI.

Holds all Rich rendering (tables, panels) so the command module knows
nothing about layout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from rules_doctor.infrastructure.renderers.markdown_renderer import file_url, repository_url

if TYPE_CHECKING:
    from rules_doctor.config.models import RulesDoctorConfig
    from rules_doctor.domain.models.report import GroupedReport, ProcessedFailure

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "Rules Doctor") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# Config summary
# ---------------------------------------------------------------------------


def config_summary(config: RulesDoctorConfig, source: str) -> None:
    """Print a short summary of a valid configuration."""
    dynamic = config.dynamic_repositories
    discovery = (
        f"{dynamic.organization} / topic {dynamic.topic}" if config.uses_discovery and dynamic else "off"
    )
    disabled = len(config.checks) - len(config.enabled_checks)
    success_panel(
        f"✅ Configuration valid: [cyan]{escape(source)}[/]\n\n"
        f"  Checks: [cyan]{len(config.checks)}[/] ({disabled} disabled)\n"
        f"  Static repositories: [cyan]{len(config.static_repositories)}[/]\n"
        f"  Discovery: [cyan]{escape(discovery)}[/]",
        title="✅ Validation",
    )


# ---------------------------------------------------------------------------
# Results report
# ---------------------------------------------------------------------------


def _status_text(processed: ProcessedFailure) -> str:
    text = f"{processed.status.emoji} {escape(processed.status.message)}"
    for req in processed.failed_requires:
        reason = f" ({escape(req.reason)})" if req.reason else ""
        text += f"\n[yellow]⚠️  Fix first: {escape(req.check)}{reason}[/]"
    return text


def results_report(report: GroupedReport) -> None:
    """Print one table per failing check plus a summary panel."""
    if report.all_passed:
        success_panel(f"✅ All checks passed! ({report.passed_count} result(s))")
        return

    console.print(f"\n[bold red]❌ Found {report.failed_count} failed check(s):[/]\n")

    for check_name, _repo_map in report.iter_checks():
        table = Table(title=f"🔍 Check: {escape(check_name)}", show_header=True, border_style="blue")
        table.add_column("Repository", style="cyan")
        table.add_column("File")
        table.add_column("Status")

        for repository, failures in report.iter_repositories(check_name):
            for processed in failures:
                file_path = processed.failure.file_path
                table.add_row(
                    f"[link={repository_url(repository)}]{escape(repository)}[/link]",
                    f"[link={file_url(repository, file_path)}]{escape(file_path)}[/link]",
                    _status_text(processed),
                )

        console.print(table)

    console.print(
        Panel(
            f"  ✅ Passed: {report.passed_count}  |  ❌ Failed: {report.failed_count}",
            title="📊 Summary",
            border_style="red",
        )
    )
