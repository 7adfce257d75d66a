"""Markdown renderer — implements ReportRendererPort.

Produces the ``report.md`` document: a summary followed by one table per
failing check, with links to the repository and the inspected file.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from rules_doctor.domain.models.report import GroupedReport, ProcessedFailure
from rules_doctor.domain.ports.report_renderer import ReportRendererPort

GITHUB_URL = "https://github.com"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def repository_url(repository: str) -> str:
    return f"{GITHUB_URL}/{repository}"


def file_url(repository: str, file_path: str) -> str:
    return f"{GITHUB_URL}/{repository}/blob/main/{file_path}"


class MarkdownRenderer(ReportRendererPort):
    """Render a :class:`GroupedReport` as a markdown document."""

    TITLE = "# Rules Doctor Report"

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    def render(self, report: GroupedReport) -> str:
        lines = [self.TITLE, "", f"Generated: {self._clock().isoformat()}", ""]

        if report.all_passed:
            lines.append("## ✅ All checks passed!")
            return "\n".join(lines)

        lines += [
            "## Summary",
            "",
            f"- ❌ **Failed checks:** {report.failed_count}",
            f"- ✅ **Passed checks:** {report.passed_count}",
            "",
            "## Failed Checks",
            "",
        ]

        for check_name, _repo_map in report.iter_checks():
            reference = report.reference_example(check_name)
            reference_link = f"[Example]({reference})" if reference else ""

            lines.append(f"### 🔍 {check_name}")
            lines.append("")
            lines.append("| Repository | File | Status | Reference |")
            lines.append("|------------|------|--------|-----------|")

            for repository, failures in report.iter_repositories(check_name):
                for processed in failures:
                    lines.append(self._row(repository, processed, reference_link))
            lines.append("")

        return "\n".join(lines)

    @staticmethod
    def _row(repository: str, processed: ProcessedFailure, reference_link: str) -> str:
        file_path = processed.failure.file_path
        repo_link = f"[{repository}]({repository_url(repository)})"
        file_link = f"[{file_path}]({file_url(repository, file_path)})"

        status = f"{processed.status.emoji} {processed.status.message}"
        if processed.failed_requires:
            links = ", ".join(f"[`{req.check}`](#-{req.check})" for req in processed.failed_requires)
            status += f" ⚠️ Fix first: {links}"

        return f"| {repo_link} | {file_link} | {status} | {reference_link} |"
