"""Port: Report renderer — turn a grouped report into a durable document."""

from abc import ABC, abstractmethod
from pathlib import Path

from rules_doctor.domain.models.report import GroupedReport


class ReportRendererPort(ABC):
    """Contract for rendering a :class:`GroupedReport`."""

    @abstractmethod
    def render(self, report: GroupedReport) -> str:
        """Return the report as text."""
        ...

    def write(self, report: GroupedReport, output_path: Path) -> Path:
        """Render *report* and write it to *output_path*."""
        output_path = Path(output_path)
        output_path.write_text(self.render(report), encoding="utf-8")
        return output_path
