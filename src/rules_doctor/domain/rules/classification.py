"""Failure classification for rendering."""

from __future__ import annotations

from rules_doctor.domain.models.report import FailureKind, FailureStatus
from rules_doctor.domain.models.result import CheckResult

FILE_NOT_FOUND = "File not found"


def escape_table_pipes(text: str) -> str:
    """Escape ``|`` so the text can sit inside a markdown table cell."""
    return text.replace("|", "\\|")


def classify_failure(result: CheckResult) -> FailureStatus:
    """Classify a failing result as not found, error or pattern mismatch."""
    if result.error:
        if FILE_NOT_FOUND in result.error:
            return FailureStatus(FailureKind.NOT_FOUND, FILE_NOT_FOUND)
        return FailureStatus(FailureKind.ERROR, result.error)
    pattern = escape_table_pipes(result.check.pattern)
    return FailureStatus(FailureKind.PATTERN_NOT_MATCHED, f"Pattern `{pattern}` not found")
