"""Domain models — public API."""

from rules_doctor.domain.models.check import Check, ExcludeEntry, RequiresEntry
from rules_doctor.domain.models.report import (
    FailureKind,
    FailureStatus,
    GroupedReport,
    ProcessedFailure,
)
from rules_doctor.domain.models.result import CheckResult

__all__ = [
    # Checks
    "Check",
    "ExcludeEntry",
    "RequiresEntry",
    # Results
    "CheckResult",
    # Report
    "FailureKind",
    "FailureStatus",
    "GroupedReport",
    "ProcessedFailure",
]
