"""Outcome of evaluating one check against one repository."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rules_doctor.domain.models.check import Check, RequiresEntry


@dataclass(frozen=True)
class CheckResult:
    """Result of a single (repository, check) evaluation.

    ``error`` is set only when the content could not be obtained or the
    pattern could not be compiled; a plain mismatch leaves it ``None``.
    ``requires`` holds the check's declared prerequisites verbatim and is
    only populated for failing results.
    """

    repository: str
    check: Check
    file_path: str
    passed: bool
    error: Optional[str] = None
    requires: tuple[RequiresEntry, ...] = ()

    @property
    def check_name(self) -> str:
        return self.check.name
