"""Grouped report model — the read-only view handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from rules_doctor.domain.models.check import RequiresEntry
from rules_doctor.domain.models.result import CheckResult


class FailureKind(str, Enum):
    """Why a result failed."""

    NOT_FOUND = "not_found"
    ERROR = "error"
    PATTERN_NOT_MATCHED = "pattern_not_matched"


_KIND_EMOJI = {
    FailureKind.NOT_FOUND: "🤷‍♂️",
    FailureKind.ERROR: "❌",
    FailureKind.PATTERN_NOT_MATCHED: "🔍",
}


@dataclass(frozen=True)
class FailureStatus:
    """Classification of a failing result plus its display message."""

    kind: FailureKind
    message: str

    @property
    def emoji(self) -> str:
        return _KIND_EMOJI[self.kind]


@dataclass(frozen=True)
class ProcessedFailure:
    """A failing result annotated for rendering."""

    failure: CheckResult
    status: FailureStatus
    failed_requires: tuple[RequiresEntry, ...] = ()


@dataclass
class GroupedReport:
    """Failures bucketed by check name, then by repository.

    Buckets keep evaluation order; :meth:`iter_checks` and
    :meth:`iter_repositories` yield keys in lexicographic order so every
    renderer produces the same layout for the same inputs.
    """

    passed_count: int = 0
    failed_count: int = 0
    by_check: dict[str, dict[str, list[ProcessedFailure]]] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.passed_count + self.failed_count

    @property
    def all_passed(self) -> bool:
        return self.failed_count == 0

    def iter_checks(self) -> Iterator[tuple[str, dict[str, list[ProcessedFailure]]]]:
        for check_name in sorted(self.by_check):
            yield check_name, self.by_check[check_name]

    def iter_repositories(self, check_name: str) -> Iterator[tuple[str, list[ProcessedFailure]]]:
        repo_map = self.by_check.get(check_name, {})
        for repository in sorted(repo_map):
            yield repository, repo_map[repository]

    def reference_example(self, check_name: str) -> str | None:
        """Reference link of a check; every failure in a bucket shares the check."""
        for failures in self.by_check.get(check_name, {}).values():
            for processed in failures:
                return processed.failure.check.reference_example
        return None
