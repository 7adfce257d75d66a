"""Resolve which declared prerequisites of a failing result also failed."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from rules_doctor.domain.models.check import RequiresEntry
from rules_doctor.domain.models.result import CheckResult

ResultIndex = Mapping[tuple[str, str], CheckResult]


def index_results(results: Iterable[CheckResult]) -> dict[tuple[str, str], CheckResult]:
    """Index results by ``(repository, check name)``; the first result wins."""
    index: dict[tuple[str, str], CheckResult] = {}
    for result in results:
        index.setdefault((result.repository, result.check_name), result)
    return index


def resolve_failed_prerequisites(
    result: CheckResult,
    all_results: Iterable[CheckResult],
    index: Optional[ResultIndex] = None,
) -> list[RequiresEntry]:
    """Return the prerequisites of *result* that failed for the same repository.

    A prerequisite with no result of its own (disabled, excluded or not
    selected for this run) is left out rather than reported as failed.
    Must only be called once every result of the run is available.

    Args:
        result: The result whose prerequisites are resolved.
        all_results: Every result of the run.
        index: Optional pre-built :func:`index_results` of *all_results*.
    """
    if result.passed or not result.requires:
        return []

    lookup = index if index is not None else index_results(all_results)
    failed: list[RequiresEntry] = []
    for entry in result.requires:
        required = lookup.get((result.repository, entry.check))
        if required is not None and not required.passed:
            failed.append(entry)
    return failed
