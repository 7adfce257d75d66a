"""Use Case: Aggregate Results.

Builds the grouped report model consumed by every renderer.
"""

from __future__ import annotations

from typing import Sequence

from rules_doctor.domain.models.report import GroupedReport, ProcessedFailure
from rules_doctor.domain.models.result import CheckResult
from rules_doctor.domain.rules.classification import classify_failure
from rules_doctor.domain.rules.prerequisites import index_results, resolve_failed_prerequisites


class AggregateResultsUseCase:
    """Group failing results by check name, then by repository."""

    def execute(self, results: Sequence[CheckResult]) -> GroupedReport:
        """Aggregate the complete result set of a run.

        Args:
            results: Every result of the run, in evaluation order.

        Returns:
            A GroupedReport with counts and annotated failures.
        """
        report = GroupedReport()
        index = index_results(results)

        for result in results:
            if result.passed:
                report.passed_count += 1
                continue

            report.failed_count += 1
            bucket = report.by_check.setdefault(result.check_name, {}).setdefault(
                result.repository, []
            )
            bucket.append(
                ProcessedFailure(
                    failure=result,
                    status=classify_failure(result),
                    failed_requires=tuple(resolve_failed_prerequisites(result, results, index)),
                )
            )

        return report
