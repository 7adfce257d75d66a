"""Use Case: Run Checks.

Fetches each applicable check's target file through an injected
ContentFetcherPort and evaluates the check's pattern against it.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from rules_doctor.domain.errors import ContentFetchError, PatternError
from rules_doctor.domain.models.check import Check
from rules_doctor.domain.models.result import CheckResult
from rules_doctor.domain.ports.content_fetcher import ContentFetcherPort
from rules_doctor.domain.rules.pattern import evaluate_pattern
from rules_doctor.domain.rules.selection import is_selectable

logger = logging.getLogger(__name__)


class RunChecksUseCase:
    """Evaluate checks against repositories, one repository at a time.

    Within a repository checks run in the order given. A fetch or pattern
    failure never aborts the run: it becomes a failing result with
    ``error`` set and evaluation moves on to the next check.
    """

    def __init__(self, fetcher: ContentFetcherPort) -> None:
        self._fetcher = fetcher

    def execute(self, repositories: Iterable[str], checks: Sequence[Check]) -> list[CheckResult]:
        """Run *checks* against every repository and return all results.

        Args:
            repositories: ``owner/name`` identifiers, processed in order.
            checks: Checks to run; disabled or excluded ones yield no result.

        Returns:
            Results in (repository, check) evaluation order.
        """
        repositories = list(repositories)
        enabled = sum(1 for c in checks if c.enabled)
        logger.info("Running %d checks across %d repositories", enabled, len(repositories))

        all_results: list[CheckResult] = []
        for repository in repositories:
            logger.info("Repository: %s", repository)
            all_results.extend(self.check_repository(repository, checks))
        return all_results

    def check_repository(self, repository: str, checks: Sequence[Check]) -> list[CheckResult]:
        """Return one result per check selectable for *repository*."""
        results: list[CheckResult] = []
        for check in checks:
            if not is_selectable(check, repository):
                logger.debug("Skipping %s for %s", check.name, repository)
                continue
            results.append(self._run_check(repository, check))
        return results

    def _run_check(self, repository: str, check: Check) -> CheckResult:
        try:
            content = self._fetcher.fetch(repository, check.target_file)
            passed = evaluate_pattern(content, check.pattern)
        except (ContentFetchError, PatternError) as exc:
            logger.debug("Check %s failed for %s: %s", check.name, repository, exc)
            return self._failure(repository, check, str(exc))
        except Exception as exc:
            logger.warning("Check %s raised unexpectedly for %s: %s", check.name, repository, exc)
            return self._failure(repository, check, str(exc) or type(exc).__name__)

        return CheckResult(
            repository=repository,
            check=check,
            file_path=check.target_file,
            passed=passed,
            requires=() if passed else check.requires,
        )

    @staticmethod
    def _failure(repository: str, check: Check, error: str) -> CheckResult:
        return CheckResult(
            repository=repository,
            check=check,
            file_path=check.target_file,
            passed=False,
            error=error,
            requires=check.requires,
        )
