"""Use Case: Select Checks.

Narrows the configured checks to a single one when the operator asks for
it by name.
"""

from __future__ import annotations

from typing import Optional

from rules_doctor.config.models import RulesDoctorConfig
from rules_doctor.domain.errors import UnknownCheckError
from rules_doctor.domain.models.check import Check


class SelectChecksUseCase:
    """Pick the checks to run for this invocation."""

    def execute(self, config: RulesDoctorConfig, check_name: Optional[str] = None) -> list[Check]:
        """Return every configured check, or only the one called *check_name*.

        Raises:
            UnknownCheckError: No configured check is called *check_name*.
        """
        if not check_name:
            return list(config.checks)

        check = config.get_check(check_name)
        if check is None:
            raise UnknownCheckError(f"No check found with name '{check_name}'")
        return [check]
