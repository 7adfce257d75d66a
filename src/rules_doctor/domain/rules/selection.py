"""Which checks apply to which repository."""

from __future__ import annotations

from rules_doctor.domain.models.check import Check


def is_selectable(check: Check, repository: str) -> bool:
    """Return True if *check* is enabled and *repository* is not excluded."""
    if not check.enabled:
        return False
    return repository not in check.excluded_repositories
