"""Pydantic models for the Rules Doctor configuration file.

These models validate and type the JSON configuration that lists the
repositories to audit and the checks to run against them. Every model
forbids unknown keys so a misspelled option fails loading instead of
being silently ignored.
"""

from __future__ import annotations

from collections import Counter
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rules_doctor.domain.models.check import Check, validate_repository_id


# ---------------------------------------------------------------------------
# Repository sources
# ---------------------------------------------------------------------------


class StaticRepositories(BaseModel):
    """Fixed list of repositories."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    enabled: bool
    items: tuple[str, ...] = Field(..., alias="list")

    @field_validator("items")
    @classmethod
    def _check_identifiers(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(validate_repository_id(repo) for repo in v)


class DynamicRepositories(BaseModel):
    """Repositories discovered from the hosting provider by topic."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    enabled: bool
    source: Literal["github"]
    organization: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class RulesDoctorConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    repositories: StaticRepositories | None = None
    dynamic_repositories: DynamicRepositories | None = Field(None, alias="dynamicRepositories")
    checks: tuple[Check, ...] = Field(...)

    @model_validator(mode="after")
    def _check_names(self) -> RulesDoctorConfig:
        duplicates = sorted(name for name, n in Counter(c.name for c in self.checks).items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate check names: {', '.join(duplicates)}")

        known = {c.name for c in self.checks}
        for check in self.checks:
            for entry in check.requires:
                if entry.check not in known:
                    raise ValueError(
                        f"Check '{check.name}' requires unknown check '{entry.check}'"
                    )
        return self

    # -- Helpers ---------------------------------------------------------------

    @property
    def static_repositories(self) -> list[str]:
        if self.repositories and self.repositories.enabled:
            return list(self.repositories.items)
        return []

    @property
    def uses_discovery(self) -> bool:
        return bool(self.dynamic_repositories and self.dynamic_repositories.enabled)

    @property
    def enabled_checks(self) -> list[Check]:
        return [c for c in self.checks if c.enabled]

    def get_check(self, name: str) -> Check | None:
        """Return the check called *name*, or ``None``."""
        for check in self.checks:
            if check.name == name:
                return check
        return None
