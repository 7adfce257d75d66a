"""Check-related domain models.

A ``Check`` pairs a file path inside a repository with a regular
expression. These are Pydantic models so that configuration loading can
validate them directly; they are frozen because a check never changes
during a run.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

NEGATION_MARKER = "!"

_REPOSITORY_REGEX = re.compile(r"^[^/\s]+/[^/\s]+$")


def validate_repository_id(value: str) -> str:
    """Return *value* if it is an ``owner/name`` identifier, else raise."""
    value = value.strip()
    if not _REPOSITORY_REGEX.match(value):
        raise ValueError(f"Invalid repository format: {value!r}. Expected 'owner/repo'")
    return value


class ExcludeEntry(BaseModel):
    """A repository the check must not run against."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    repository: str
    reason: Optional[str] = None

    @field_validator("repository")
    @classmethod
    def _check_repository(cls, v: str) -> str:
        return validate_repository_id(v)


class RequiresEntry(BaseModel):
    """A check that should be fixed before the declaring one."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    check: str = Field(..., min_length=1, description="Name of the prerequisite check")
    reason: Optional[str] = None


class Check(BaseModel):
    """A named rule: *file* in every repository must match *pattern*.

    A pattern starting with ``!`` is negated: the check passes when the
    remaining expression does **not** match.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    file: str = Field(..., min_length=1, description="Path of the target file in the repository")
    pattern: str
    description: Optional[str] = None
    enabled: bool = True
    reference_example: Optional[str] = Field(
        None, description="Link to a repository that already satisfies the check"
    )
    exclude: tuple[ExcludeEntry, ...] = ()
    requires: tuple[RequiresEntry, ...] = ()

    @property
    def target_file(self) -> str:
        return self.file

    @property
    def excluded_repositories(self) -> frozenset[str]:
        return frozenset(entry.repository for entry in self.exclude)
