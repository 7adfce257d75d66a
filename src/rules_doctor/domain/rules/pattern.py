"""Pattern evaluation against file content."""

from __future__ import annotations

import re
from functools import lru_cache

from rules_doctor.domain.errors import PatternError
from rules_doctor.domain.models.check import NEGATION_MARKER


@lru_cache(maxsize=256)
def _compile(expression: str) -> re.Pattern[str]:
    try:
        return re.compile(expression)
    except re.error as exc:
        raise PatternError(f"Invalid pattern '{expression}': {exc}") from exc


def evaluate_pattern(content: str, pattern: str) -> bool:
    """Return True if *content* satisfies *pattern*.

    The pattern is searched (not fully matched) anywhere in the content,
    case-sensitively, with no flags; inline flags such as ``(?m)`` or
    ``(?s)`` opt into other behaviour. A leading ``!`` inverts the result.

    Raises:
        PatternError: The expression is not a valid regular expression.
    """
    negated = pattern.startswith(NEGATION_MARKER)
    expression = pattern[len(NEGATION_MARKER):] if negated else pattern
    matches = _compile(expression).search(content) is not None
    return not matches if negated else matches
