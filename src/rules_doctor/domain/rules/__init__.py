"""Pure evaluation rules: pattern matching, selection, prerequisites, classification."""

from rules_doctor.domain.rules.classification import classify_failure, escape_table_pipes
from rules_doctor.domain.rules.pattern import evaluate_pattern
from rules_doctor.domain.rules.prerequisites import index_results, resolve_failed_prerequisites
from rules_doctor.domain.rules.selection import is_selectable

__all__ = [
    "classify_failure",
    "escape_table_pipes",
    "evaluate_pattern",
    "index_results",
    "is_selectable",
    "resolve_failed_prerequisites",
]
