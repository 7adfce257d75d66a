"""Use cases — one class per operation the CLI exposes."""

from rules_doctor.application.use_cases.aggregate_results import AggregateResultsUseCase
from rules_doctor.application.use_cases.collect_repositories import CollectRepositoriesUseCase
from rules_doctor.application.use_cases.run_checks import RunChecksUseCase
from rules_doctor.application.use_cases.select_checks import SelectChecksUseCase

__all__ = [
    "AggregateResultsUseCase",
    "CollectRepositoriesUseCase",
    "RunChecksUseCase",
    "SelectChecksUseCase",
]
