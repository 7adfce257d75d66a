"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports.
"""

from __future__ import annotations

from pathlib import Path

from rules_doctor.application.use_cases.aggregate_results import AggregateResultsUseCase
from rules_doctor.application.use_cases.collect_repositories import CollectRepositoriesUseCase
from rules_doctor.application.use_cases.run_checks import RunChecksUseCase
from rules_doctor.application.use_cases.select_checks import SelectChecksUseCase
from rules_doctor.config.models import RulesDoctorConfig
from rules_doctor.domain.ports.config_provider import ConfigProviderPort
from rules_doctor.domain.ports.content_fetcher import ContentFetcherPort
from rules_doctor.domain.ports.report_renderer import ReportRendererPort
from rules_doctor.domain.ports.repository_discovery import RepositoryDiscoveryPort
from rules_doctor.infrastructure.config.json_config_provider import JsonConfigProvider
from rules_doctor.infrastructure.fetchers.github_content_fetcher import GitHubContentFetcher
from rules_doctor.infrastructure.fetchers.github_discovery import GitHubRepositoryDiscovery
from rules_doctor.infrastructure.renderers.markdown_renderer import MarkdownRenderer


class Container:
    """Simple dependency injection container.

    Wires infrastructure implementations to domain ports and provides
    pre-configured use cases. Any port can be overridden, which is how
    the tests run the whole pipeline without network access.

    Usage::

        container = Container(config_path="config.json")
        repos = container.collect_repositories().execute(container.config)
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        *,
        config_provider: ConfigProviderPort | None = None,
        fetcher: ContentFetcherPort | None = None,
        discovery: RepositoryDiscoveryPort | None = None,
        renderer: ReportRendererPort | None = None,
    ) -> None:
        self._config_provider = config_provider or JsonConfigProvider(config_path)
        self._fetcher = fetcher or GitHubContentFetcher()
        self._discovery = discovery or GitHubRepositoryDiscovery()
        self._renderer = renderer or MarkdownRenderer()

    # -- Config ------------------------------------------------------------

    @property
    def config(self) -> RulesDoctorConfig:
        return self._config_provider.get_config()

    @property
    def renderer(self) -> ReportRendererPort:
        return self._renderer

    # -- Use-case factories -------------------------------------------------

    def collect_repositories(self) -> CollectRepositoriesUseCase:
        return CollectRepositoriesUseCase(self._discovery)

    def select_checks(self) -> SelectChecksUseCase:
        return SelectChecksUseCase()

    def run_checks(self) -> RunChecksUseCase:
        return RunChecksUseCase(self._fetcher)

    def aggregate_results(self) -> AggregateResultsUseCase:
        return AggregateResultsUseCase()
