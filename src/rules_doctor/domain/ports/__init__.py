"""Ports — contracts for the collaborators the engine depends on."""

from rules_doctor.domain.ports.config_provider import ConfigProviderPort
from rules_doctor.domain.ports.content_fetcher import ContentFetcherPort
from rules_doctor.domain.ports.report_renderer import ReportRendererPort
from rules_doctor.domain.ports.repository_discovery import RepositoryDiscoveryPort

__all__ = [
    "ConfigProviderPort",
    "ContentFetcherPort",
    "ReportRendererPort",
    "RepositoryDiscoveryPort",
]
