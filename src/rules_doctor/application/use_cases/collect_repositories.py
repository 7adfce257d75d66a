"""Use Case: Collect Repositories.

Assembles the effective repository list from discovery and the static
configuration.
"""

from __future__ import annotations

import logging
from typing import Optional

from rules_doctor.config.models import DynamicRepositories, RulesDoctorConfig
from rules_doctor.domain.errors import ConfigurationError, DiscoveryError
from rules_doctor.domain.ports.repository_discovery import RepositoryDiscoveryPort

logger = logging.getLogger(__name__)


class CollectRepositoriesUseCase:
    """Union discovered and static repositories, without duplicates."""

    def __init__(self, discovery: Optional[RepositoryDiscoveryPort] = None) -> None:
        self._discovery = discovery

    def execute(self, config: RulesDoctorConfig) -> list[str]:
        """Return the repositories to audit, discovered ones first.

        Raises:
            DiscoveryError: Discovery failed and no static list is enabled.
            ConfigurationError: No repository source yielded anything.
        """
        repositories: list[str] = []

        if config.uses_discovery and config.dynamic_repositories is not None:
            repositories.extend(self._discover(config.dynamic_repositories, config))

        repositories.extend(config.static_repositories)

        if not repositories:
            raise ConfigurationError(
                "No repositories configured. Either provide static repositories "
                "or enable dynamic repository fetching."
            )

        return list(dict.fromkeys(repositories))

    def _discover(self, dynamic: DynamicRepositories, config: RulesDoctorConfig) -> list[str]:
        if self._discovery is None:
            raise ConfigurationError("Dynamic repositories are enabled but no discovery is wired")

        logger.info(
            "Fetching repositories from %s for org: %s with topic: %s",
            dynamic.source,
            dynamic.organization,
            dynamic.topic,
        )
        try:
            return self._discovery.discover(dynamic.organization, dynamic.topic)
        except DiscoveryError as exc:
            if not config.static_repositories:
                raise
            logger.warning("Repository discovery failed, using static list only: %s", exc)
            return []
