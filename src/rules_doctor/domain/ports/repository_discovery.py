"""Port: Repository discovery — list repositories tagged with a topic."""

from abc import ABC, abstractmethod


class RepositoryDiscoveryPort(ABC):
    """Contract for discovering repositories in an organization by topic."""

    @abstractmethod
    def discover(self, organization: str, topic: str) -> list[str]:
        """Return ``owner/name`` identifiers tagged with *topic*.

        Raises:
            DiscoveryError: If the listing cannot be retrieved.
        """
        ...
