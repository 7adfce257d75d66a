"""GitHub search discovery — implements RepositoryDiscoveryPort."""

from __future__ import annotations

import logging

import requests

from rules_doctor.domain.errors import DiscoveryError
from rules_doctor.domain.ports.repository_discovery import RepositoryDiscoveryPort
from rules_doctor.infrastructure.fetchers._http import DEFAULT_TIMEOUT, github_headers

logger = logging.getLogger(__name__)

SEARCH_URL = "https://api.github.com/search/repositories"
_PER_PAGE = 100


class GitHubRepositoryDiscovery(RepositoryDiscoveryPort):
    """List repositories of an organization tagged with a topic."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None) -> None:
        self._timeout = timeout
        self._http = session or requests

    def discover(self, organization: str, topic: str) -> list[str]:
        """Return ``full_name`` of every matching repository (first page only).

        Raises:
            DiscoveryError: Network error, non-2xx response or malformed body.
        """
        query = f"org:{organization} topic:{topic}"
        try:
            resp = self._http.get(
                SEARCH_URL,
                params={"q": query, "per_page": _PER_PAGE},
                timeout=self._timeout,
                headers=github_headers("application/vnd.github+json"),
            )
            resp.raise_for_status()
            items = resp.json().get("items", [])
        except requests.RequestException as exc:
            raise DiscoveryError(f"Failed to fetch repositories: {exc}") from exc
        except ValueError as exc:
            raise DiscoveryError(f"Failed to fetch repositories: invalid response ({exc})") from exc

        repositories = [item["full_name"] for item in items if item.get("full_name")]
        logger.info(
            "Found %d %s repositories with %s topic", len(repositories), organization, topic
        )
        return repositories
