"""Raw file fetcher for GitHub — implements ContentFetcherPort.

Reads ``https://raw.githubusercontent.com/<owner>/<repo>/<branch>/<path>``,
trying ``main`` first and falling back to ``master``.
"""

from __future__ import annotations

import logging
from typing import Sequence

import requests

from rules_doctor.domain.errors import ContentFetchError, ContentNotFoundError
from rules_doctor.domain.ports.content_fetcher import ContentFetcherPort
from rules_doctor.domain.rules.classification import FILE_NOT_FOUND
from rules_doctor.infrastructure.fetchers._http import DEFAULT_TIMEOUT, github_headers

logger = logging.getLogger(__name__)

RAW_CONTENT_URL = "https://raw.githubusercontent.com"
DEFAULT_BRANCHES = ("main", "master")


class GitHubContentFetcher(ContentFetcherPort):
    """Fetch raw file content from public GitHub repositories."""

    def __init__(
        self,
        branches: Sequence[str] = DEFAULT_BRANCHES,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self._branches = tuple(branches)
        self._timeout = timeout
        self._http = session or requests

    def fetch(self, repository: str, file_path: str) -> str:
        """Fetch *file_path* from the first branch that has it.

        Raises:
            ContentNotFoundError: No branch has the file.
            ContentFetchError: Malformed repository or network failure.
        """
        owner, _, name = repository.partition("/")
        if not owner or not name or "/" in name:
            raise ContentFetchError(
                f"Invalid repository format: {repository}. Expected \"owner/repo\""
            )

        for branch in self._branches:
            url = f"{RAW_CONTENT_URL}/{owner}/{name}/{branch}/{file_path}"
            try:
                resp = self._http.get(url, timeout=self._timeout, headers=github_headers())
            except requests.RequestException as exc:
                raise ContentFetchError(f"Failed to fetch {file_path}: {exc}") from exc

            if resp.ok:
                return resp.text
            logger.debug("%s not on %s of %s (HTTP %s)", file_path, branch, repository, resp.status_code)

        raise ContentNotFoundError(f"{FILE_NOT_FOUND}: {file_path}")
