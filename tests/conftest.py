"""Shared fixtures: in-memory ports so the engine runs without network access."""

from __future__ import annotations

import pytest

from rules_doctor.config.loader import clear_cache
from rules_doctor.domain.errors import ContentFetchError, ContentNotFoundError, DiscoveryError
from rules_doctor.domain.models.check import Check
from rules_doctor.domain.ports.content_fetcher import ContentFetcherPort
from rules_doctor.domain.ports.repository_discovery import RepositoryDiscoveryPort


class FakeFetcher(ContentFetcherPort):
    """Serve file content from a ``{(repository, path): text}`` mapping."""

    def __init__(self, files=None, failures=None) -> None:
        self.files = dict(files or {})
        self.failures = dict(failures or {})
        self.calls: list[tuple[str, str]] = []

    def fetch(self, repository: str, file_path: str) -> str:
        self.calls.append((repository, file_path))
        key = (repository, file_path)
        if key in self.failures:
            raise ContentFetchError(self.failures[key])
        if key not in self.files:
            raise ContentNotFoundError(f"File not found: {file_path}")
        return self.files[key]


class FakeDiscovery(RepositoryDiscoveryPort):
    def __init__(self, repositories=None, fail: bool = False) -> None:
        self.repositories = list(repositories or [])
        self.fail = fail
        self.calls: list[tuple[str, str]] = []

    def discover(self, organization: str, topic: str) -> list[str]:
        self.calls.append((organization, topic))
        if self.fail:
            raise DiscoveryError("GitHub API request failed: 503 Service Unavailable")
        return list(self.repositories)


def make_check(name: str, file: str = "README.md", pattern: str = ".*", **kwargs) -> Check:
    return Check(name=name, file=file, pattern=pattern, **kwargs)


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    """Ensure a clean config cache for every test."""
    clear_cache()
    yield
    clear_cache()
