"""GitHub adapters for content fetching and repository discovery."""

from rules_doctor.infrastructure.fetchers.github_content_fetcher import GitHubContentFetcher
from rules_doctor.infrastructure.fetchers.github_discovery import GitHubRepositoryDiscovery

__all__ = ["GitHubContentFetcher", "GitHubRepositoryDiscovery"]
