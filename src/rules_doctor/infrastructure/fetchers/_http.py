"""Shared HTTP settings for the GitHub adapters."""

from __future__ import annotations

import os

from rules_doctor import __version__

USER_AGENT = f"rules-doctor/{__version__}"
DEFAULT_TIMEOUT = 10  # seconds


def github_headers(accept: str | None = None) -> dict[str, str]:
    """Request headers, with a bearer token when ``GITHUB_TOKEN`` is set."""
    headers = {"User-Agent": USER_AGENT}
    if accept:
        headers["Accept"] = accept
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers
