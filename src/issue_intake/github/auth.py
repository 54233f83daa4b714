"""Authentication helpers for GitHub API."""

from __future__ import annotations

import httpx

from ..config import Config
from ..constants import GITHUB_API_VERSION, GITHUB_MEDIA_TYPE


def github_headers(token: str) -> dict[str, str]:
    """Return the request headers GitHub's issues endpoint expects."""
    return {
        "Accept": GITHUB_MEDIA_TYPE,
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


def get_github_client(
    config: Config,
    token: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Return a configured async GitHub client with the Authorization header set."""
    return httpx.AsyncClient(
        headers=github_headers(token),
        timeout=config.http_timeout_s,
        transport=transport,
    )
