"""Configuration loading for Issue Intake MCP.

This module loads environment variables from a `.env` file using
`python-dotenv` and populates a `Config` object.

Required (at least one of):
- SLACK_BOT_TOKEN (resolves OAuth tokens through the token exchange service)
- GITHUB_TOKEN (static token, used when no bot token is configured)

Optional variables with defaults:
- GITHUB_OWNER (default: 'ltatka')
- GITHUB_REPO (default: 'my_issues')
- TOKEN_EXCHANGE_URL (default: Slack's apps.auth.external.get endpoint)
- HTTP_TIMEOUT_S (default: 10)
- LOG_LEVEL (default: 'INFO')
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .constants import (
    DEFAULT_GITHUB_OWNER,
    DEFAULT_GITHUB_REPO,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TOKEN_EXCHANGE_URL,
    GITHUB_API_BASE,
    HTTP_TIMEOUT_S,
)


@dataclass
class Config:
    """Configuration values loaded from the environment."""

    github_owner: str
    github_repo: str
    slack_bot_token: str | None
    github_token: str | None
    token_exchange_url: str
    http_timeout_s: float
    log_level: str

    @property
    def repo_slug(self) -> str:
        return f"{self.github_owner}/{self.github_repo}"

    @property
    def issues_url(self) -> str:
        """Issues endpoint of the target repository."""
        return f"{GITHUB_API_BASE}repos/{self.repo_slug}/issues"

    @classmethod
    def load_from_env(cls) -> Config:
        """Load configuration from environment variables.

        The `.env` file is loaded if present.  Raises `RuntimeError` if
        neither credential source is configured or a value is malformed.
        """
        load_dotenv()

        slack_bot_token = os.getenv("SLACK_BOT_TOKEN") or None
        github_token = os.getenv("GITHUB_TOKEN") or None
        if not slack_bot_token and not github_token:
            raise RuntimeError("Missing required environment variables: SLACK_BOT_TOKEN or GITHUB_TOKEN")

        # Target repository is configuration, never request input
        github_owner = os.getenv("GITHUB_OWNER", "").strip() or DEFAULT_GITHUB_OWNER
        github_repo = os.getenv("GITHUB_REPO", "").strip() or DEFAULT_GITHUB_REPO

        token_exchange_url = os.getenv("TOKEN_EXCHANGE_URL") or DEFAULT_TOKEN_EXCHANGE_URL

        timeout_raw = os.getenv("HTTP_TIMEOUT_S")
        try:
            http_timeout_s = float(timeout_raw) if timeout_raw else HTTP_TIMEOUT_S
        except ValueError as exc:
            raise RuntimeError(f"Invalid HTTP_TIMEOUT_S value: {timeout_raw!r}") from exc

        log_level = os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL

        return cls(
            github_owner=github_owner,
            github_repo=github_repo,
            slack_bot_token=slack_bot_token,
            github_token=github_token,
            token_exchange_url=token_exchange_url,
            http_timeout_s=http_timeout_s,
            log_level=log_level,
        )
