"""Token stores that resolve an opaque token id into a GitHub OAuth token.

The host platform keeps the user's GitHub token and hands the tool only an
``external_token_id``.  ``SlackTokenStore`` exchanges that id through the
platform's ``apps.auth.external.get`` method.  ``StaticTokenStore`` serves a
single preconfigured token and is used for local runs.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import Config
from ..models import TokenLookup

logger = logging.getLogger(__name__)


class TokenStore(Protocol):
    """Resolves a token id into a bearer token."""

    async def fetch(self, token_id: str) -> TokenLookup: ...


class SlackTokenStore:
    """Token store backed by the host platform's token exchange endpoint."""

    def __init__(self, config: Config, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        if not config.slack_bot_token:
            raise ValueError("SlackTokenStore requires SLACK_BOT_TOKEN")
        self._config = config
        self._transport = transport

    async def fetch(self, token_id: str) -> TokenLookup:
        """Exchange ``token_id`` for the stored token.

        Returns ``TokenLookup(ok=False, ...)`` when the service refuses; raises
        ``httpx.HTTPError`` when it cannot be reached.
        """
        async with httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self._config.slack_bot_token}"},
            timeout=self._config.http_timeout_s,
            transport=self._transport,
        ) as client:
            resp = await client.post(self._config.token_exchange_url, json={"external_token_id": token_id})

        if resp.status_code != 200:
            logger.warning("Token exchange returned HTTP %s", resp.status_code)
            return TokenLookup(ok=False, error=f"HTTP {resp.status_code}")

        try:
            data = resp.json()
        except ValueError:
            return TokenLookup(ok=False, error="invalid_json")

        if not isinstance(data, dict) or data.get("ok") is not True or not data.get("external_token"):
            error = data.get("error") if isinstance(data, dict) else None
            logger.warning("Token exchange refused: %s", error or "unknown_error")
            return TokenLookup(ok=False, error=error or "unknown_error")

        return TokenLookup(ok=True, external_token=str(data["external_token"]))


class StaticTokenStore:
    """Token store that returns the same token for every id."""

    def __init__(self, token: str) -> None:
        self._token = token

    async def fetch(self, token_id: str) -> TokenLookup:
        if not self._token:
            return TokenLookup(ok=False, error="no_token_configured")
        return TokenLookup(ok=True, external_token=self._token)


def build_token_store(config: Config) -> TokenStore:
    """Pick the token store for ``config``: Slack when a bot token is set, static otherwise."""
    if config.slack_bot_token:
        return SlackTokenStore(config)
    return StaticTokenStore(config.github_token or "")
