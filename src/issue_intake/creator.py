"""Issue creation step.

``IssueCreator`` validates an intake request, resolves the caller's GitHub
token through an injected ``TokenStore`` and opens one issue on the
configured repository.  Expected failures come back as ``IssueFailure``
values; the creator never raises for a bad status or a refused token.
"""

from __future__ import annotations

import logging

import httpx

from .config import Config
from .credentials import TokenStore
from .errors import CredentialError, ValidationError
from .github import api as github_api
from .github.templates import generate_issue_body
from .models import IssueFailure, IssueRequest, IssueResult
from .policy.redaction import redact_secrets

logger = logging.getLogger(__name__)


class IssueCreator:
    """Turns intake requests into GitHub issues."""

    def __init__(self, config: Config, token_store: TokenStore) -> None:
        self._config = config
        self._token_store = token_store

    async def create(self, request: IssueRequest, token_id: str) -> IssueResult:
        """Create an issue for ``request`` using the token behind ``token_id``.

        The token is fetched before anything is sent to GitHub; a refused
        token ends the call without a GitHub request.
        """
        invalid = request.validate()
        if invalid is None and not token_id.strip():
            invalid = ValidationError("Missing required field: githubAccessTokenId")
        if invalid is not None:
            return self._failed(IssueFailure(invalid))

        try:
            lookup = await self._token_store.fetch(token_id)
        except httpx.HTTPError as exc:
            return self._failed(IssueFailure(CredentialError(f"Failed to access auth token: {exc}")))
        if not lookup.ok:
            return self._failed(IssueFailure(CredentialError("Failed to access auth token")), lookup.error)

        token = lookup.external_token
        result = await github_api.create_issue(
            self._config,
            token,
            title=request.title,
            body=generate_issue_body(request),
        )
        if isinstance(result, IssueFailure):
            return self._failed(result, token=token)

        logger.info("Created issue #%d in %s", result.issue_number, self._config.repo_slug)
        return result

    def _failed(self, failure: IssueFailure, detail: str | None = None, *, token: str | None = None) -> IssueFailure:
        message = failure.error.message if detail is None else f"{failure.error.message} ({detail})"
        logger.error(
            "Issue creation failed: %s",
            redact_secrets(message, [token, self._config.slack_bot_token, self._config.github_token]),
        )
        return failure

