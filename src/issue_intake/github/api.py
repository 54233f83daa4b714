"""GitHub REST API wrapper."""

from __future__ import annotations

import logging

import httpx

from ..config import Config
from ..constants import GITHUB_API_BASE, ISSUE_CREATED_STATUS
from ..errors import HttpError, NetworkError, ParseError
from ..models import IssueCreated, IssueFailure, IssueResult
from .auth import get_github_client

logger = logging.getLogger(__name__)


async def _github_post(config: Config, token: str, url: str, payload: dict[str, object]) -> httpx.Response:
    """POST ``payload`` as JSON to the GitHub API.

    Only https://api.github.com/... is accepted.  Transport errors surface as
    ``httpx.HTTPError``; the caller decides what they mean.
    """
    if not url.startswith(GITHUB_API_BASE):
        raise ValueError(f"Invalid GitHub API URL: {url}")

    async with get_github_client(config, token) as client:
        return await client.post(url, json=payload)


async def create_issue(config: Config, token: str, title: str, body: str) -> IssueResult:
    """Open an issue on the configured repository.

    Sends exactly one request.  Returns ``IssueCreated`` with the issue number
    and HTML link on 201, otherwise an ``IssueFailure`` describing what went
    wrong.  Nothing is retried, so calling this twice opens two issues.
    """
    try:
        resp = await _github_post(config, token, config.issues_url, {"title": title, "body": body})
    except httpx.HTTPError as exc:
        return IssueFailure(NetworkError(str(exc) or exc.__class__.__name__))

    if resp.status_code != ISSUE_CREATED_STATUS:
        logger.debug("GitHub API error %s: %s", resp.status_code, resp.text)
        return IssueFailure(HttpError(resp.status_code, resp.reason_phrase))

    try:
        data = resp.json()
    except ValueError as exc:
        return IssueFailure(ParseError(f"Invalid JSON in GitHub response: {exc}"))

    if not isinstance(data, dict):
        return IssueFailure(ParseError("Unexpected GitHub response shape"))
    missing = [key for key in ("number", "html_url") if key not in data]
    if missing:
        return IssueFailure(ParseError(f"GitHub response missing {', '.join(missing)}"))

    number = data["number"]
    link = data["html_url"]
    # bool is an int subclass
    if not isinstance(number, int) or isinstance(number, bool):
        return IssueFailure(ParseError(f"GitHub response has invalid number: {number!r}"))
    if not isinstance(link, str) or not link:
        return IssueFailure(ParseError(f"GitHub response has invalid html_url: {link!r}"))

    return IssueCreated(issue_number=number, issue_link=link)
