"""Issue intake tool implementation.

Exposes the host platform contract: five string inputs in, either
``{GitHubIssueNumber, GitHubIssueLink}`` or ``{error}`` out.  No exception
escapes this module.
"""

from __future__ import annotations

import logging

from .. import state
from ..constants import ERROR_PREFIX
from ..models import IssueRequest

logger = logging.getLogger(__name__)


async def create_issue(
    githubAccessTokenId: str,  # noqa: N803
    requestor: str,
    title: str,
    urgency: str,
    description: str = "",
) -> dict[str, object]:
    """Create a GitHub issue from an intake request.

    ``githubAccessTokenId`` is the host platform's reference to the caller's
    stored GitHub token.  ``requestor`` is a comma-separated list of names.
    The issue is opened on the configured repository; repeated calls open
    repeated issues.
    """
    request = IssueRequest(
        requestor=requestor or "",
        title=title or "",
        description=description or "",
        urgency=urgency or "",
    )
    try:
        result = await state.CREATOR.create(request, githubAccessTokenId or "")
    except Exception as exc:
        logger.exception("Unexpected failure during issue creation")
        return {"error": f"{ERROR_PREFIX}{str(exc) or exc.__class__.__name__}"}
    return result.to_outputs()
