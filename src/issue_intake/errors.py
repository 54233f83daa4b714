"""Failure taxonomy for issue creation.

Errors are plain values carried by ``IssueFailure`` results rather than
raised.  Every error exposes a human-readable ``message``; callers only ever
see that text, prefixed by the standard error banner.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IssueError:
    """Base class for every issue creation failure."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationError(IssueError):
    """A required input field was missing or blank."""


@dataclass(frozen=True)
class CredentialError(IssueError):
    """The access token could not be resolved."""


@dataclass(frozen=True)
class NetworkError(IssueError):
    """The HTTP request to GitHub failed at the transport level."""


@dataclass(frozen=True)
class ParseError(IssueError):
    """The GitHub response body was not the expected JSON document."""


@dataclass(frozen=True, init=False)
class HttpError(IssueError):
    """GitHub answered with a status other than 201 Created."""

    status_code: int
    reason: str

    def __init__(self, status_code: int, reason: str) -> None:
        object.__setattr__(self, "status_code", status_code)
        object.__setattr__(self, "reason", reason)
        object.__setattr__(self, "message", f"{status_code}: {reason}")
