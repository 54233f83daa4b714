"""Data model for issue intake requests and their results."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import ERROR_PREFIX
from .errors import IssueError, ValidationError


@dataclass(frozen=True)
class IssueRequest:
    """An intake request as submitted by the host platform."""

    requestor: str
    title: str
    description: str
    urgency: str

    @property
    def requestor_list(self) -> list[str]:
        """Requestor names split on commas with surrounding whitespace removed."""
        return [name.strip() for name in self.requestor.split(",")]

    def validate(self) -> ValidationError | None:
        """Return a ``ValidationError`` for the first blank required field, if any."""
        for field_name in ("title", "urgency"):
            if not getattr(self, field_name).strip():
                return ValidationError(f"Missing required field: {field_name}")
        return None


@dataclass(frozen=True)
class TokenLookup:
    """Answer of the token exchange service."""

    ok: bool
    external_token: str = ""
    error: str | None = None


@dataclass(frozen=True)
class IssueCreated:
    """Successful issue creation."""

    issue_number: int
    issue_link: str

    def to_outputs(self) -> dict[str, object]:
        return {"GitHubIssueNumber": self.issue_number, "GitHubIssueLink": self.issue_link}


@dataclass(frozen=True)
class IssueFailure:
    """Failed issue creation."""

    error: IssueError

    @property
    def message(self) -> str:
        return f"{ERROR_PREFIX}{self.error.message}"

    def to_outputs(self) -> dict[str, object]:
        return {"error": self.message}


IssueResult = IssueCreated | IssueFailure
