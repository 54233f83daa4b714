"""Templates for generating GitHub issue bodies."""

from __future__ import annotations

from ..models import IssueRequest


def generate_issue_body(request: IssueRequest) -> str:
    """Return the free-text issue body for an intake request.

    The body always carries the ``Description:``, ``Requestor:`` and
    ``Urgency:`` labels, even when a value is empty.  Requestor names are
    joined with a bare comma (``Alice,Bob,Carol``).
    """
    requestors = ",".join(request.requestor_list)
    return f"Description: {request.description}\n\nRequestor: {requestors}\nUrgency: {request.urgency}"
