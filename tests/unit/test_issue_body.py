"""Tests for issue body generation."""

from __future__ import annotations

from issue_intake.github.templates import generate_issue_body
from issue_intake.models import IssueRequest


def _request(**overrides: str) -> IssueRequest:
    fields = {
        "requestor": "Alice",
        "title": "Printer jammed",
        "description": "Floor 3 printer is jammed",
        "urgency": "ASAP",
    }
    fields.update(overrides)
    return IssueRequest(**fields)


def test_requestor_names_are_split_and_trimmed():
    request = _request(requestor="Alice, Bob , Carol")
    assert request.requestor_list == ["Alice", "Bob", "Carol"]


def test_body_renders_trimmed_requestor_list():
    body = generate_issue_body(_request(requestor="Alice, Bob , Carol"))
    assert "Requestor: Alice,Bob,Carol\n" in body


def test_body_layout():
    body = generate_issue_body(_request())
    assert body == "Description: Floor 3 printer is jammed\n\nRequestor: Alice\nUrgency: ASAP"


def test_empty_description_keeps_all_labels():
    body = generate_issue_body(_request(description=""))
    assert body.startswith("Description: \n\n")
    assert "Description:" in body
    assert "Requestor:" in body
    assert "Urgency:" in body


def test_empty_requestor_renders_empty_value():
    request = _request(requestor="")
    assert request.requestor_list == [""]
    assert "Requestor: \nUrgency: ASAP" in generate_issue_body(request)


class TestIssueRequestValidation:
    """Only title and urgency are required."""

    def test_valid_request(self) -> None:
        assert _request(requestor="", description="").validate() is None

    def test_blank_title_rejected(self) -> None:
        error = _request(title="   ").validate()
        assert error is not None
        assert error.message == "Missing required field: title"

    def test_blank_urgency_rejected(self) -> None:
        error = _request(urgency="").validate()
        assert error is not None
        assert error.message == "Missing required field: urgency"
