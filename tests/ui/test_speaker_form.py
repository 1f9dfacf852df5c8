"""Tests for speaker form helpers."""
from src.models.session import Session
from src.services.registration_service import RegistrationResult
from src.ui.speaker_form import _parse_certifications, _parse_sessions, _result_message
from src.utils.exceptions import (
    InvalidArgumentError,
    MissingRequiredFieldError,
    NoSessionsApprovedError,
    SpeakerDoesNotMeetRequirementsError,
)


class TestParseCertifications:
    """Tests for certification text parsing."""

    def test_one_per_line(self):
        """Each non-blank line becomes one certification."""
        assert _parse_certifications("AWS\n\n  CKA  \n") == ["AWS", "CKA"]

    def test_empty_text(self):
        """Empty or missing text yields no certifications."""
        assert _parse_certifications("") == []
        assert _parse_certifications(None) == []


class TestParseSessions:
    """Tests for session text parsing."""

    def test_title_and_description(self):
        """'title | description' lines are split on the bar."""
        sessions = _parse_sessions("Async Python | asyncio in depth\nTyping | mypy tips")

        assert sessions == [
            Session("Async Python", "asyncio in depth"),
            Session("Typing", "mypy tips"),
        ]

    def test_title_only_uses_title_as_description(self):
        """A line without a bar reuses the title as description."""
        assert _parse_sessions("Cobol for dummies") == [
            Session("Cobol for dummies", "Cobol for dummies")
        ]

    def test_blank_lines_skipped(self):
        """Blank lines don't create sessions."""
        assert _parse_sessions("\n   \n") == []


class TestResultMessage:
    """Tests for user-facing result messages."""

    def test_success_message_contains_id(self):
        """Success message shows the speaker id."""
        assert "7" in _result_message(RegistrationResult(speaker_id=7))

    def test_success_message_greets_speaker(self):
        """Success message starts with the speaker's full name."""
        message = _result_message(RegistrationResult(speaker_id=3), "Ada Lovelace")
        assert message.startswith("Ada Lovelace，")

    def test_missing_field_message_names_field(self):
        """Missing field message uses the field label."""
        result = RegistrationResult(error=MissingRequiredFieldError("last_name"))
        assert _result_message(result) == "請填寫姓氏"

    def test_each_rejection_has_its_own_message(self):
        """Every rejection kind maps to a distinct message."""
        messages = {
            _result_message(RegistrationResult(error=InvalidArgumentError("x"))),
            _result_message(RegistrationResult(error=NoSessionsApprovedError("x"))),
            _result_message(RegistrationResult(error=SpeakerDoesNotMeetRequirementsError("x"))),
        }
        assert len(messages) == 3
