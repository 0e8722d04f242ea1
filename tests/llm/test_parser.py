"""Tests for parsing marker-delimited refinement responses."""

from email_polisher.llm.client import DEFAULT_MOCK_RESPONSE
from email_polisher.llm.parser import parse_email_text, parse_llm_response


class TestParseLlmResponse:
    def test_default_mock_response(self):
        parsed = parse_llm_response(DEFAULT_MOCK_RESPONSE)
        assert parsed is not None
        assert parsed.email.startswith("Subject: Re: Your inquiry")
        assert parsed.email.endswith("{{sender_name}}")
        assert parsed.evaluation.startswith("This email keeps a professional tone")

    def test_missing_eval_marker(self):
        assert parse_llm_response("===EMAIL===\nSubject: Hi\nHello\nBye") is None

    def test_missing_email_marker(self):
        assert parse_llm_response("Subject: Hi\n===EVAL===\nfine") is None

    def test_plain_text(self):
        assert parse_llm_response("Sure, here is a better email.") is None


class TestParseEmailText:
    """Line-based structure extraction."""

    def test_structure(self):
        text = (
            "Subject: Quick question\n\n"
            "Hi Dana,\n\n"
            "I enjoyed your talk.\n\n"
            "Would you have time to chat?\n\n"
            "Best regards,"
        )
        draft = parse_email_text(text)
        assert draft is not None
        assert draft.subject == "Quick question"
        assert draft.greeting == "Hi Dana,"
        assert draft.body_sections == ["I enjoyed your talk.", "Would you have time to chat?"]
        assert draft.closing == "Best regards,"

    def test_last_line_is_closing(self):
        parsed = parse_llm_response(DEFAULT_MOCK_RESPONSE)
        draft = parse_email_text(parsed.email)
        assert draft is not None
        assert draft.greeting == "Dear {{recipient_name}},"
        assert draft.closing == "{{sender_name}}"
        assert draft.body_sections[-1] == "Best regards,"
        assert len(draft.body_sections) == 4

    def test_subject_line_anywhere(self):
        draft = parse_email_text("Hi,\nSubject: Later\nBody line\nBye")
        assert draft is not None
        assert draft.subject == "Later"
        assert draft.body_sections == ["Body line"]

    def test_too_few_lines(self):
        assert parse_email_text("Subject: Hi\n\nHello") is None

    def test_missing_subject(self):
        assert parse_email_text("Hi,\nBody\nBye") is None

    def test_no_body(self):
        assert parse_email_text("Subject: Hi\nHello,\nBye") is None

    def test_only_subject_lines(self):
        assert parse_email_text("Subject: a\nSubject: b\nHello") is None
