"""Tests for refinement prompt rendering."""

from email_polisher.domain.models import ToneSettings
from email_polisher.domain.types import EmailCategory
from email_polisher.llm.prompts import (
    EMAIL_MARKER,
    EVAL_MARKER,
    REFINE_SYSTEM_PROMPT,
    build_user_prompt,
)


class TestRefinePrompts:
    def test_system_prompt_names_both_markers(self):
        assert EMAIL_MARKER in REFINE_SYSTEM_PROMPT
        assert EVAL_MARKER in REFINE_SYSTEM_PROMPT

    def test_user_prompt_describes_tone(self, sample_draft):
        tone = ToneSettings(formality=5, confidence=1, seniority="professional", length="short")
        prompt = build_user_prompt(sample_draft, tone, EmailCategory.REFERRAL)

        assert "refine this referral email" in prompt
        assert "very formal in tone" in prompt
        assert "hesitant in confidence" in prompt
        assert "professional level professional" in prompt
        assert "short in length" in prompt

    def test_user_prompt_includes_rendered_draft(self, sample_draft, default_tone):
        prompt = build_user_prompt(sample_draft, default_tone, EmailCategory.NETWORKING)

        assert "Subject: Coffee Chat About Google" in prompt
        assert "Hello [Recipient Name]," in prompt
        assert "neutral in tone" in prompt
        assert "moderate in confidence" in prompt
        assert prompt.rstrip().endswith("(subject, greeting, body, closing)")
