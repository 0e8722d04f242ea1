"""Tests for the tone-driven style passes."""

import pytest

from email_polisher.domain.models import DraftOutput, ToneSettings
from email_polisher.domain.types import LengthPreference, Seniority
from email_polisher.drafting.style import (
    apply_confidence,
    apply_formality,
    apply_length,
    apply_seniority,
    apply_style,
    apply_warmth,
)
from email_polisher.resources.bundle import ResourceBundle

# ---------------------------------------------------------------------------
# Formality
# ---------------------------------------------------------------------------


class TestFormality:
    """Casual vocabulary and contractions at formality >= 4."""

    def test_below_threshold_unchanged(self, resources: ResourceBundle) -> None:
        text = "hey, I can't make it"
        assert apply_formality(text, 3, resources.style_lexicons) == text

    def test_casual_words_and_named_contractions(self, resources: ResourceBundle) -> None:
        result = apply_formality("I can't come, gonna be late", 4, resources.style_lexicons)
        assert result == "I cannot come, going to be late"

    def test_removed_word_leaves_single_space(self, resources: ResourceBundle) -> None:
        assert apply_formality("I just wanted to ask", 5, resources.style_lexicons) == (
            "I wanted to ask"
        )

    def test_no_contractions_remain(self, resources: ResourceBundle) -> None:
        text = (
            "I'm sure you're busy and we'll talk. It's fine, I'd like that. "
            "They've left, so don't worry and won't they? Couldn't be better."
        )
        result = apply_formality(text, 5, resources.style_lexicons)
        assert "'" not in result
        assert "I am sure you are busy and we will talk." in result
        assert "do not worry" in result
        assert "will not they" in result

    def test_newlines_preserved(self, resources: ResourceBundle) -> None:
        assert apply_formality("Thanks,\n[Your Name]", 5, resources.style_lexicons) == (
            "Thanks,\n[Your Name]"
        )


# ---------------------------------------------------------------------------
# Warmth and confidence
# ---------------------------------------------------------------------------


class TestWarmth:
    def test_returns_sections_unchanged(self) -> None:
        sections = ["One.", "Two."]
        result = apply_warmth(sections, 5)
        assert result == sections
        assert result is not sections


class TestConfidence:
    """Hedging at low confidence, hedge stripping at high confidence."""

    def test_low_confidence_hedges(self) -> None:
        assert apply_confidence("I recommend the second option.", 1) == (
            "perhaps the second option."
        )

    def test_high_confidence_strips_hedges(self) -> None:
        result = apply_confidence("I think maybe we might meet .", 5)
        assert "might" not in result
        assert "maybe" not in result
        assert result == "I am confident I suggest we meet."

    def test_neutral_unchanged(self) -> None:
        assert apply_confidence("Perhaps I think so.", 3) == "Perhaps I think so."


# ---------------------------------------------------------------------------
# Seniority
# ---------------------------------------------------------------------------


class TestSeniority:
    """Seniority phrase appended once to the last section."""

    def test_student_addition(self, resources: ResourceBundle) -> None:
        result = apply_seniority(["Hi.", "Bye."], Seniority.STUDENT, resources.style_lexicons)
        assert result == ["Hi.", "Bye. I am eager to learn from your experience."]

    def test_professional_addition(self, resources: ResourceBundle) -> None:
        result = apply_seniority(["Bye."], Seniority.PROFESSIONAL, resources.style_lexicons)
        assert result == ["Bye. I would welcome the chance to collaborate."]

    @pytest.mark.parametrize("seniority", list(Seniority))
    def test_idempotent(self, resources: ResourceBundle, seniority: Seniority) -> None:
        once = apply_seniority(["Bye."], seniority, resources.style_lexicons)
        assert apply_seniority(once, seniority, resources.style_lexicons) == once

    def test_vocabulary_present_skips_addition(self, resources: ResourceBundle) -> None:
        sections = ["I hope to learn a lot."]
        assert apply_seniority(sections, Seniority.STUDENT, resources.style_lexicons) == sections

    def test_empty_body(self, resources: ResourceBundle) -> None:
        assert apply_seniority([], Seniority.STUDENT, resources.style_lexicons) == []


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


class TestLength:
    def test_short_compresses(self) -> None:
        text = "It was a very wonderful talk in order to learn."
        result = apply_length(text, LengthPreference.SHORT)
        assert result == "It was a good talk to learn."

    def test_long_elaborates(self) -> None:
        assert apply_length("It was good.", LengthPreference.LONG) == (
            "It was excellent and valuable."
        )

    def test_medium_unchanged(self) -> None:
        text = "It was a very wonderful talk."
        assert apply_length(text, LengthPreference.MEDIUM) == text


# ---------------------------------------------------------------------------
# apply_style
# ---------------------------------------------------------------------------


class TestApplyStyle:
    """All passes together."""

    def test_input_not_mutated(self, sample_draft: DraftOutput, resources: ResourceBundle) -> None:
        before = sample_draft.model_copy(deep=True)
        tone = ToneSettings(formality=5, confidence=5, seniority="professional", length="long")
        apply_style(sample_draft, tone, resources.style_lexicons)
        assert sample_draft == before

    def test_formal_draft_has_no_contractions(
        self, sample_draft: DraftOutput, resources: ResourceBundle
    ) -> None:
        tone = ToneSettings(formality=5, confidence=3, seniority="student", length="medium")
        result = apply_style(sample_draft, tone, resources.style_lexicons)
        assert "'" not in result.all_text()
        assert result.closing == "Best regards,\n[Your Name]"

    def test_seniority_only_touches_body(
        self, sample_draft: DraftOutput, resources: ResourceBundle, default_tone: ToneSettings
    ) -> None:
        result = apply_style(sample_draft, default_tone, resources.style_lexicons)
        assert result.subject == sample_draft.subject
        assert result.body_sections[-1].endswith("I am eager to learn from your experience.")
