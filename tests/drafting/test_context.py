"""Tests for fixed-vocabulary context extraction."""

import pytest

from email_polisher.domain.types import ContextIntent, Timeframe
from email_polisher.drafting.context import display_name, extract_context


class TestCompanyAndSchool:
    """Company and school lookups."""

    def test_shared_alma_mater(self) -> None:
        context = extract_context("I went to Rutgers and want to talk to someone at Google")
        assert context.company == "google"
        assert context.school == "rutgers"
        assert context.connection == "shared alma mater (rutgers)"

    def test_work_at_overrides_alma_mater(self) -> None:
        context = extract_context("I went to MIT and you work at Google")
        assert context.connection == "works at google"

    def test_company_is_whole_word(self) -> None:
        context = extract_context("I study metadata systems")
        assert context.company is None

    def test_no_connection_without_cue(self) -> None:
        context = extract_context("Stanford student interested in Apple")
        assert context.school == "stanford"
        assert context.company == "apple"
        assert context.connection is None


class TestIntent:
    """Intent priority and the collaboration override."""

    @pytest.mark.parametrize(
        ("text", "intent"),
        [
            ("Looking for a research assistant position", ContextIntent.RESEARCH_ASSISTANT),
            ("Is there an RA opening in your lab?", ContextIntent.RESEARCH_ASSISTANT),
            ("RA or internship, either works", ContextIntent.RESEARCH_ASSISTANT),
            ("I'm a grad student looking for an internship", ContextIntent.INTERNSHIP),
            ("Could we talk about internship openings?", ContextIntent.INTERNSHIP),
            ("Could we hop on a call?", ContextIntent.CONVERSATION),
            ("I'd like to connect", ContextIntent.NETWORKING),
            ("Just saying hi", ContextIntent.GENERAL),
            ("Can we call about how to collaborate?", ContextIntent.COLLABORATION),
            ("I'd love to work together on this", ContextIntent.COLLABORATION),
        ],
    )
    def test_intent(self, text: str, intent: ContextIntent) -> None:
        assert extract_context(text).intent == intent


class TestOtherFields:
    def test_timeframe_soon(self) -> None:
        assert extract_context("hoping to chat soon").timeframe == Timeframe.SOON

    def test_timeframe_next_week(self) -> None:
        assert extract_context("free next week?").timeframe == Timeframe.NEXT_WEEK

    def test_specific_reason(self) -> None:
        context = extract_context("I want to hear what it's like to work there")
        assert context.specific_reason == "learn about the experience"

    def test_research_mention_needs_research_cue(self) -> None:
        assert extract_context("I read your lab's paper on computer vision").research_mention == (
            "computer vision"
        )
        assert extract_context("I like computer vision").research_mention is None

    def test_business_mention(self) -> None:
        assert extract_context("I am exploring consulting").business_mention == "consulting"


class TestDisplayName:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("mit", "MIT"),
            ("airbnb", "Airbnb"),
            ("google", "Google"),
            ("georgia tech", "Georgia Tech"),
        ],
    )
    def test_display_name(self, key: str, expected: str) -> None:
        assert display_name(key) == expected
