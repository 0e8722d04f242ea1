"""Fixed-vocabulary context extraction from an email description.

No semantic parsing happens here: every field is set by looking for known
words or phrases in the lower-cased text.
"""

from __future__ import annotations

import re

from email_polisher.domain.models import ExtractedContext
from email_polisher.domain.types import ContextIntent, Timeframe

COMPANIES: tuple[str, ...] = (
    "microsoft",
    "google",
    "amazon",
    "meta",
    "apple",
    "tesla",
    "netflix",
    "uber",
    "airbnb",
    "facebook",
)

SCHOOLS: tuple[str, ...] = (
    "rutgers",
    "mit",
    "stanford",
    "berkeley",
    "carnegie mellon",
    "georgia tech",
)

RESEARCH_AREAS: tuple[str, ...] = (
    "machine learning",
    "artificial intelligence",
    "computer vision",
    "natural language processing",
    "robotics",
    "data science",
    "cybersecurity",
    "bioinformatics",
    "human-computer interaction",
)

# A research area only counts when the text is about research at all.
RESEARCH_CUES: tuple[str, ...] = ("research", "lab", "paper", "publication")

BUSINESS_AREAS: tuple[str, ...] = (
    "product management",
    "consulting",
    "venture capital",
    "investment banking",
    "startups",
    "marketing",
    "entrepreneurship",
)

# Proper spellings for names that are not simply title-cased.
DISPLAY_NAMES: dict[str, str] = {
    "mit": "MIT",
    "airbnb": "Airbnb",
}

_RA_PATTERN = re.compile(r"\bra\b")


def display_name(name: str) -> str:
    """Return the human-facing spelling of a company or school key."""
    return DISPLAY_NAMES.get(name, name.title())


def _contains_word(text: str, word: str) -> bool:
    return re.search(rf"\b{re.escape(word)}\b", text) is not None


def _first_word_match(text: str, vocabulary: tuple[str, ...]) -> str | None:
    return next((item for item in vocabulary if _contains_word(text, item)), None)


def _detect_intent(text: str) -> ContextIntent:
    if "research assistant" in text or _RA_PATTERN.search(text):
        intent = ContextIntent.RESEARCH_ASSISTANT
    elif "internship" in text:
        intent = ContextIntent.INTERNSHIP
    elif "call" in text or "talk" in text:
        intent = ContextIntent.CONVERSATION
    elif "connect" in text:
        intent = ContextIntent.NETWORKING
    else:
        intent = ContextIntent.GENERAL

    if "work together" in text or "collaborate" in text:
        intent = ContextIntent.COLLABORATION
    return intent


def _detect_timeframe(text: str) -> Timeframe | None:
    if "soon" in text:
        return Timeframe.SOON
    if "next week" in text:
        return Timeframe.NEXT_WEEK
    return None


def extract_context(text: str) -> ExtractedContext:
    """Build the per-request ``ExtractedContext`` for *text*.

    Args:
        text: The original email description.

    Returns:
        The extracted context. Company and school values are the lower-case
        vocabulary keys; use :func:`display_name` for presentation.
    """
    normalized = text.lower()

    company = _first_word_match(normalized, COMPANIES)
    school = _first_word_match(normalized, SCHOOLS)

    connection = None
    if "went to" in normalized and school:
        connection = f"shared alma mater ({school})"
    if "work at" in normalized and company:
        connection = f"works at {company}"

    specific_reason = None
    if "what it's like" in normalized or "what its like" in normalized:
        specific_reason = "learn about the experience"

    research_mention = None
    if any(cue in normalized for cue in RESEARCH_CUES):
        research_mention = next((area for area in RESEARCH_AREAS if area in normalized), None)

    business_mention = next((area for area in BUSINESS_AREAS if area in normalized), None)

    return ExtractedContext(
        company=company,
        school=school,
        connection=connection,
        intent=_detect_intent(normalized),
        timeframe=_detect_timeframe(normalized),
        specific_reason=specific_reason,
        research_mention=research_mention,
        business_mention=business_mention,
    )
