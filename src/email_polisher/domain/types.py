"""Domain enumerations for the email drafting pipeline."""

from enum import StrEnum


class EmailCategory(StrEnum):
    """Intent categories an email description can be classified into."""

    NETWORKING = "networking"
    FOLLOWUP = "followup"
    REFERRAL = "referral"
    THANKYOU = "thankyou"
    OTHER = "other"


class Seniority(StrEnum):
    """Career stage of the sender, used by the seniority style pass."""

    STUDENT = "student"
    PROFESSIONAL = "professional"


class LengthPreference(StrEnum):
    """Target length of the styled draft."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class ContextIntent(StrEnum):
    """Purpose detected in the free-text description."""

    GENERAL = "general"
    RESEARCH_ASSISTANT = "research_assistant"
    INTERNSHIP = "internship"
    CONVERSATION = "conversation"
    NETWORKING = "networking"
    COLLABORATION = "collaboration"


class Timeframe(StrEnum):
    """Urgency hint detected in the description."""

    SOON = "soon"
    NEXT_WEEK = "next week"


class WordCountBand(StrEnum):
    """Coarse bucket for the total word count of a draft."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    VERY_LONG = "very-long"


class DraftStrategyName(StrEnum):
    """Available draft construction strategies."""

    GENERATION = "generation"
    TEMPLATE = "template"


# Warning code prefixes; CONSISTENCY_ never gates a CheckResult boolean.
COMPLETENESS_PREFIX = "COMPLETENESS_"
PROFESSIONALISM_PREFIX = "PROFESSIONALISM_"
CLARITY_PREFIX = "CLARITY_"
ETHICAL_PREFIX = "ETHICAL_"
CONSISTENCY_PREFIX = "CONSISTENCY_"
