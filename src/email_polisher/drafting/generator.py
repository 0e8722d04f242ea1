"""Content generation from extracted context.

Each part of the email is produced by an ordered table of
:class:`GenerationRule` entries. The first rule whose predicate holds produces
the text; tables that always yield text end with a catch-all rule or a
fallback producer.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from email_polisher.domain.models import DraftOutput, ExtractedContext, ToneSettings
from email_polisher.domain.types import ContextIntent, EmailCategory, Seniority, Timeframe
from email_polisher.drafting.context import display_name

RECIPIENT_PLACEHOLDER = "[Recipient Name]"
SENDER_PLACEHOLDER = "[Your Name]"
OPENER = "I hope this message finds you well."

FALLBACK_SLICE_LENGTH = 100


@dataclass(frozen=True)
class GenerationInput:
    """Everything a generation rule may look at."""

    context: ExtractedContext
    category: EmailCategory
    tone: ToneSettings
    text: str

    @property
    def company(self) -> str:
        return display_name(self.context.company or "")

    @property
    def school(self) -> str:
        return display_name(self.context.school or "")


@dataclass(frozen=True)
class GenerationRule:
    """A named ``(predicate, producer)`` pair."""

    name: str
    applies: Callable[[GenerationInput], bool]
    produce: Callable[[GenerationInput], str]


def first_match(rules: tuple[GenerationRule, ...], data: GenerationInput) -> str | None:
    """Return the output of the first applicable rule, or ``None``."""
    for rule in rules:
        if rule.applies(data):
            return rule.produce(data)
    return None


def _always(_: GenerationInput) -> bool:
    return True


def _intent_is(intent: ContextIntent) -> Callable[[GenerationInput], bool]:
    return lambda data: data.context.intent == intent


def _category_is(category: EmailCategory) -> Callable[[GenerationInput], bool]:
    return lambda data: data.category == category


# ---------------------------------------------------------------------------
# Subject
# ---------------------------------------------------------------------------

CATEGORY_SUBJECTS: dict[EmailCategory, str] = {
    EmailCategory.NETWORKING: "Professional Networking Opportunity",
    EmailCategory.FOLLOWUP: "Following Up on Our Previous Conversation",
    EmailCategory.REFERRAL: "Referral Request",
    EmailCategory.THANKYOU: "Thank You",
    EmailCategory.OTHER: "Professional Inquiry",
}

SUBJECT_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "alumni_connection",
        lambda d: bool(d.context.company and d.context.school and d.context.connection),
        lambda d: f"Fellow {d.school} Alum - {d.company} Connection",
    ),
    GenerationRule(
        "research_assistant",
        _intent_is(ContextIntent.RESEARCH_ASSISTANT),
        lambda d: "Research Assistant Opportunity Inquiry",
    ),
    GenerationRule(
        "internship_at_company",
        lambda d: d.context.intent == ContextIntent.INTERNSHIP and bool(d.context.company),
        lambda d: f"{d.company} Internship Inquiry",
    ),
    GenerationRule(
        "conversation_about_company",
        lambda d: d.context.intent == ContextIntent.CONVERSATION and bool(d.context.company),
        lambda d: f"Coffee Chat About {d.company}",
    ),
    GenerationRule(
        "company",
        lambda d: bool(d.context.company),
        lambda d: f"Professional Connection - {d.company}",
    ),
    GenerationRule("category_default", _always, lambda d: CATEGORY_SUBJECTS[d.category]),
)


# ---------------------------------------------------------------------------
# Greeting and closing
# ---------------------------------------------------------------------------

GREETING_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "formal", lambda d: d.tone.formality >= 4, lambda d: f"Dear {RECIPIENT_PLACEHOLDER},"
    ),
    GenerationRule(
        "neutral", lambda d: d.tone.formality >= 3, lambda d: f"Hello {RECIPIENT_PLACEHOLDER},"
    ),
    GenerationRule("casual", _always, lambda d: f"Hi {RECIPIENT_PLACEHOLDER},"),
)

CLOSING_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "formal", lambda d: d.tone.formality >= 4, lambda d: f"Sincerely,\n{SENDER_PLACEHOLDER}"
    ),
    GenerationRule(
        "neutral", lambda d: d.tone.formality >= 3, lambda d: f"Best regards,\n{SENDER_PLACEHOLDER}"
    ),
    GenerationRule("casual", _always, lambda d: f"Thanks,\n{SENDER_PLACEHOLDER}"),
)


# ---------------------------------------------------------------------------
# Body: introduction, research interest, connection
# ---------------------------------------------------------------------------

INTRODUCTION_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "student_at_school",
        lambda d: bool(d.context.school) and d.tone.seniority == Seniority.STUDENT,
        lambda d: (
            f"{OPENER} My name is {SENDER_PLACEHOLDER}, and I'm currently a student "
            f"at {d.school}."
        ),
    ),
    GenerationRule(
        "student",
        lambda d: d.tone.seniority == Seniority.STUDENT,
        lambda d: (
            f"{OPENER} My name is {SENDER_PLACEHOLDER}, and I'm a student interested in "
            "professional opportunities."
        ),
    ),
    GenerationRule(
        "formal_professional",
        lambda d: d.tone.formality >= 4,
        lambda d: f"{OPENER} My name is {SENDER_PLACEHOLDER}, and I'm a professional in the field.",
    ),
    GenerationRule("opener_only", _always, lambda d: OPENER),
)

RESEARCH_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "research_interest",
        lambda d: bool(d.context.research_mention),
        lambda d: (
            f"I have been following recent work in {d.context.research_mention} and was "
            "excited to read about your research in this area."
        ),
    ),
)

CONNECTION_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "alumni_at_company",
        lambda d: bool(d.context.company and d.context.school and d.context.connection),
        lambda d: (
            f"I just discovered that you work at {d.company} and are also a {d.school} "
            "alumnus, which is an exciting connection since I'm currently studying there."
        ),
    ),
    GenerationRule(
        "works_at_company",
        lambda d: bool(d.context.company and d.context.connection),
        lambda d: f"I noticed that you work at {d.company}, which caught my attention.",
    ),
    GenerationRule(
        "shared_school",
        lambda d: bool(d.context.school and d.context.connection),
        lambda d: f"I noticed that we share a connection through {d.school}.",
    ),
    GenerationRule(
        "company",
        lambda d: bool(d.context.company),
        lambda d: f"I have long admired the work being done at {d.company}.",
    ),
    GenerationRule(
        "business_area",
        lambda d: bool(d.context.business_mention),
        lambda d: (
            f"Your experience in {d.context.business_mention} is closely related to the "
            "path I hope to pursue."
        ),
    ),
)


# ---------------------------------------------------------------------------
# Body: purpose
# ---------------------------------------------------------------------------


def _thanks_reason(text: str) -> str:
    normalized = text.lower()
    if "interview" in normalized:
        return "taking the time to interview me"
    if "meeting" in normalized or "meet with" in normalized:
        return "meeting with me"
    if "help" in normalized or "advice" in normalized:
        return "your guidance and advice"
    return "your time and assistance"


def _referral_role(data: GenerationInput) -> str:
    normalized = data.text.lower()
    if "software engineer" in normalized or re.search(r"\bswe\b", normalized):
        role = "a Software Engineer position"
    elif "intern" in normalized:
        role = "a Software Engineering Internship"
    elif "data scien" in normalized:
        role = "a Data Scientist position"
    else:
        role = "a position on your team"
    if data.context.company:
        role = f"{role} at {data.company}"
    return role


def rewrite_fallback_purpose(text: str) -> str:
    """Turn the raw description into a passable purpose sentence."""
    purpose = text.strip()[:FALLBACK_SLICE_LENGTH].rstrip(" .!?").lower()

    purpose = re.sub(r"^(can i|could i|may i)\b", "I would like to", purpose)
    purpose = re.sub(r"^i want to\b", "I am interested in", purpose)
    purpose = re.sub(r"^i need to\b", "I would like to", purpose)
    purpose = purpose.replace("how i contribute", "how I might contribute")
    purpose = purpose.replace("how i might", "how I might")

    if not purpose.lower().startswith(("i am", "i would")):
        purpose = f"I am writing to inquire about {purpose}"

    return purpose[:1].upper() + purpose[1:] + "."


PURPOSE_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "research_assistant",
        _intent_is(ContextIntent.RESEARCH_ASSISTANT),
        lambda d: (
            "I am writing to inquire about research assistant opportunities in your lab. "
            "I am very interested in contributing to your research and would appreciate the "
            "chance to discuss how my background and interests align with your current projects."
        ),
    ),
    GenerationRule(
        "internship_at_company",
        lambda d: d.context.intent == ContextIntent.INTERNSHIP and bool(d.context.company),
        lambda d: (
            f"I am currently seeking internship opportunities and am particularly drawn to "
            f"{d.company}. I would welcome the opportunity to learn more about potential "
            "openings and discuss how I might contribute to your team."
        ),
    ),
    GenerationRule(
        "conversation_about_company",
        lambda d: (
            d.context.intent == ContextIntent.CONVERSATION
            and bool(d.context.specific_reason)
            and bool(d.context.company)
        ),
        lambda d: (
            f"I am very interested in learning more about {d.company} and would greatly "
            f"appreciate the opportunity to {d.context.specific_reason} from someone with "
            "your experience."
        ),
    ),
    GenerationRule(
        "conversation",
        lambda d: (
            d.context.intent == ContextIntent.CONVERSATION and bool(d.context.specific_reason)
        ),
        lambda d: (
            f"I would greatly appreciate the opportunity to {d.context.specific_reason} "
            "and learn about your career journey."
        ),
    ),
    GenerationRule(
        "networking_at_company",
        lambda d: d.context.intent == ContextIntent.NETWORKING and bool(d.context.company),
        lambda d: (
            f"I am interested in learning more about {d.company} and would value the chance "
            "to connect with professionals in the organization to better understand the "
            "company culture and potential opportunities."
        ),
    ),
    GenerationRule(
        "collaboration",
        _intent_is(ContextIntent.COLLABORATION),
        lambda d: (
            "I would welcome the opportunity to explore how we might collaborate on "
            f"{d.context.research_mention or 'work of mutual interest'}."
        ),
    ),
    GenerationRule(
        "thank_you",
        _category_is(EmailCategory.THANKYOU),
        lambda d: f"I wanted to thank you for {_thanks_reason(d.text)}.",
    ),
    GenerationRule(
        "follow_up",
        _category_is(EmailCategory.FOLLOWUP),
        lambda d: (
            "I am following up on our previous conversation and wanted to check in on "
            "any updates."
        ),
    ),
    GenerationRule(
        "referral",
        _category_is(EmailCategory.REFERRAL),
        lambda d: (
            f"I am applying for {_referral_role(d)} and would be grateful if you would "
            "consider referring me."
        ),
    ),
    GenerationRule("rewritten_input", _always, lambda d: rewrite_fallback_purpose(d.text)),
)


# ---------------------------------------------------------------------------
# Body: call to action
# ---------------------------------------------------------------------------

CALL_TO_ACTION_RULES: tuple[GenerationRule, ...] = (
    GenerationRule(
        "soon",
        lambda d: d.context.timeframe == Timeframe.SOON,
        lambda d: "Would you be available for a brief call sometime soon to discuss this further?",
    ),
    GenerationRule(
        "next_week",
        lambda d: d.context.timeframe == Timeframe.NEXT_WEEK,
        lambda d: "Would you have time for a brief call next week?",
    ),
    GenerationRule(
        "conversation",
        _intent_is(ContextIntent.CONVERSATION),
        lambda d: "Would you be open to a brief coffee chat or phone call in the coming weeks?",
    ),
    GenerationRule(
        "research_assistant",
        _intent_is(ContextIntent.RESEARCH_ASSISTANT),
        lambda d: (
            "I would be grateful for the opportunity to discuss how I might contribute to "
            "your research and learn more about available positions. Please let me know if "
            "you would be open to a short meeting."
        ),
    ),
    GenerationRule(
        "collaboration",
        _intent_is(ContextIntent.COLLABORATION),
        lambda d: "Would you be open to a short call to discuss how we might work together?",
    ),
    GenerationRule(
        "thank_you",
        _category_is(EmailCategory.THANKYOU),
        lambda d: "I look forward to staying in touch.",
    ),
    GenerationRule(
        "follow_up",
        _category_is(EmailCategory.FOLLOWUP),
        lambda d: "Please let me know if there is any additional information I can provide.",
    ),
    GenerationRule(
        "formal",
        lambda d: d.tone.formality >= 4,
        lambda d: (
            "I would greatly appreciate the opportunity to speak with you at your "
            "convenience, and I look forward to hearing from you."
        ),
    ),
    GenerationRule(
        "default",
        _always,
        lambda d: "Would you be open to a brief conversation about this?",
    ),
)


def generate_body(data: GenerationInput) -> list[str]:
    """Produce the ordered body sections, skipping optional ones that do not apply."""
    sections = [
        first_match(INTRODUCTION_RULES, data),
        first_match(RESEARCH_RULES, data),
        first_match(CONNECTION_RULES, data),
        first_match(PURPOSE_RULES, data),
        first_match(CALL_TO_ACTION_RULES, data),
    ]
    return [section for section in sections if section]


def generate_content(
    text: str,
    context: ExtractedContext,
    category: EmailCategory,
    tone: ToneSettings,
) -> DraftOutput:
    """Generate a complete, unstyled draft for the description.

    Args:
        text: The original description.
        context: Context extracted from *text*.
        category: The category chosen by the categorizer.
        tone: Tone settings; formality and seniority steer rule selection.

    Returns:
        A ``DraftOutput`` with every field populated.
    """
    data = GenerationInput(context=context, category=category, tone=tone, text=text)
    return DraftOutput(
        subject=first_match(SUBJECT_RULES, data) or CATEGORY_SUBJECTS[category],
        greeting=first_match(GREETING_RULES, data) or "",
        body_sections=generate_body(data),
        closing=first_match(CLOSING_RULES, data) or "",
    )
