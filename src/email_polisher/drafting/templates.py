"""Template-filling draft construction.

Each category has a template in ``templates.json``. Placeholder values come
from a light keyword extraction over the description, with caller-supplied
``overrides`` taking precedence. Placeholders left without a value are
rewritten from ``{key}`` to ``{{key}}`` so callers can spot them.
"""

from __future__ import annotations

import re

from email_polisher.domain.errors import TemplateNotFoundError
from email_polisher.domain.models import DraftInput, DraftOutput
from email_polisher.domain.types import EmailCategory
from email_polisher.resources.models import TemplatesConfig

# Fields rendered outside the body.
FRAME_FIELDS = frozenset({"subject", "greeting", "closing"})

DEFAULT_SECTION = "{message_purpose}"

REFERRAL_COMPANIES: tuple[str, ...] = (
    "google",
    "microsoft",
    "amazon",
    "meta",
    "apple",
    "netflix",
    "facebook",
    "tesla",
    "uber",
    "airbnb",
)

MAX_LITERAL_TOPIC_LENGTH = 50

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")
_RA = re.compile(r"\bra\b")
_POSITION_PHRASE = re.compile(r"(\w+)\s+(position|role)", re.IGNORECASE)


def _networking_info(text: str, normalized: str) -> dict[str, str]:
    if "internship" in normalized:
        return {
            "topic": "Professional Networking Opportunity",
            "email_goal": "exploring internship opportunities",
        }
    if any(word in normalized for word in ("job", "position", "role")):
        return {
            "topic": "Professional Networking Opportunity",
            "email_goal": "exploring job opportunities",
        }
    if "research" in normalized or _RA.search(normalized):
        return {
            "topic": "Research Collaboration Opportunity",
            "email_goal": "exploring research opportunities",
        }
    if any(word in normalized for word in ("coffee", "chat", "connect")):
        return {
            "topic": "Professional Connection",
            "email_goal": "establishing a professional connection",
        }
    return {
        "topic": "Professional Networking",
        "email_goal": "professional networking and collaboration",
    }


def _followup_info(text: str, normalized: str) -> dict[str, str]:
    if "interview" in normalized:
        topic = "Our Interview"
    elif "meeting" in normalized:
        topic = "Our Meeting"
    elif "conversation" in normalized:
        topic = "Our Conversation"
    else:
        topic = "Our Discussion"
    return {"topic": topic, "desired_outcome": text, "prior_contact_date": "last week"}


def _referral_role(text: str, normalized: str) -> str:
    if "software engineer" in normalized or "swe" in normalized:
        return "Software Engineer position"
    if "intern" in normalized:
        return "Software Engineering Internship"
    if "research" in normalized or _RA.search(normalized):
        return "Research Assistant position"
    if "data scien" in normalized:
        return "Data Scientist position"
    if "position" in normalized or "role" in normalized:
        match = _POSITION_PHRASE.search(text)
        if match:
            return f"{match.group(1)} {match.group(2)}"
    return "the position"


def _referral_info(text: str, normalized: str) -> dict[str, str]:
    company = next((c for c in REFERRAL_COMPANIES if c in normalized), None)
    return {
        "target_company": company.capitalize() if company else "the company",
        "role_or_position": _referral_role(text, normalized),
        "skills_or_projects": "relevant technical experience and projects",
    }


def _thankyou_info(text: str, normalized: str) -> dict[str, str]:
    if "interview" in normalized:
        return {
            "specific_reason": "taking the time to interview me",
            "topic": "Interview Follow-up",
        }
    if "meeting" in normalized:
        return {"specific_reason": "meeting with me", "topic": "Meeting Follow-up"}
    if "help" in normalized or "advice" in normalized:
        return {"specific_reason": "your guidance and advice", "topic": "Thank You"}
    return {"specific_reason": "your time and assistance", "topic": "Thank You"}


def _other_info(text: str, normalized: str) -> dict[str, str]:
    topic = "Professional Inquiry" if len(text) > MAX_LITERAL_TOPIC_LENGTH else text
    return {"topic": topic}


_CATEGORY_EXTRACTORS = {
    EmailCategory.NETWORKING: _networking_info,
    EmailCategory.FOLLOWUP: _followup_info,
    EmailCategory.REFERRAL: _referral_info,
    EmailCategory.THANKYOU: _thankyou_info,
    EmailCategory.OTHER: _other_info,
}


def extract_key_information(text: str, category: EmailCategory) -> dict[str, str]:
    """Derive placeholder values for *category* from the description.

    ``message_purpose`` and ``topic`` default to the raw text; the category
    extractor may replace ``topic`` and add category-specific keys.
    """
    info = {"message_purpose": text, "topic": text}
    if category == EmailCategory.NETWORKING:
        info["email_goal"] = text
    info.update(_CATEGORY_EXTRACTORS[category](text, text.lower()))
    return info


def fill_placeholders(template: str, values: dict[str, str] | None = None) -> str:
    """Substitute ``{key}`` placeholders from *values*.

    Placeholders with no value become ``{{key}}``. Substituted values are not
    scanned again, so a value containing braces is left as written.
    """
    values = values or {}

    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in values:
            return values[key]
        return "{{" + key + "}}"

    return _PLACEHOLDER.sub(replace, template)


def build_from_template(
    draft_input: DraftInput, category: EmailCategory, templates: TemplatesConfig
) -> DraftOutput:
    """Fill the category template for *draft_input*.

    Args:
        draft_input: The request; ``overrides`` win over extracted values.
        category: The category chosen by the categorizer.
        templates: Loaded template resource.

    Returns:
        The filled, unstyled draft.

    Raises:
        TemplateNotFoundError: If *templates* has no entry for *category*.
    """
    template = templates.get(category)
    if template is None:
        raise TemplateNotFoundError(category)

    values = {
        **extract_key_information(draft_input.text, category),
        **(draft_input.overrides or {}),
    }

    body_sections = [
        fill_placeholders(section, values)
        for field in template.required
        if field not in FRAME_FIELDS and (section := template.section(field))
    ]
    if not body_sections:
        body_sections = [fill_placeholders(DEFAULT_SECTION, values)]

    return DraftOutput(
        subject=fill_placeholders(template.subject, values),
        greeting=fill_placeholders(template.greeting, values),
        body_sections=body_sections,
        closing=fill_placeholders(template.closing, values),
    )
