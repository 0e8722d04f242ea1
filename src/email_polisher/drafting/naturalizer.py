"""Post-generation cleanup of body sections.

Four passes run in order over ``body_sections``: phrase repair, grammar and
capitalization, redundancy reduction, then flow repair. The flow pass relies
on the text produced by the first three. None of the passes raise.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

from email_polisher.domain.models import DraftOutput
from email_polisher.drafting.context import COMPANIES, SCHOOLS, display_name

OPENER = "I hope this message finds you well."

AWKWARD_INTRODUCTIONS: tuple[str, ...] = (
    "I'm a professional reaching out to connect with you.",
    "I'm a student reaching out to connect with you.",
)
_AWKWARD_INTRO_PATTERN = re.compile(
    r"^I am a (professional|student) reaching out to connect with you\."
)

_PROPER_NOUN_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = tuple(
    (re.compile(rf"\b{re.escape(name)}\b"), display_name(name)) for name in (*COMPANIES, *SCHOOLS)
)

# Concept -> (pattern detecting it, synonym used for repeats).
REDUNDANT_CONCEPTS: dict[str, tuple[re.Pattern[str], str]] = {
    "reaching_out": (re.compile(r"\breaching out\b"), "writing"),
    "connect": (re.compile(r"\bconnect\b"), "speak with you"),
    "opportunities": (re.compile(r"\bopportunities\b"), "openings"),
}

# (trigger in current section, trigger in next section, prefix for next section)
TRANSITIONS: tuple[tuple[tuple[str, ...], str, str], ...] = (
    (("discovered",), "interested", "Given this connection,"),
    (
        ("currently at", "currently a student"),
        "interested",
        "As someone looking to advance my career,",
    ),
)
_TRANSITION_PREFIXES = tuple(prefix for _, _, prefix in TRANSITIONS)


class QualityAssessment(BaseModel):
    """Advisory report on how natural a generated draft reads."""

    is_valid: bool
    issues: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


def repair_introductions(sections: list[str]) -> list[str]:
    """Replace known-awkward generated introductions with a neutral opener."""
    repaired: list[str] = []
    for section in sections:
        for phrase in AWKWARD_INTRODUCTIONS:
            section = section.replace(phrase, OPENER)
        section = _AWKWARD_INTRO_PATTERN.sub(OPENER, section)
        repaired.append(section)
    return repaired


def fix_grammar(sections: list[str]) -> list[str]:
    """Fix pronoun and proper-noun casing, doubled spaces, and doubled periods."""
    fixed: list[str] = []
    for section in sections:
        text = re.sub(r"\bi(?=('m|'d|'ll|'ve)?\b)", "I", section)
        for pattern, name in _PROPER_NOUN_PATTERNS:
            text = pattern.sub(name, text)

        if "I'm very interested in" in text and "and would love to" in text:
            text = text.replace("and would love to", "I would appreciate the opportunity to")

        text = text.replace(". Happy to collaborate on next steps.", ".")
        text = text.replace("Happy to collaborate on next steps.", "")

        text = re.sub(r" {2,}", " ", text)
        text = re.sub(r"\.{2,}", ".", text)
        fixed.append(text.strip())
    return fixed


def reduce_redundancy(sections: list[str]) -> list[str]:
    """Swap the repeat of a tracked concept for a synonym.

    The first section mentioning a concept keeps it; the first occurrence in
    every later section is replaced.
    """
    used: set[str] = set()
    reduced: list[str] = []
    for section in sections:
        processed = section
        for concept, (pattern, synonym) in REDUNDANT_CONCEPTS.items():
            if not pattern.search(section):
                continue
            if concept in used:
                processed = pattern.sub(synonym, processed, count=1)
            used.add(concept)
        reduced.append(processed)
    return reduced


def _lower_first(text: str) -> str:
    # The pronoun "I" keeps its capital.
    if re.match(r"I\b", text):
        return text
    return text[:1].lower() + text[1:]


def repair_flow(sections: list[str]) -> list[str]:
    """Merge a bare opener into the introduction and add transitions."""
    if len(sections) < 2:
        return list(sections)

    improved = list(sections)

    if OPENER in improved[0] and len(improved) > 2:
        if "I'm a" in improved[1] or "I am a" in improved[1]:
            improved[0] = f"{improved[0]} {improved[1]}"
            del improved[1]

    for i in range(len(improved) - 1):
        current, following = improved[i], improved[i + 1]
        if following.startswith(_TRANSITION_PREFIXES):
            continue
        for current_triggers, next_trigger, prefix in TRANSITIONS:
            if any(t in current for t in current_triggers) and next_trigger in following:
                improved[i + 1] = f"{prefix} {_lower_first(following)}"
                break

    return improved


def naturalize(draft: DraftOutput) -> DraftOutput:
    """Run all four cleanup passes over the draft's body sections."""
    sections = repair_introductions(draft.body_sections)
    sections = fix_grammar(sections)
    sections = reduce_redundancy(sections)
    sections = repair_flow(sections)
    return draft.model_copy(update={"body_sections": sections})


def assess_quality(draft: DraftOutput) -> QualityAssessment:
    """Report awkward phrasing, overused words, and thin bodies in a draft."""
    issues: list[str] = []
    improvements: list[str] = []
    all_text = draft.all_text()

    if "reaching out to connect with you" in all_text:
        issues.append("Awkward introduction phrase")
        improvements.append("Use a more natural opening like 'I hope this message finds you well'")

    if "I am a professional" in all_text or "I'm a professional" in all_text:
        issues.append("Vague professional reference")
        improvements.append("Be more specific about role or background")

    counts: dict[str, int] = {}
    for word in all_text.lower().split():
        counts[word] = counts.get(word, 0) + 1
    overused = [word for word, count in counts.items() if count > 3 and len(word) > 4]
    if overused:
        issues.append(f"Overused words: {', '.join(overused)}")
        improvements.append("Vary vocabulary to avoid repetition")

    if not draft.body_sections:
        issues.append("No body content")
    elif len(draft.body_sections) == 1:
        improvements.append("Consider adding more context or details")

    return QualityAssessment(is_valid=not issues, issues=issues, improvements=improvements)
