"""Rule-based quality checks for a styled draft.

Five independent checks emit warning codes; the four category booleans on
:class:`~email_polisher.domain.models.CheckResult` are derived from the
code prefixes. ``CONSISTENCY_*`` warnings are advisory and never gate a
boolean.
"""

from __future__ import annotations

import re

from email_polisher.domain.models import CheckResult, DraftOutput
from email_polisher.domain.types import (
    CLARITY_PREFIX,
    COMPLETENESS_PREFIX,
    ETHICAL_PREFIX,
    PROFESSIONALISM_PREFIX,
)
from email_polisher.resources.models import GuardrailsConfig

CTA_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern)
    for pattern in (
        r"\bcall\b",
        r"\bmeet\b",
        r"\bschedule\b",
        r"\bconnect\b",
        r"\blet me know\b",
        r"\bplease\b",
        r"\bwould you\b",
        r"\bcan you\b",
        r"\bcould you\b",
        r"\blook forward\b",
        r"\bhope to hear\b",
        r"\bthank you\b",
        r"\bfeel free\b",
    )
)

INAPPROPRIATE_TERMS: tuple[str, ...] = (
    "desperate",
    "begging",
    "please hire me",
    "i need this job",
    "i'll do anything",
)

MAX_AVG_SENTENCE_WORDS = 20
MAX_SENTENCE_WORDS = 30

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def split_sentences(text: str) -> list[str]:
    """Split on runs of ``.``, ``!`` or ``?`` and drop empty fragments."""
    return [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def check_completeness(draft: DraftOutput) -> list[str]:
    warnings: list[str] = []
    if not draft.subject.strip():
        warnings.append("COMPLETENESS_MISSING_SUBJECT")
    if not draft.greeting.strip():
        warnings.append("COMPLETENESS_MISSING_GREETING")
    if not draft.closing.strip():
        warnings.append("COMPLETENESS_MISSING_CLOSING")

    body = " ".join(draft.body_sections).lower()
    if not any(pattern.search(body) for pattern in CTA_PATTERNS):
        warnings.append("COMPLETENESS_MISSING_CTA")
    return warnings


def check_professionalism(draft: DraftOutput, guardrails: GuardrailsConfig) -> list[str]:
    warnings: list[str] = []
    text = draft.all_text()
    if re.search(guardrails.slang_regex, text, re.IGNORECASE):
        warnings.append("PROFESSIONALISM_SLANG_DETECTED")
    if re.search(guardrails.emoji_regex, text):
        warnings.append("PROFESSIONALISM_EMOJI_DETECTED")
    return warnings


def check_clarity(draft: DraftOutput) -> list[str]:
    sentences = split_sentences(draft.all_text())
    if not sentences:
        return []

    word_counts = [len(sentence.split()) for sentence in sentences]
    warnings: list[str] = []
    if sum(word_counts) / len(sentences) > MAX_AVG_SENTENCE_WORDS:
        warnings.append("CLARITY_LONG_SENTENCES")
    if any(count > MAX_SENTENCE_WORDS for count in word_counts):
        warnings.append("CLARITY_RUN_ON_SENTENCE")
    return warnings


def check_ethical(draft: DraftOutput, guardrails: GuardrailsConfig) -> list[str]:
    text = draft.all_text().lower()
    warnings = [
        "ETHICAL_OVERPROMISE_DETECTED"
        for phrase in guardrails.blacklist_phrases
        if phrase.lower() in text
    ]
    warnings.extend("ETHICAL_INAPPROPRIATE_TERM" for term in INAPPROPRIATE_TERMS if term in text)
    return warnings


def check_consistency(draft: DraftOutput, guardrails: GuardrailsConfig) -> list[str]:
    text = draft.all_text()
    warnings: list[str] = []
    lowered = text.lower()
    if any(keyword.lower() in lowered for keyword in guardrails.attachment_keywords):
        warnings.append("CONSISTENCY_ATTACHMENT_REFERENCED")
    if re.search(guardrails.link_regex, text, re.IGNORECASE):
        warnings.append("CONSISTENCY_LINK_DETECTED")
    return warnings


def run_checks(draft: DraftOutput, guardrails: GuardrailsConfig) -> CheckResult:
    """Run every check over *draft* and fold the warnings into a ``CheckResult``.

    Args:
        draft: The draft to check.
        guardrails: Blacklist and regex configuration.

    Returns:
        The verdicts plus the deduplicated warnings in first-seen order.
    """
    warnings = [
        *check_completeness(draft),
        *check_professionalism(draft, guardrails),
        *check_clarity(draft),
        *check_ethical(draft, guardrails),
        *check_consistency(draft, guardrails),
    ]
    unique = list(dict.fromkeys(warnings))

    def passes(prefix: str) -> bool:
        return not any(w.startswith(prefix) for w in unique)

    return CheckResult(
        completeness=passes(COMPLETENESS_PREFIX),
        professionalism=passes(PROFESSIONALISM_PREFIX),
        clarity=passes(CLARITY_PREFIX),
        ethical=passes(ETHICAL_PREFIX),
        warnings=unique,
    )


def count_warnings(checks: CheckResult, prefix: str) -> int:
    """Count warnings in *checks* carrying *prefix*."""
    return sum(1 for w in checks.warnings if w.startswith(prefix))
