"""Tone-driven style passes over a draft.

Passes run in a fixed order (formality, warmth, confidence, seniority,
length) and each later pass sees the output of the earlier ones. Formality,
confidence and length rewrite every text field independently; warmth and
seniority only touch the body.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from email_polisher.domain.models import DraftOutput, ToneSettings
from email_polisher.domain.types import LengthPreference, Seniority
from email_polisher.resources.models import StyleLexicons

NAMED_CONTRACTIONS: tuple[tuple[str, str], ...] = (
    ("can't", "cannot"),
    ("won't", "will not"),
    ("doesn't", "does not"),
    ("don't", "do not"),
    ("isn't", "is not"),
    ("aren't", "are not"),
    ("wasn't", "was not"),
    ("weren't", "were not"),
    ("hasn't", "has not"),
    ("haven't", "have not"),
    ("hadn't", "had not"),
    ("couldn't", "could not"),
    ("wouldn't", "would not"),
    ("shouldn't", "should not"),
    ("didn't", "did not"),
)

_GENERIC_CONTRACTION = re.compile(r"(\w+)'(ll|ve|re|d|s|m)\b")
_CONTRACTION_EXPANSIONS = {
    "ll": " will",
    "ve": " have",
    "re": " are",
    "d": " would",
    "s": " is",
    "m": " am",
}

# Low confidence: assertive opener -> hedge.
HEDGING_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    (r"\bI recommend\b", "perhaps"),
    (r"\bI suggest\b", "perhaps"),
    (r"\bI propose\b", "might"),
    (r"\bI am confident\b", "perhaps"),
)

# High confidence: strip hedges, then strengthen weak phrasing.
ASSERTIVE_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    (r"\bmight\b", ""),
    (r"\bperhaps\b", ""),
    (r"\bI was wondering if\b", "I recommend"),
    (r"\bit could be\b", ""),
    (r"\bI think\b", "I am confident"),
    (r"\bmaybe\b", "I suggest"),
)

STUDENT_VOCABULARY: tuple[str, ...] = ("learn", "guidance", "experience")
PROFESSIONAL_VOCABULARY: tuple[str, ...] = ("collaborate", "align", "working together")

SHORTENING_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    (r"\b(very|quite|really|extremely|incredibly|absolutely)\s+", ""),
    (r"\b(beautiful|wonderful|amazing|fantastic|excellent|outstanding)\b", "good"),
    (r"\bI would really appreciate it if you could\b", "please"),
    (r"\bI would appreciate it if you could\b", "please"),
    (r"\bit would be great if we could\b", "please we could"),
    (r"\bin order to\b", "to"),
    (r"\bdue to the fact that\b", "because"),
)

ELABORATING_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    (r"\bgood\b", "excellent and valuable"),
    (r"\bhelp\b", "valuable assistance and guidance"),
    (r"\bthanks?\b", "sincere appreciation and gratitude"),
    (r"\bplease\b", "I would be most grateful if you could"),
    (r"\bI think\b", "I genuinely believe and feel confident"),
)


def _substitute_all(text: str, substitutions: tuple[tuple[str, str], ...]) -> str:
    for pattern, replacement in substitutions:
        text = re.sub(pattern, replacement, text, flags=re.IGNORECASE)
    return text


def _collapse_spaces(text: str) -> str:
    """Collapse runs of horizontal whitespace, keeping line breaks."""
    lines = [re.sub(r"[ \t]+", " ", line).strip() for line in text.split("\n")]
    return "\n".join(lines).strip()


def apply_formality(text: str, formality: int, lexicons: StyleLexicons) -> str:
    """Formalize vocabulary and expand contractions when ``formality >= 4``."""
    if formality < 4:
        return text

    result = text
    for casual, formal in lexicons.formality.casual_to_formal.items():
        result = re.sub(rf"\b{re.escape(casual)}\b", formal, result, flags=re.IGNORECASE)

    for contraction, expansion in NAMED_CONTRACTIONS:
        result = re.sub(rf"\b{re.escape(contraction)}\b", expansion, result, flags=re.IGNORECASE)

    result = _GENERIC_CONTRACTION.sub(
        lambda m: m.group(1) + _CONTRACTION_EXPANSIONS[m.group(2)], result
    )
    return _collapse_spaces(result)


def apply_warmth(body_sections: list[str], formality: int) -> list[str]:
    """Warmth pass; intentionally returns the sections unchanged.

    The pass is keyed on formality and the niceties lexicon is never
    inserted. Kept as an explicit step so pass ordering stays visible.
    """
    return list(body_sections)


def apply_confidence(text: str, confidence: int) -> str:
    """Hedge assertive openers at ``confidence <= 2``; strip hedges at ``>= 4``."""
    if confidence <= 2:
        return _substitute_all(text, HEDGING_SUBSTITUTIONS)
    if confidence >= 4:
        result = _substitute_all(text, ASSERTIVE_SUBSTITUTIONS)
        result = _collapse_spaces(result)
        return re.sub(r" +([,.!?])", r"\1", result)
    return text


def apply_seniority(
    body_sections: list[str], seniority: Seniority, lexicons: StyleLexicons
) -> list[str]:
    """Append the seniority phrase to the last body section unless already present."""
    result = list(body_sections)
    if not result:
        return result

    if seniority == Seniority.STUDENT:
        addition = lexicons.seniority.student_additions[0]
        vocabulary = STUDENT_VOCABULARY
    else:
        addition = lexicons.seniority.professional_additions[0]
        vocabulary = PROFESSIONAL_VOCABULARY

    last = result[-1]
    if not any(word in last for word in vocabulary):
        result[-1] = f"{last} {addition}"
    return result


def apply_length(text: str, length: LengthPreference) -> str:
    """Compress for ``short``, elaborate for ``long``, leave ``medium`` alone."""
    if length == LengthPreference.SHORT:
        return _substitute_all(text, SHORTENING_SUBSTITUTIONS)
    if length == LengthPreference.LONG:
        return _substitute_all(text, ELABORATING_SUBSTITUTIONS)
    return text


def _map_fields(draft: DraftOutput, transform: Callable[[str], str]) -> DraftOutput:
    return draft.model_copy(
        update={
            "subject": transform(draft.subject),
            "greeting": transform(draft.greeting),
            "body_sections": [transform(section) for section in draft.body_sections],
            "closing": transform(draft.closing),
        }
    )


def apply_style(draft: DraftOutput, tone: ToneSettings, lexicons: StyleLexicons) -> DraftOutput:
    """Apply all five style passes to *draft* in order.

    Args:
        draft: The naturalized draft.
        tone: Tone settings selecting each pass's branch.
        lexicons: Style word lists.

    Returns:
        A new, styled ``DraftOutput``; *draft* is not modified.
    """
    result = _map_fields(draft, lambda text: apply_formality(text, tone.formality, lexicons))
    result = result.model_copy(
        update={"body_sections": apply_warmth(result.body_sections, tone.formality)}
    )
    result = _map_fields(result, lambda text: apply_confidence(text, tone.confidence))
    result = result.model_copy(
        update={
            "body_sections": apply_seniority(result.body_sections, tone.seniority, lexicons)
        }
    )
    return _map_fields(result, lambda text: apply_length(text, tone.length))
