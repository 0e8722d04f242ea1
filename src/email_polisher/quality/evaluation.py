"""Numeric scoring of a draft.

Recomputes the primitives used by the checks as occurrence counts and
derives readability, professionalism and overall scores, each clamped to
``[0, 100]``.
"""

from __future__ import annotations

import math
import re

from email_polisher.domain.models import DraftOutput, EvalMetrics
from email_polisher.domain.types import WordCountBand
from email_polisher.quality.checks import split_sentences
from email_polisher.resources.models import GuardrailsConfig

LONG_SENTENCE_WORDS = 20

_HAS_ALNUM = re.compile(r"[a-zA-Z0-9]")


def _words(text: str) -> list[str]:
    """Whitespace tokens containing at least one letter or digit."""
    return [token for token in text.split() if _HAS_ALNUM.search(token)]


def word_count_band(word_count: int) -> WordCountBand:
    if word_count <= 50:
        return WordCountBand.SHORT
    if word_count <= 150:
        return WordCountBand.MEDIUM
    if word_count <= 300:
        return WordCountBand.LONG
    return WordCountBand.VERY_LONG


def _sentence_stats(text: str) -> tuple[float, int]:
    """Return (average words per sentence, number of sentences over 20 words)."""
    sentences = split_sentences(text)
    if not sentences:
        return 0.0, 0
    counts = [len(_words(sentence)) for sentence in sentences]
    return sum(counts) / len(sentences), sum(1 for c in counts if c > LONG_SENTENCE_WORDS)


def _count_pattern(pattern: str, text: str, flags: int = 0) -> int:
    return sum(1 for _ in re.finditer(pattern, text, flags))


def _count_literals(phrases: list[str], text: str) -> int:
    lowered = text.lower()
    return sum(_count_pattern(re.escape(phrase.lower()), lowered) for phrase in phrases)


def _clamp(score: float) -> float:
    return max(0.0, min(100.0, score))


def readability_score(
    long_sentence_count: int, avg_sentence_length: float, band: WordCountBand
) -> float:
    score = 100.0 - long_sentence_count * 25
    if avg_sentence_length > 20:
        score -= (avg_sentence_length - 20) * 3
    if avg_sentence_length > 30:
        score -= (avg_sentence_length - 30) * 5

    if band in (WordCountBand.MEDIUM, WordCountBand.LONG):
        score += 10
    elif band == WordCountBand.SHORT:
        score -= 5
    else:
        score -= 20
    return _clamp(score)


def professionalism_score(slang_hits: int, emoji_hits: int, overpromise_hits: int) -> float:
    return _clamp(100.0 - slang_hits * 20 - emoji_hits * 15 - overpromise_hits * 25)


def overall_score(readability: float, professionalism: float) -> int:
    """Weighted 60/40 blend, rounded half up."""
    return math.floor(professionalism * 0.6 + readability * 0.4 + 0.5)


def eval_draft(draft: DraftOutput, guardrails: GuardrailsConfig) -> EvalMetrics:
    """Score *draft* against the guardrails.

    Args:
        draft: The draft to score.
        guardrails: Regexes and phrase lists to count.

    Returns:
        ``EvalMetrics`` with all scores inside ``[0, 100]``, including for an
        empty draft.
    """
    text = draft.all_text()

    word_count = len(_words(text))
    band = word_count_band(word_count)
    avg_length, long_count = _sentence_stats(text)

    slang_hits = _count_pattern(guardrails.slang_regex, text, re.IGNORECASE)
    emoji_hits = _count_pattern(guardrails.emoji_regex, text)
    overpromise_hits = _count_literals(guardrails.blacklist_phrases, text)
    attachment_refs = _count_literals(guardrails.attachment_keywords, text)
    link_refs = _count_pattern(guardrails.link_regex, text, re.IGNORECASE)

    readability = readability_score(long_count, avg_length, band)
    professionalism = professionalism_score(slang_hits, emoji_hits, overpromise_hits)

    return EvalMetrics(
        word_count=word_count,
        word_count_band=band,
        long_sentence_count=long_count,
        avg_sentence_length=round(avg_length, 1),
        slang_hits=slang_hits,
        emoji_hits=emoji_hits,
        overpromise_hits=overpromise_hits,
        attachment_refs=attachment_refs,
        link_refs=link_refs,
        readability_score=readability,
        professionalism_score=professionalism,
        overall_score=overall_score(readability, professionalism),
    )
