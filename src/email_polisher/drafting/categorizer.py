"""Weighted keyword classifier mapping a free-text description to an email category.

Each category owns an ordered list of phrase groups. A phrase found anywhere in
the lower-cased text adds its group's weight once; the highest-scoring category
wins, with ``other`` as the baseline that any category must strictly beat.
"""

from __future__ import annotations

from dataclasses import dataclass

from email_polisher.domain.models import Categorization
from email_polisher.domain.types import EmailCategory


@dataclass(frozen=True)
class CategoryRule:
    """A group of phrases sharing one weight."""

    phrases: tuple[str, ...]
    weight: int


CATEGORY_RULES: dict[EmailCategory, tuple[CategoryRule, ...]] = {
    EmailCategory.NETWORKING: (
        CategoryRule(
            ("introduction", "introduce myself", "connect", "connecting", "network", "networking"),
            3,
        ),
        CategoryRule(("coffee chat", "coffee", "meet", "meeting", "call", "conversation"), 2),
        CategoryRule(
            ("your work", "your research", "your article", "your post", "admire", "recent article"),
            2,
        ),
        CategoryRule(("reach out", "reaching out", "get in touch", "opportunity to"), 1),
        CategoryRule(
            (
                "ra position",
                "research assistant",
                "internship",
                "software engineering",
                "opportunities",
            ),
            3,
        ),
    ),
    EmailCategory.FOLLOWUP: (
        CategoryRule(("follow up", "following up", "follow-up", "checking in", "check in"), 4),
        CategoryRule(("previous", "last week", "earlier", "our conversation", "we discussed"), 3),
        CategoryRule(("any updates", "update", "status", "progress", "next steps"), 2),
        CategoryRule(("gentle reminder", "reminder", "nudge", "circling back"), 2),
        CategoryRule(("my application", "application status"), 3),
    ),
    EmailCategory.REFERRAL: (
        CategoryRule(
            (
                "referral",
                "refer me",
                "reference",
                "recommend me",
                "vouch for",
                "referring",
                "comfortable referring",
                "willing to refer",
                "mind referring",
            ),
            4,
        ),
        CategoryRule(("applying", "application", "position", "role", "job", "internship"), 3),
        CategoryRule(("resume", "cv", "portfolio", "background", "experience"), 2),
    ),
    EmailCategory.THANKYOU: (
        CategoryRule(("thank you", "thanks", "grateful", "appreciate", "appreciation"), 4),
        CategoryRule(
            (
                "taking the time",
                "your time",
                "your help",
                "your advice",
                "your guidance",
                "your support",
            ),
            3,
        ),
        CategoryRule(("interview", "meeting", "call", "conversation", "discussion"), 2),
        CategoryRule(("helpful", "insightful", "valuable", "useful", "informative"), 1),
    ),
    EmailCategory.OTHER: (
        CategoryRule(
            ("question", "clarification", "clarify", "request", "permission", "confirm"), 2
        ),
        CategoryRule(("schedule", "reschedule", "deadline", "extension", "documents"), 1),
    ),
}

MAX_RULE_WEIGHT = max(rule.weight for rules in CATEGORY_RULES.values() for rule in rules)

# Confidence reported when nothing matched at all.
NO_MATCH_CONFIDENCE = 0.1


def _score(text: str, rules: tuple[CategoryRule, ...]) -> tuple[int, list[str]]:
    score = 0
    matches: list[str] = []
    for rule in rules:
        for phrase in rule.phrases:
            if phrase in text:
                score += rule.weight
                matches.append(phrase)
    return score, matches


def categorize(text: str) -> Categorization:
    """Classify *text* into one of the five email categories.

    Matching is case-insensitive substring search. Ties go to the category
    declared first, and ``other`` wins whenever no category scores higher.

    Args:
        text: The informal description of the email.

    Returns:
        A ``Categorization`` with the winning category, a confidence in
        [0, 1] rounded to two decimals, and the unique matched phrases.
    """
    normalized = text.lower()
    scores = {category: _score(normalized, rules) for category, rules in CATEGORY_RULES.items()}

    best_category = EmailCategory.OTHER
    best_score, best_matches = scores[EmailCategory.OTHER]
    for category, (score, matches) in scores.items():
        if score > best_score:
            best_category, best_score, best_matches = category, score, matches

    if best_score > 0:
        base = min(best_score / (MAX_RULE_WEIGHT * 2), 1.0)
        bonus = min(len(best_matches) * 0.1, 0.3)
        confidence = min(base + bonus, 1.0)
    else:
        confidence = NO_MATCH_CONFIDENCE

    return Categorization(
        category=best_category,
        confidence=round(confidence, 2),
        matched_rules=list(dict.fromkeys(best_matches)),
    )
