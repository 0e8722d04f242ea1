"""High-severity gate applied to refined drafts.

Any triggered rule rejects the refinement in favor of the baseline draft.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from email_polisher.domain.models import CheckResult, EvalMetrics
from email_polisher.domain.types import COMPLETENESS_PREFIX, ETHICAL_PREFIX, PROFESSIONALISM_PREFIX
from email_polisher.quality.checks import count_warnings

MIN_OVERALL_SCORE = 30


@dataclass(frozen=True)
class SeverityRule:
    name: str
    triggered: Callable[[CheckResult, EvalMetrics], bool]


SEVERITY_RULES: tuple[SeverityRule, ...] = (
    SeverityRule(
        "multiple_completeness_failures",
        lambda checks, _: count_warnings(checks, COMPLETENESS_PREFIX) > 1,
    ),
    SeverityRule(
        "professionalism_issue",
        lambda checks, _: count_warnings(checks, PROFESSIONALISM_PREFIX) > 0,
    ),
    SeverityRule(
        "ethical_issue",
        lambda checks, _: count_warnings(checks, ETHICAL_PREFIX) > 0,
    ),
    SeverityRule(
        "low_overall_score",
        lambda _, metrics: metrics.overall_score < MIN_OVERALL_SCORE,
    ),
)


@dataclass(frozen=True)
class SeverityDecision:
    """Outcome of the gate; ``triggered_rules`` is in table order."""

    triggered_rules: list[str] = field(default_factory=list)

    @property
    def reject(self) -> bool:
        return bool(self.triggered_rules)


def evaluate_severity_gate(checks: CheckResult, metrics: EvalMetrics) -> SeverityDecision:
    """Evaluate every rule in ``SEVERITY_RULES`` against a refined draft's results."""
    return SeverityDecision(
        triggered_rules=[rule.name for rule in SEVERITY_RULES if rule.triggered(checks, metrics)]
    )
