"""Deterministic drafting pipeline: categorize, build, style, check."""

from __future__ import annotations

import structlog

from email_polisher.domain.models import DraftInput, DraftMeta, ProcessDraftResult
from email_polisher.drafting.categorizer import categorize
from email_polisher.drafting.strategy import DraftStrategy, GenerationStrategy
from email_polisher.drafting.style import apply_style
from email_polisher.quality.checks import run_checks
from email_polisher.resources.bundle import ResourceBundle

logger = structlog.get_logger()


def process_draft(
    draft_input: DraftInput,
    resources: ResourceBundle,
    strategy: DraftStrategy | None = None,
) -> ProcessDraftResult:
    """Turn a description and tone into a styled, checked draft.

    Args:
        draft_input: The validated request.
        resources: Loaded guardrails, lexicons and templates.
        strategy: How to build the unstyled draft. Defaults to
            :class:`GenerationStrategy`.

    Returns:
        The styled draft, its check results, and categorization metadata.
    """
    strategy = strategy or GenerationStrategy()

    categorization = categorize(draft_input.text)
    draft = strategy.build(draft_input, categorization.category)
    styled = apply_style(draft, draft_input.tone, resources.style_lexicons)
    checks = run_checks(styled, resources.guardrails)

    logger.info(
        "Draft processed",
        category=categorization.category,
        confidence=categorization.confidence,
        strategy=strategy.name,
        warnings=len(checks.warnings),
    )

    return ProcessDraftResult(
        draft=styled,
        checks=checks,
        meta=DraftMeta(
            category=categorization.category,
            confidence=categorization.confidence,
            matched_rules=categorization.matched_rules,
        ),
    )
