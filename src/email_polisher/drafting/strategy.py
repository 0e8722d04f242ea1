"""Pluggable draft construction strategies."""

from __future__ import annotations

from typing import Protocol

from email_polisher.domain.models import DraftInput, DraftOutput
from email_polisher.domain.types import DraftStrategyName, EmailCategory
from email_polisher.drafting.context import extract_context
from email_polisher.drafting.generator import generate_content
from email_polisher.drafting.naturalizer import naturalize
from email_polisher.drafting.templates import build_from_template
from email_polisher.resources.bundle import ResourceBundle


class DraftStrategy(Protocol):
    """Builds an unstyled draft for a categorized request."""

    name: DraftStrategyName

    def build(self, draft_input: DraftInput, category: EmailCategory) -> DraftOutput: ...


class GenerationStrategy:
    """Context extraction, rule-based generation, then naturalization."""

    name = DraftStrategyName.GENERATION

    def build(self, draft_input: DraftInput, category: EmailCategory) -> DraftOutput:
        context = extract_context(draft_input.text)
        draft = generate_content(draft_input.text, context, category, draft_input.tone)
        return naturalize(draft)


class TemplateStrategy:
    """Per-category templates filled from keyword extraction and overrides.

    The naturalizer is not applied to template output.
    """

    name = DraftStrategyName.TEMPLATE

    def __init__(self, resources: ResourceBundle) -> None:
        self._templates = resources.templates

    def build(self, draft_input: DraftInput, category: EmailCategory) -> DraftOutput:
        return build_from_template(draft_input, category, self._templates)


def get_strategy(name: DraftStrategyName | str, resources: ResourceBundle) -> DraftStrategy:
    """Return the strategy registered under *name*.

    Raises:
        ValueError: If *name* is not a known strategy.
    """
    strategy_name = DraftStrategyName(name)
    if strategy_name == DraftStrategyName.TEMPLATE:
        return TemplateStrategy(resources)
    return GenerationStrategy()
