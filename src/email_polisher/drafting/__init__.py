"""Deterministic drafting: categorization, generation, naturalization, and style."""

from email_polisher.drafting.categorizer import categorize
from email_polisher.drafting.context import extract_context
from email_polisher.drafting.generator import generate_content
from email_polisher.drafting.naturalizer import assess_quality, naturalize
from email_polisher.drafting.pipeline import process_draft
from email_polisher.drafting.strategy import (
    DraftStrategy,
    GenerationStrategy,
    TemplateStrategy,
    get_strategy,
)
from email_polisher.drafting.style import apply_style
from email_polisher.drafting.templates import build_from_template

__all__ = [
    "DraftStrategy",
    "GenerationStrategy",
    "TemplateStrategy",
    "apply_style",
    "assess_quality",
    "build_from_template",
    "categorize",
    "extract_context",
    "generate_content",
    "get_strategy",
    "naturalize",
    "process_draft",
]
