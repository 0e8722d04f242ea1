"""Parsing of marker-delimited refinement responses back into drafts.

Both parsers return ``None`` on malformed input instead of raising.
"""

from __future__ import annotations

import re
from typing import NamedTuple

import structlog

from email_polisher.domain.models import DraftOutput
from email_polisher.llm.prompts import EMAIL_MARKER, EVAL_MARKER

logger = structlog.get_logger()

SUBJECT_PREFIX = "Subject:"

_EMAIL_SECTION = re.compile(
    rf"{re.escape(EMAIL_MARKER)}\s*(.*?)\s*{re.escape(EVAL_MARKER)}", re.DOTALL
)
_EVAL_SECTION = re.compile(rf"{re.escape(EVAL_MARKER)}\s*(.*)$", re.DOTALL)


class ParsedResponse(NamedTuple):
    email: str
    evaluation: str


def parse_llm_response(text: str) -> ParsedResponse | None:
    """Split a response into its email and evaluation sections."""
    email_match = _EMAIL_SECTION.search(text)
    eval_match = _EVAL_SECTION.search(text)
    if not email_match or not eval_match:
        logger.warning("LLM response missing required sections")
        return None
    return ParsedResponse(
        email=email_match.group(1).strip(),
        evaluation=eval_match.group(1).strip(),
    )


def parse_email_text(email_text: str) -> DraftOutput | None:
    """Parse a plain-text email into a draft.

    Non-empty trimmed lines are used. The first ``Subject:`` line gives the
    subject; of the remaining lines the first is the greeting, the last is
    the closing, and everything in between is one body section per line.

    Returns:
        The draft, or ``None`` when any part is missing.
    """
    lines = [line.strip() for line in email_text.split("\n") if line.strip()]
    if len(lines) < 3:
        logger.warning("Parsed email has insufficient lines", line_count=len(lines))
        return None

    subject_line = next((line for line in lines if line.startswith(SUBJECT_PREFIX)), None)
    if subject_line is None:
        logger.warning("Missing subject line in parsed email")
        return None

    content = [line for line in lines if not line.startswith(SUBJECT_PREFIX)]
    if len(content) < 2:
        logger.warning("Insufficient content after subject extraction")
        return None

    body_sections = content[1:-1]
    if not body_sections:
        logger.warning("No body content found in parsed email")
        return None

    return DraftOutput(
        subject=subject_line.removeprefix(SUBJECT_PREFIX).strip(),
        greeting=content[0],
        body_sections=body_sections,
        closing=content[-1],
    )
