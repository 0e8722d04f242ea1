"""PII redaction for log output.

Masks email addresses, phone numbers, professional-network profile URLs and
other URLs. ``redact_event_dict`` is a structlog processor that applies the
masking to every value of an event except the event message itself and
logger metadata.
"""

from __future__ import annotations

import re
from typing import Any

from structlog.types import EventDict, WrappedLogger

REPLACEMENT = "[REDACTED]"

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(r"(\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b")
LINKEDIN_PATTERN = re.compile(r"https?://(www\.)?linkedin\.com/in/[a-zA-Z0-9-]+/?")
URL_PATTERN = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+")

# Keys left as-is by the processor.
PASSTHROUGH_KEYS = frozenset({"event", "level", "timestamp", "logger", "service", "request_id"})


def redact(text: str) -> str:
    """Replace PII in *text* with ``[REDACTED]``.

    Profile URLs are masked before generic URLs so they collapse to a single
    marker.
    """
    result = EMAIL_PATTERN.sub(REPLACEMENT, text)
    result = PHONE_PATTERN.sub(REPLACEMENT, result)
    result = LINKEDIN_PATTERN.sub(REPLACEMENT, result)
    return URL_PATTERN.sub(REPLACEMENT, result)


def redact_value(value: Any) -> Any:
    """Recursively redact strings inside dicts, lists and tuples."""
    if isinstance(value, str):
        return redact(value)
    if isinstance(value, dict):
        return {key: redact_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [redact_value(item) for item in value]
    if isinstance(value, tuple):
        return tuple(redact_value(item) for item in value)
    return value


def redact_event_dict(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """structlog processor masking PII in event values."""
    return {
        key: value if key in PASSTHROUGH_KEYS else redact_value(value)
        for key, value in event_dict.items()
    }
