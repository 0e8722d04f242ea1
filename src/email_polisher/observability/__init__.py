"""Logging support: PII redaction and request ID tracing."""

from email_polisher.observability.middleware import RequestIdMiddleware
from email_polisher.observability.redact import redact, redact_event_dict, redact_value

__all__ = [
    "RequestIdMiddleware",
    "redact",
    "redact_event_dict",
    "redact_value",
]
