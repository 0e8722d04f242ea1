"""Domain types, models, and errors for the email polisher."""

from email_polisher.domain.errors import ConfigError, EmailPolisherError, TemplateNotFoundError
from email_polisher.domain.models import (
    DEFAULT_TONE,
    Categorization,
    CheckResult,
    DraftInput,
    DraftMeta,
    DraftOutput,
    EvalMetrics,
    ExtractedContext,
    ProcessDraftResult,
    RefineResult,
    ToneSettings,
)
from email_polisher.domain.types import (
    ContextIntent,
    DraftStrategyName,
    EmailCategory,
    LengthPreference,
    Seniority,
    Timeframe,
    WordCountBand,
)

__all__ = [
    "DEFAULT_TONE",
    "Categorization",
    "CheckResult",
    "ConfigError",
    "ContextIntent",
    "DraftInput",
    "DraftMeta",
    "DraftOutput",
    "DraftStrategyName",
    "EmailCategory",
    "EmailPolisherError",
    "EvalMetrics",
    "ExtractedContext",
    "LengthPreference",
    "ProcessDraftResult",
    "RefineResult",
    "Seniority",
    "TemplateNotFoundError",
    "Timeframe",
    "ToneSettings",
    "WordCountBand",
]
