"""Pydantic v2 models for the data flowing through the drafting pipeline."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from email_polisher.domain.types import (
    ContextIntent,
    EmailCategory,
    LengthPreference,
    Seniority,
    Timeframe,
    WordCountBand,
)


class ToneSettings(BaseModel):
    """Four-axis tone configuration that drives every style pass."""

    model_config = ConfigDict(frozen=True)

    # Strict: JSON strings, floats and booleans are not tone levels.
    formality: int = Field(ge=1, le=5, strict=True)
    confidence: int = Field(ge=1, le=5, strict=True)
    seniority: Seniority
    length: LengthPreference


DEFAULT_TONE = ToneSettings(
    formality=3,
    confidence=3,
    seniority=Seniority.STUDENT,
    length=LengthPreference.MEDIUM,
)


class DraftInput(BaseModel):
    """A request to draft an email from a short informal description."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1)
    tone: ToneSettings = DEFAULT_TONE
    overrides: dict[str, str] | None = Field(
        default=None,
        description="Placeholder values consumed by the template strategy",
    )


class Categorization(BaseModel):
    """Result of weighted keyword classification."""

    model_config = ConfigDict(frozen=True)

    category: EmailCategory
    confidence: float = Field(ge=0.0, le=1.0)
    matched_rules: list[str] = Field(default_factory=list)


class ExtractedContext(BaseModel):
    """Fixed-vocabulary facts pulled out of the description for one generation call."""

    model_config = ConfigDict(frozen=True)

    company: str | None = None
    school: str | None = None
    connection: str | None = None
    intent: ContextIntent = ContextIntent.GENERAL
    timeframe: Timeframe | None = None
    specific_reason: str | None = None
    research_mention: str | None = None
    business_mention: str | None = None


class DraftOutput(BaseModel):
    """Structured email draft.

    ``body_sections`` is ordered: introduction, context, purpose, call to action.
    Passes return updated copies via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    subject: str
    greeting: str
    body_sections: list[str] = Field(default_factory=list)
    closing: str

    def text_fields(self) -> list[str]:
        """Return every text field in reading order."""
        return [self.subject, self.greeting, *self.body_sections, self.closing]

    def all_text(self) -> str:
        """Return all fields joined by single spaces, as the checks see them."""
        return " ".join(self.text_fields())

    def render(self) -> str:
        """Render the draft as a plain-text email."""
        body = "\n\n".join(self.body_sections)
        return f"Subject: {self.subject}\n\n{self.greeting}\n\n{body}\n\n{self.closing}"


class CheckResult(BaseModel):
    """Rule-based quality verdicts plus the deduplicated warning codes behind them."""

    completeness: bool
    professionalism: bool
    clarity: bool
    ethical: bool
    warnings: list[str] = Field(default_factory=list)


class EvalMetrics(BaseModel):
    """Numeric quality scores and the raw counts they were derived from."""

    word_count: int
    word_count_band: WordCountBand
    long_sentence_count: int
    avg_sentence_length: float
    slang_hits: int
    emoji_hits: int
    overpromise_hits: int
    attachment_refs: int
    link_refs: int
    readability_score: float = Field(ge=0, le=100)
    professionalism_score: float = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100)


class RefineResult(BaseModel):
    """Outcome of the refinement orchestrator.

    When ``used_fallback`` is set, ``draft``/``checks``/``eval_metrics`` are the
    untouched baseline values.
    """

    draft: DraftOutput
    checks: CheckResult
    eval_metrics: EvalMetrics
    was_refined: bool
    used_fallback: bool
    refine_warnings: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def refined_and_fallback_are_exclusive(self) -> "RefineResult":
        """Ensure exactly one of was_refined / used_fallback is set."""
        if self.was_refined == self.used_fallback:
            raise ValueError("was_refined must be the negation of used_fallback")
        return self


class DraftMeta(BaseModel):
    """Categorization details reported alongside a processed draft."""

    category: EmailCategory
    confidence: float
    matched_rules: list[str] = Field(default_factory=list)


class ProcessDraftResult(BaseModel):
    """Final styled draft, its checks, and how it was categorized."""

    draft: DraftOutput
    checks: CheckResult
    meta: DraftMeta
