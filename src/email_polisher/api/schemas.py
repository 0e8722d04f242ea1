"""Request and response bodies for the drafting HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from email_polisher.domain.models import CheckResult, DraftInput, DraftOutput, EvalMetrics


class RefineRequest(DraftInput):
    """A draft request with an opt-in LLM refinement pass."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    use_llm: bool = Field(default=False, alias="useLLM")


class RefineResponse(BaseModel):
    """Baseline draft and checks, plus the refinement outcome when requested.

    The ``refined``/``checks_after``/``eval_after``/``refine_warnings`` fields
    are omitted when ``use_llm`` is false.
    """

    baseline: DraftOutput
    checks_before: CheckResult
    refined: DraftOutput | None = None
    checks_after: CheckResult | None = None
    eval_after: EvalMetrics | None = None
    refine_warnings: list[str] | None = None


class ErrorResponse(BaseModel):
    error: str
    details: list[dict[str, object]] | None = None
