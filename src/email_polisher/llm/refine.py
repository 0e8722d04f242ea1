"""Refinement orchestrator: validate-or-fallback around the generation client.

The baseline draft is checked and scored before the client is called. The
refined draft is accepted only if it parses and passes the severity gate;
otherwise the caller's draft object is returned untouched with
``used_fallback`` set. ``refine_with_llm`` never raises.
"""

from __future__ import annotations

import time
from enum import StrEnum

import structlog

from email_polisher.domain.models import (
    CheckResult,
    DraftOutput,
    EvalMetrics,
    RefineResult,
    ToneSettings,
)
from email_polisher.domain.types import EmailCategory
from email_polisher.llm.client import CompletionRequest, GenerationClient
from email_polisher.llm.parser import parse_email_text, parse_llm_response
from email_polisher.llm.prompts import REFINE_SYSTEM_PROMPT, build_user_prompt
from email_polisher.llm.severity import evaluate_severity_gate
from email_polisher.quality.checks import run_checks
from email_polisher.quality.evaluation import eval_draft
from email_polisher.resources.bundle import ResourceBundle

logger = structlog.get_logger()

REFINE_TEMPERATURE = 0.7
REFINE_MAX_TOKENS = 1000
MAX_REPORTED_WARNINGS = 3

SERVICE_FAILED = "LLM service unavailable or failed"
RESPONSE_UNPARSEABLE = "Failed to parse LLM response format"
EMAIL_UNPARSEABLE = "Failed to parse refined email structure"
QUALITY_REJECTED = "Refined draft failed quality checks"


class RefineState(StrEnum):
    BASELINE_ONLY = "baseline_only"
    GENERATING = "generating"
    PARSING = "parsing"
    RE_VALIDATING = "re_validating"
    ACCEPTED = "accepted"
    FALLBACK = "fallback"


def _fallback(
    draft: DraftOutput,
    checks: CheckResult,
    metrics: EvalMetrics,
    warnings: list[str],
) -> RefineResult:
    return RefineResult(
        draft=draft,
        checks=checks,
        eval_metrics=metrics,
        was_refined=False,
        used_fallback=True,
        refine_warnings=warnings,
    )


async def refine_with_llm(
    draft: DraftOutput,
    tone: ToneSettings,
    category: EmailCategory,
    *,
    client: GenerationClient,
    resources: ResourceBundle,
) -> RefineResult:
    """Ask the generation client to improve *draft* and keep it only if it is safe.

    Args:
        draft: The styled baseline draft.
        tone: Tone settings described to the model.
        category: Category of the draft.
        client: Text generation client.
        resources: Guardrails used to re-check the refined draft.

    Returns:
        A ``RefineResult``. On fallback, ``draft`` is the same object that was
        passed in and ``checks``/``eval_metrics`` are the baseline values.
    """
    started = time.monotonic()
    log = logger.bind(category=category)

    baseline_checks = run_checks(draft, resources.guardrails)
    baseline_metrics = eval_draft(draft, resources.guardrails)
    state = RefineState.BASELINE_ONLY
    log.info("Starting LLM refinement", state=state, baseline_score=baseline_metrics.overall_score)

    try:
        state = RefineState.GENERATING
        request = CompletionRequest(
            system_prompt=REFINE_SYSTEM_PROMPT,
            user_prompt=build_user_prompt(draft, tone, category),
            temperature=REFINE_TEMPERATURE,
            max_tokens=REFINE_MAX_TOKENS,
        )
        response = await client.complete(request)
        log.debug(
            "LLM response received",
            response_length=len(response.text),
            elapsed_ms=round((time.monotonic() - started) * 1000),
        )

        state = RefineState.PARSING
        parsed = parse_llm_response(response.text)
        if parsed is None:
            log.warning(
                "Refinement fell back", state=RefineState.FALLBACK, reason=RESPONSE_UNPARSEABLE
            )
            return _fallback(draft, baseline_checks, baseline_metrics, [RESPONSE_UNPARSEABLE])

        refined = parse_email_text(parsed.email)
        if refined is None:
            log.warning(
                "Refinement fell back", state=RefineState.FALLBACK, reason=EMAIL_UNPARSEABLE
            )
            return _fallback(draft, baseline_checks, baseline_metrics, [EMAIL_UNPARSEABLE])

        state = RefineState.RE_VALIDATING
        refined_checks = run_checks(refined, resources.guardrails)
        refined_metrics = eval_draft(refined, resources.guardrails)
        decision = evaluate_severity_gate(refined_checks, refined_metrics)
        if decision.reject:
            log.warning(
                "Refinement fell back",
                state=RefineState.FALLBACK,
                reason=QUALITY_REJECTED,
                triggered_rules=decision.triggered_rules,
                overall_score=refined_metrics.overall_score,
            )
            return _fallback(
                draft,
                baseline_checks,
                baseline_metrics,
                [QUALITY_REJECTED, *refined_checks.warnings[:MAX_REPORTED_WARNINGS]],
            )
    except Exception:
        log.exception(
            "LLM refinement failed",
            state=RefineState.FALLBACK,
            failed_in=state,
            elapsed_ms=round((time.monotonic() - started) * 1000),
        )
        return _fallback(draft, baseline_checks, baseline_metrics, [SERVICE_FAILED])

    log.info(
        "LLM refinement completed",
        state=RefineState.ACCEPTED,
        score_change=refined_metrics.overall_score - baseline_metrics.overall_score,
        elapsed_ms=round((time.monotonic() - started) * 1000),
    )
    return RefineResult(
        draft=refined,
        checks=refined_checks,
        eval_metrics=refined_metrics,
        was_refined=True,
        used_fallback=False,
    )
