"""FastAPI routes for drafting and refinement.

Handlers read the shared services (resources, strategy, generation client)
from ``request.app.state.services``, populated by ``create_app``.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from email_polisher.api.schemas import ErrorResponse, RefineRequest, RefineResponse
from email_polisher.domain.models import DraftInput, ProcessDraftResult
from email_polisher.drafting.pipeline import process_draft
from email_polisher.llm.refine import refine_with_llm

logger = structlog.get_logger()

router = APIRouter()


@router.post("/draft", response_model=ProcessDraftResult)
async def draft(draft_input: DraftInput, request: Request) -> ProcessDraftResult:
    """Run the deterministic pipeline for one description."""
    services: dict[str, Any] = request.app.state.services
    return process_draft(draft_input, services["resources"], services["strategy"])


@router.post(
    "/refine",
    response_model=RefineResponse,
    response_model_exclude_none=True,
)
async def refine(refine_request: RefineRequest, request: Request) -> RefineResponse:
    """Run the pipeline and, when ``use_llm`` is set, the refinement pass.

    Refinement failures never fail the request; they surface as
    ``refine_warnings`` alongside the baseline draft.
    """
    services: dict[str, Any] = request.app.state.services
    result = process_draft(refine_request, services["resources"], services["strategy"])
    response = RefineResponse(baseline=result.draft, checks_before=result.checks)

    if not refine_request.use_llm:
        return response

    refined = await refine_with_llm(
        result.draft,
        refine_request.tone,
        result.meta.category,
        client=services["generation_client"],
        resources=services["resources"],
    )
    return response.model_copy(
        update={
            "refined": refined.draft,
            "checks_after": refined.checks,
            "eval_after": refined.eval_metrics,
            "refine_warnings": refined.refine_warnings,
        }
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map request validation failures to a 400 with field-level details."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    details: list[dict[str, object]] = [
        {
            "loc": list(error.get("loc", ())),
            "msg": str(error.get("msg", "")),
            "type": error.get("type"),
        }
        for error in errors
    ]
    body = ErrorResponse(error="Validation failed", details=details)
    return JSONResponse(status_code=400, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and return an opaque 500."""
    logger.exception("Unhandled request error", path=request.url.path)
    body = ErrorResponse(error="Internal server error")
    return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))


def register_api_routes(app: FastAPI) -> None:
    """Attach the drafting router and its error handlers to *app*.

    Args:
        app: The FastAPI application instance.
    """
    app.include_router(router)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
