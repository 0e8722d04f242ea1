"""Per-request log context for the drafting API.

Every ``/draft`` and ``/refine`` call gets a request ID, taken from the
client's ``X-Request-ID`` header or generated, which is echoed on the response.
The ID, the service name and the route are bound into structlog contextvars,
so the pipeline and refinement log lines of one request can be grouped.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SERVICE_NAME = "email-polisher"
REQUEST_ID_HEADER = "X-Request-ID"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Bind request-scoped log context and echo the request ID."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        # Each request starts from an empty context.
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            service=SERVICE_NAME,
            method=request.method,
            path=request.url.path,
        )
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
