"""HTTP API for drafting and refinement."""

from email_polisher.api.routes import register_api_routes, router
from email_polisher.api.schemas import RefineRequest, RefineResponse

__all__ = [
    "RefineRequest",
    "RefineResponse",
    "register_api_routes",
    "router",
]
