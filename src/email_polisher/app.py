"""Application entry point serving the drafting API with FastAPI and uvicorn.

Configures:
- **structlog** with JSON rendering (production) or colored console (development)
- **PII redaction** of log event values
- **Resources** (guardrails, style lexicons, templates) loaded once at startup
- **Draft strategy** and **generation client** selected from settings
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog
import uvicorn
from fastapi import FastAPI

from email_polisher.api.routes import register_api_routes
from email_polisher.config import Settings, get_settings
from email_polisher.drafting.strategy import get_strategy
from email_polisher.health import register_health_routes
from email_polisher.llm.client import create_generation_client
from email_polisher.observability.middleware import SERVICE_NAME, RequestIdMiddleware
from email_polisher.observability.redact import redact_event_dict
from email_polisher.resources.bundle import load_resource_bundle

logger = structlog.get_logger()


def configure_logging(
    production: bool = False, level: str | None = None, redact: bool = True
) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: colored console rendering at DEBUG level.

    Args:
        production: Enable production mode if ``True``.
        level: Explicit level name overriding the mode default.
        redact: Mask PII in event values before rendering.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if redact:
        shared_processors.append(redact_event_dict)

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        log_level = logging.DEBUG

    if level is not None:
        log_level = logging.getLevelNamesMapping().get(level.upper(), log_level)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=SERVICE_NAME)


def initialize_services(settings: Settings | None = None) -> dict[str, Any]:
    """Set up all shared services for the application.

    Loads the resource bundle (a ``ConfigError`` here is fatal), selects the
    draft strategy, and creates the generation client.

    Args:
        settings: Application settings.  If ``None``, ``get_settings()`` is used.

    Returns:
        A dict of initialized service instances keyed by name.
    """
    if settings is None:
        settings = get_settings()

    resources = load_resource_bundle(settings.resource_dir)
    logger.info("Resources loaded", resource_dir=str(settings.resource_dir or "bundled"))

    strategy = get_strategy(settings.draft_strategy, resources)
    logger.info("Draft strategy selected", strategy=strategy.name)

    return {
        "_settings": settings,
        "resources": resources,
        "strategy": strategy,
        "generation_client": create_generation_client(settings),
    }


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log application start and stop."""
    logger.info("FastAPI application starting")
    yield
    logger.info("FastAPI application stopping")


def create_app(services: dict[str, Any]) -> FastAPI:
    """Create the FastAPI app with drafting routes, health routes and tracing.

    Args:
        services: The initialized services dict from ``initialize_services``.

    Returns:
        The configured FastAPI application.
    """
    fastapi_app = FastAPI(title="Email Polisher", lifespan=lifespan)
    fastapi_app.state.services = services
    fastapi_app.add_middleware(RequestIdMiddleware)
    register_api_routes(fastapi_app)
    register_health_routes(fastapi_app)
    return fastapi_app


def run() -> None:
    """Console entry point: configure logging, build services, serve with uvicorn."""
    settings = get_settings()
    configure_logging(
        production=settings.production, level=settings.log_level, redact=settings.redact_logs
    )
    logger.info("Application starting", production=settings.production, port=settings.port)

    services = initialize_services(settings)
    uvicorn.run(create_app(services), host="0.0.0.0", port=settings.port, log_level="info")


if __name__ == "__main__":
    run()
