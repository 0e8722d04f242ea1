"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables, and a cached ``get_settings()`` accessor.

This module has no imports from the rest of the ``email_polisher`` package
except the enum of strategy names.
"""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from email_polisher.domain.types import DraftStrategyName

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables and ``.env`` file.

    ``SecretStr`` fields keep the API key out of logs and reprs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = "INFO"
    redact_logs: bool = True

    # -- Drafting --------------------------------------------------------------
    resource_dir: Path | None = None
    draft_strategy: DraftStrategyName = DraftStrategyName.GENERATION

    # -- LLM / Anthropic -------------------------------------------------------
    anthropic_api_key: SecretStr = SecretStr("")
    llm_model: str = "claude-sonnet-4-5-20250929"
    llm_timeout_seconds: float = Field(default=30.0, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        # Only the structured errors list; the exception text may echo secrets.
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)
