"""JSON resource loader with schema validation.

Resources live next to this module so they ship as package data. Every
failure mode (missing file, malformed JSON, schema mismatch) is reported as
a :class:`~email_polisher.domain.errors.ConfigError`.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from email_polisher.domain.errors import ConfigError

DEFAULT_RESOURCE_DIR = Path(__file__).resolve().parent

ModelT = TypeVar("ModelT", bound=BaseModel)


def _format_validation_errors(filename: str, exc: ValidationError) -> str:
    lines = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    ]
    return f'Config validation failed for "{filename}":\n' + "\n".join(lines)


def load_resource(
    filename: str,
    schema: type[ModelT],
    resource_dir: Path = DEFAULT_RESOURCE_DIR,
) -> ModelT:
    """Load a JSON resource and validate it against *schema*.

    Args:
        filename: File name inside *resource_dir* (e.g. ``"guardrails.json"``).
        schema: Pydantic model class the parsed JSON must satisfy.
        resource_dir: Directory holding the resource files.

    Returns:
        The validated model instance.

    Raises:
        ConfigError: If the file is missing, is not valid JSON, or does not
            match the schema.
    """
    path = resource_dir / filename

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f'Config file not found: "{filename}"', filename) from None
    except OSError as exc:
        raise ConfigError(f'Failed to load config file "{filename}": {exc}', filename) from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f'Invalid JSON in config file "{filename}": {exc}', filename) from exc

    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(_format_validation_errors(filename, exc), filename) from exc


async def load_resource_async(
    filename: str,
    schema: type[ModelT],
    resource_dir: Path = DEFAULT_RESOURCE_DIR,
) -> ModelT:
    """Async variant of :func:`load_resource`; file I/O runs in a worker thread."""
    return await asyncio.to_thread(load_resource, filename, schema, resource_dir)
