"""Immutable bundle of every JSON resource, loaded once per process.

The bundle is built at startup and handed to the components that need it,
so there is no lazily-initialized module state to race on.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from email_polisher.resources.loader import DEFAULT_RESOURCE_DIR, load_resource
from email_polisher.resources.models import GuardrailsConfig, StyleLexicons, TemplatesConfig

GUARDRAILS_FILE = "guardrails.json"
STYLE_LEXICONS_FILE = "style_lexicons.json"
TEMPLATES_FILE = "templates.json"


@dataclass(frozen=True)
class ResourceBundle:
    """All configuration resources needed by the pipeline."""

    guardrails: GuardrailsConfig
    style_lexicons: StyleLexicons
    templates: TemplatesConfig


def load_resource_bundle(resource_dir: Path | None = None) -> ResourceBundle:
    """Load and validate all resources from *resource_dir*.

    Args:
        resource_dir: Directory holding the JSON files. Defaults to the
            resources shipped with the package.

    Returns:
        A frozen ``ResourceBundle``.

    Raises:
        ConfigError: If any resource fails to load.
    """
    directory = resource_dir or DEFAULT_RESOURCE_DIR
    return ResourceBundle(
        guardrails=load_resource(GUARDRAILS_FILE, GuardrailsConfig, directory),
        style_lexicons=load_resource(STYLE_LEXICONS_FILE, StyleLexicons, directory),
        templates=load_resource(TEMPLATES_FILE, TemplatesConfig, directory),
    )
