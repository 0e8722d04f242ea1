"""JSON configuration resources: guardrails, style lexicons, and legacy templates."""

from email_polisher.resources.bundle import ResourceBundle, load_resource_bundle
from email_polisher.resources.loader import DEFAULT_RESOURCE_DIR, load_resource, load_resource_async
from email_polisher.resources.models import (
    CategoryTemplate,
    GuardrailsConfig,
    StyleLexicons,
    TemplatesConfig,
)

__all__ = [
    "DEFAULT_RESOURCE_DIR",
    "CategoryTemplate",
    "GuardrailsConfig",
    "ResourceBundle",
    "StyleLexicons",
    "TemplatesConfig",
    "load_resource",
    "load_resource_async",
    "load_resource_bundle",
]
