"""Tests for JSON resource loading, validation, and the resource bundle."""

from __future__ import annotations

import asyncio
import json
import shutil
from pathlib import Path

import pytest

from email_polisher.domain.errors import ConfigError
from email_polisher.domain.types import EmailCategory
from email_polisher.resources.bundle import (
    GUARDRAILS_FILE,
    STYLE_LEXICONS_FILE,
    TEMPLATES_FILE,
    ResourceBundle,
    load_resource_bundle,
)
from email_polisher.resources.loader import (
    DEFAULT_RESOURCE_DIR,
    load_resource,
    load_resource_async,
)
from email_polisher.resources.models import GuardrailsConfig, StyleLexicons, TemplatesConfig

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _copy_resources(target: Path) -> Path:
    for name in (GUARDRAILS_FILE, STYLE_LEXICONS_FILE, TEMPLATES_FILE):
        shutil.copy(DEFAULT_RESOURCE_DIR / name, target / name)
    return target


# ---------------------------------------------------------------------------
# Shipped resources
# ---------------------------------------------------------------------------


class TestShippedResources:
    """The JSON files bundled with the package are valid."""

    def test_bundle_loads(self, resources: ResourceBundle) -> None:
        assert isinstance(resources.guardrails, GuardrailsConfig)
        assert isinstance(resources.style_lexicons, StyleLexicons)
        assert isinstance(resources.templates, TemplatesConfig)

    def test_every_category_has_template(self, resources: ResourceBundle) -> None:
        for category in EmailCategory:
            assert resources.templates.get(category) is not None

    def test_template_required_sections_exist(self, resources: ResourceBundle) -> None:
        for category in EmailCategory:
            template = resources.templates.get(category)
            assert template is not None
            for field in template.required:
                assert template.section(field) is not None, (category, field)

    def test_blacklist_contains_guarantee(self, resources: ResourceBundle) -> None:
        assert "i guarantee" in resources.guardrails.blacklist_phrases

    def test_bundle_is_frozen(self, resources: ResourceBundle) -> None:
        with pytest.raises(AttributeError):
            resources.guardrails = resources.guardrails  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Failure modes
# ---------------------------------------------------------------------------


class TestLoadResourceErrors:
    """Every failure surfaces as ConfigError naming the file."""

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_resource("missing.json", GuardrailsConfig, tmp_path)
        assert str(exc_info.value) == 'Config file not found: "missing.json"'
        assert exc_info.value.filename == "missing.json"

    def test_malformed_json(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_resource("bad.json", GuardrailsConfig, tmp_path)
        assert str(exc_info.value).startswith('Invalid JSON in config file "bad.json"')

    def test_schema_mismatch_lists_paths(self, tmp_path: Path) -> None:
        (tmp_path / "g.json").write_text(json.dumps({"blacklist_phrases": []}), encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_resource("g.json", GuardrailsConfig, tmp_path)
        message = str(exc_info.value)
        assert message.startswith('Config validation failed for "g.json":\n')
        assert "blacklist_phrases" in message
        assert "slang_regex" in message

    def test_uncompilable_regex_rejected(self, tmp_path: Path) -> None:
        data = json.loads((DEFAULT_RESOURCE_DIR / GUARDRAILS_FILE).read_text(encoding="utf-8"))
        data["slang_regex"] = "(unclosed"
        (tmp_path / GUARDRAILS_FILE).write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ConfigError, match="slang_regex"):
            load_resource(GUARDRAILS_FILE, GuardrailsConfig, tmp_path)

    def test_unknown_template_category_rejected(self, tmp_path: Path) -> None:
        data = {
            "newsletter": {
                "required": ["subject"],
                "subject": "s",
                "greeting": "g",
                "closing": "c",
            }
        }
        (tmp_path / TEMPLATES_FILE).write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ConfigError):
            load_resource(TEMPLATES_FILE, TemplatesConfig, tmp_path)


class TestLoadResourceAsync:
    def test_async_matches_sync(self) -> None:
        result = asyncio.run(load_resource_async(GUARDRAILS_FILE, GuardrailsConfig))
        assert result == load_resource(GUARDRAILS_FILE, GuardrailsConfig)


class TestLoadResourceBundle:
    """Bundle loading from an explicit directory."""

    def test_custom_directory(self, tmp_path: Path) -> None:
        bundle = load_resource_bundle(_copy_resources(tmp_path))
        assert bundle.guardrails.slang_regex

    def test_missing_file_in_directory_is_fatal(self, tmp_path: Path) -> None:
        _copy_resources(tmp_path)
        (tmp_path / STYLE_LEXICONS_FILE).unlink()
        with pytest.raises(ConfigError) as exc_info:
            load_resource_bundle(tmp_path)
        assert exc_info.value.filename == STYLE_LEXICONS_FILE
