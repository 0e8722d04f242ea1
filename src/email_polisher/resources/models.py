"""Schemas for the JSON resources shipped with the package."""

import re

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from email_polisher.domain.types import EmailCategory


class GuardrailsConfig(BaseModel):
    """Blacklist phrases and regexes used by the quality checks."""

    model_config = ConfigDict(frozen=True)

    blacklist_phrases: list[str] = Field(min_length=1)
    slang_regex: str = Field(min_length=1)
    emoji_regex: str = Field(min_length=1)
    attachment_keywords: list[str] = Field(min_length=1)
    link_regex: str = Field(min_length=1)

    @field_validator("slang_regex", "emoji_regex", "link_regex")
    @classmethod
    def pattern_must_compile(cls, v: str) -> str:
        """Reject patterns Python's ``re`` cannot compile."""
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"invalid regular expression: {exc}") from exc
        return v


class FormalityLexicon(BaseModel):
    model_config = ConfigDict(frozen=True)

    casual_to_formal: dict[str, str] = Field(min_length=1)


class WarmthLexicon(BaseModel):
    model_config = ConfigDict(frozen=True)

    niceties: list[str] = Field(min_length=1)


class ConfidenceLexicon(BaseModel):
    model_config = ConfigDict(frozen=True)

    hedges: list[str] = Field(min_length=1)
    assertive: list[str] = Field(min_length=1)


class SeniorityLexicon(BaseModel):
    model_config = ConfigDict(frozen=True)

    student_additions: list[str] = Field(min_length=1)
    professional_additions: list[str] = Field(min_length=1)


class StyleLexicons(BaseModel):
    """Word lists consumed by the style passes.

    ``warmth.niceties`` is loaded and validated but no pass reads it.
    """

    model_config = ConfigDict(frozen=True)

    formality: FormalityLexicon
    warmth: WarmthLexicon
    confidence: ConfidenceLexicon
    seniority: SeniorityLexicon


class CategoryTemplate(BaseModel):
    """Legacy per-category template.

    Besides the fixed fields, any extra string field is a named body section
    that ``required`` can reference.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    required: list[str] = Field(min_length=1)
    subject: str
    greeting: str
    closing: str

    def section(self, name: str) -> str | None:
        """Return the template text for a named section, if defined."""
        extra = self.model_extra or {}
        value = extra.get(name)
        if value is None:
            value = getattr(self, name, None) if name in type(self).model_fields else None
        return value if isinstance(value, str) else None


class TemplatesConfig(RootModel[dict[EmailCategory, CategoryTemplate]]):
    """Category -> template mapping loaded from ``templates.json``."""

    def get(self, category: EmailCategory) -> CategoryTemplate | None:
        return self.root.get(category)
