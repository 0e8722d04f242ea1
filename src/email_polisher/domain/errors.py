"""Domain-specific exception classes for the email polisher."""

from email_polisher.domain.types import EmailCategory


class EmailPolisherError(Exception):
    """Base class for all domain errors in the email polisher."""


class ConfigError(EmailPolisherError):
    """Raised when a JSON resource is missing, malformed, or fails its schema.

    Attributes:
        filename: The resource file that failed to load.
    """

    def __init__(self, message: str, filename: str) -> None:
        self.filename = filename
        super().__init__(message)


class TemplateNotFoundError(EmailPolisherError):
    """Raised when the legacy template strategy has no template for a category.

    The category enum is closed and ``templates.json`` covers every member, so
    this signals a broken deployment rather than a bad request.

    Attributes:
        category: The category that had no template.
    """

    def __init__(self, category: EmailCategory | str) -> None:
        self.category = category
        super().__init__(f"Template not found for category: {category}")
