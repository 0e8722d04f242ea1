"""Shared pytest fixtures for the email polisher test suite."""

import pytest

from email_polisher.domain.models import DEFAULT_TONE, DraftOutput, ToneSettings
from email_polisher.resources.bundle import ResourceBundle, load_resource_bundle


@pytest.fixture(scope="session")
def resources() -> ResourceBundle:
    """The resource bundle shipped with the package."""
    return load_resource_bundle()


@pytest.fixture
def default_tone() -> ToneSettings:
    """Neutral formality and confidence, student, medium length."""
    return DEFAULT_TONE


@pytest.fixture
def sample_draft() -> DraftOutput:
    """A clean, complete draft that passes every check."""
    return DraftOutput(
        subject="Coffee Chat About Google",
        greeting="Hello [Recipient Name],",
        body_sections=[
            (
                "I hope this message finds you well. "
                "My name is [Your Name], and I'm a student at MIT."
            ),
            "I have long admired the work being done at Google.",
            "Would you be open to a brief coffee chat or phone call in the coming weeks?",
        ],
        closing="Best regards,\n[Your Name]",
    )
