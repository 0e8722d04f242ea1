"""Text generation clients used by the refinement orchestrator.

``AnthropicGenerationClient`` calls the Messages API; ``MockGenerationClient``
returns canned, well-formed responses for development and tests. Use
:func:`create_generation_client` to pick one from settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

import structlog
from anthropic import AsyncAnthropic
from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from email_polisher.config import Settings

logger = structlog.get_logger()

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_TIMEOUT_SECONDS = 30.0


class CompletionRequest(BaseModel):
    """One system + user prompt completion call."""

    system_prompt: str
    user_prompt: str
    temperature: float = Field(default=0.7, ge=0.0, le=1.0)
    max_tokens: int = Field(default=1000, gt=0)


class CompletionResponse(BaseModel):
    text: str


class GenerationClient(Protocol):
    """Anything that can turn a ``CompletionRequest`` into text."""

    async def complete(self, request: CompletionRequest) -> CompletionResponse: ...


class AnthropicGenerationClient:
    """Generation client backed by ``anthropic.AsyncAnthropic``.

    Errors from the SDK propagate; the orchestrator treats any exception as a
    service failure.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: AsyncAnthropic | None = None,
    ) -> None:
        self._model = model
        self._client = client or AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        logger.info(
            "LLM completion requested",
            model=self._model,
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )
        response = await self._client.messages.create(
            model=self._model,
            max_tokens=request.max_tokens,
            temperature=request.temperature,
            system=request.system_prompt,
            messages=[{"role": "user", "content": request.user_prompt}],
        )
        text = "".join(block.text for block in response.content if block.type == "text")
        return CompletionResponse(text=text)


DEFAULT_MOCK_RESPONSE = """===EMAIL===
Subject: Re: Your inquiry

Dear {{recipient_name}},

Thank you for reaching out. I appreciate your interest in connecting and would be happy to help.

I believe my background in the field aligns well with what you are looking for, and I would \
welcome the opportunity to discuss this further.

Would you be available for a brief call next week to explore how we might work together?

Best regards,
{{sender_name}}

===EVAL===
This email keeps a professional tone while staying concise and clear. It has a clear subject, \
greeting, purpose, and call to action."""


class MockGenerationClient:
    """Offline client returning canned responses.

    Responses registered with :meth:`set_mock_response` are returned when
    their trigger appears in the user prompt; otherwise a well-formed default
    email is returned. Every request is recorded on ``requests``.
    """

    def __init__(self, default_response: str = DEFAULT_MOCK_RESPONSE) -> None:
        self._default_response = default_response
        self._responses: dict[str, str] = {}
        self.requests: list[CompletionRequest] = []

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        self.requests.append(request)
        for trigger, response in self._responses.items():
            if trigger in request.user_prompt:
                logger.debug("Using configured mock response", trigger=trigger)
                return CompletionResponse(text=response)
        logger.debug("Using default mock response")
        return CompletionResponse(text=self._default_response)

    def set_mock_response(self, trigger: str, response: str) -> None:
        self._responses[trigger] = response

    def clear_mock_responses(self) -> None:
        self._responses.clear()


def create_generation_client(settings: Settings) -> GenerationClient:
    """Return the Anthropic client in production with an API key, else the mock.

    Args:
        settings: Application settings.

    Returns:
        A ``GenerationClient``.
    """
    api_key = settings.anthropic_api_key.get_secret_value()
    if settings.production and api_key:
        logger.info("Anthropic generation client initialized", model=settings.llm_model)
        return AnthropicGenerationClient(
            api_key=api_key,
            model=settings.llm_model,
            timeout=settings.llm_timeout_seconds,
        )
    logger.info(
        "Using mock generation client",
        production=settings.production,
        has_api_key=bool(api_key),
    )
    return MockGenerationClient()
