"""LLM refinement: generation clients, prompts, response parsing, and the orchestrator."""

from email_polisher.llm.client import (
    AnthropicGenerationClient,
    CompletionRequest,
    CompletionResponse,
    GenerationClient,
    MockGenerationClient,
    create_generation_client,
)
from email_polisher.llm.parser import parse_email_text, parse_llm_response
from email_polisher.llm.refine import RefineState, refine_with_llm
from email_polisher.llm.severity import SEVERITY_RULES, evaluate_severity_gate

__all__ = [
    "SEVERITY_RULES",
    "AnthropicGenerationClient",
    "CompletionRequest",
    "CompletionResponse",
    "GenerationClient",
    "MockGenerationClient",
    "RefineState",
    "create_generation_client",
    "evaluate_severity_gate",
    "parse_email_text",
    "parse_llm_response",
    "refine_with_llm",
]
