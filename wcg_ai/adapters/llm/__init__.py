"""LLM adapters — OpenAI-compatible chat completions."""

from wcg_ai.adapters.llm.openai_adapter import (
    LLMRequestError,
    OpenAIChatAdapter,
    extract_content,
)

__all__ = [
    "LLMRequestError",
    "OpenAIChatAdapter",
    "extract_content",
]
