"""LLM Client Package"""

from aicommit.llm.base import (
    SYSTEM_PROMPT,
    LLMError,
    LLMResponse,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    Choice,
    Usage,
    build_request,
)
from aicommit.llm.deepseek import DeepSeekClient

__all__ = [
    "SYSTEM_PROMPT",
    "LLMError",
    "LLMResponse",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "Usage",
    "build_request",
    "DeepSeekClient",
]
