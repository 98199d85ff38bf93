"""Chat Completion Types and Shared Code"""

from dataclasses import dataclass, field, asdict
from typing import Any, Optional


SYSTEM_PROMPT = "You are a helpful assistant to create a short git commit message"


class LLMError(Exception):
    """Raised when LLM operations fail."""
    pass


def _int(value: Any) -> int:
    return value if isinstance(value, int) else 0


@dataclass
class ChatMessage:
    role: str
    content: str

    @classmethod
    def from_dict(cls, data: Any) -> 'ChatMessage':
        if not isinstance(data, dict):
            raise LLMError("Invalid response: choice has no message object")
        content = data.get("content")
        if not isinstance(content, str):
            raise LLMError("Invalid response: message content is not a string")
        return cls(role=str(data.get("role", "assistant")), content=content)


@dataclass
class ChatRequest:
    """Body of a chat/completions call."""
    model: str
    messages: list[ChatMessage]
    stream: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_cache_hit_tokens: int = 0
    prompt_cache_miss_tokens: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> 'Usage':
        if not isinstance(data, dict):
            return cls()
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: _int(v) for k, v in data.items() if k in valid_keys})


@dataclass
class Choice:
    index: int
    message: ChatMessage
    finish_reason: Optional[str] = None
    logprobs: Optional[Any] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'Choice':
        if not isinstance(data, dict):
            raise LLMError("Invalid response: choice is not an object")
        return cls(
            index=_int(data.get("index")),
            message=ChatMessage.from_dict(data.get("message")),
            finish_reason=data.get("finish_reason"),
            logprobs=data.get("logprobs"),
        )


@dataclass
class ChatResponse:
    """Parsed chat/completions response.

    Only ``choices`` is checked strictly. The other fields are informational
    and fall back to empty values when the provider leaves them out.
    """
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[Choice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)
    system_fingerprint: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> 'ChatResponse':
        if not isinstance(data, dict):
            raise LLMError("Invalid response: expected a JSON object")
        choices = data.get("choices")
        if not isinstance(choices, list):
            raise LLMError("Invalid response: missing 'choices' list")
        return cls(
            id=str(data.get("id", "")),
            object=str(data.get("object", "")),
            created=_int(data.get("created")),
            model=str(data.get("model", "")),
            choices=[Choice.from_dict(c) for c in choices],
            usage=Usage.from_dict(data.get("usage")),
            system_fingerprint=data.get("system_fingerprint"),
        )


@dataclass
class LLMResponse:
    """Structured result handed back to the CLI."""
    content: str
    model: str = ""
    tokens_used: int = 0


def build_request(diff: str, model: str) -> ChatRequest:
    """System instruction first, then the diff verbatim as the user turn."""
    return ChatRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(role="user", content=diff),
        ],
        stream=False,
    )
