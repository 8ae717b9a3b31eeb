"""Domain entities for LLM completions: framework-independent."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PromptMessage:
    """A single message sent to a completion provider."""

    role: str  # "system" | "user" | "assistant"
    content: str = ""


@dataclass
class TokenUsage:
    """Token usage statistics from a completion."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    cost: float | None = None  # Cost in USD, if available from provider


@dataclass
class CompletionResult:
    """Result from a completion call."""

    model: str
    content: str
    finish_reason: str  # "stop" | "length" | "error"
    usage: TokenUsage = field(default_factory=TokenUsage)
    provider: str = ""


@dataclass
class GenerationResult:
    """Parsed output of one AI generation."""

    data: dict[str, Any]
    provider: str
    model: str | None = None
    usage: TokenUsage = field(default_factory=TokenUsage)
