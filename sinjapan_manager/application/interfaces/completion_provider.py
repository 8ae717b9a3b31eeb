"""Abstract completion provider interface: port for LLM adapters.

Each LLM provider (currently OpenRouter) implements this interface.
"""

from abc import ABC, abstractmethod

from sinjapan_manager.domain.entities import CompletionResult, PromptMessage


class CompletionProvider(ABC):
    """Port: defines what the AI generators need from an LLM provider."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this provider (e.g. 'openrouter')."""
        ...

    @abstractmethod
    async def complete(
        self,
        messages: list[PromptMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> CompletionResult:
        """Send a non-streaming completion request.

        Args:
            messages: System and user prompts.
            model: The model identifier (e.g. 'openai/gpt-4o-mini').
            temperature: Sampling temperature (0.0–2.0).
            max_tokens: Maximum tokens in the response.
            json_mode: Ask the provider for a JSON object response.

        Raises:
            AIProviderError: If the provider returns an error.
        """
        ...
