"""OpenRouter API client: implements the CompletionProvider interface.

Communicates with the OpenRouter API (https://openrouter.ai/api/v1)
using httpx for non-streaming chat completions.
"""

import logging

import httpx

from sinjapan_manager.application.interfaces import CompletionProvider
from sinjapan_manager.domain.entities import CompletionResult, PromptMessage, TokenUsage
from sinjapan_manager.domain.exceptions import AIProviderError

logger = logging.getLogger(__name__)


class OpenRouterClient(CompletionProvider):
    """Infrastructure adapter: connects to the OpenRouter API.

    Uses an injected httpx client when given (shared connection pool),
    otherwise opens a short-lived one per request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://openrouter.ai/api/v1",
        app_name: str = "SIN JAPAN Manager",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 120.0,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._app_name = app_name
        self._http_client = http_client
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "openrouter"

    def _get_headers(self) -> dict[str, str]:
        """Standard headers for OpenRouter requests."""
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "X-Title": self._app_name,
        }

    def _build_payload(
        self,
        messages: list[PromptMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> dict:
        """Build the request payload for the OpenRouter API."""
        payload: dict = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        if json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def complete(
        self,
        messages: list[PromptMessage],
        model: str,
        *,
        temperature: float | None = None,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> CompletionResult:
        """Send a non-streaming chat completion to OpenRouter."""
        payload = self._build_payload(
            messages,
            model,
            temperature=temperature,
            max_tokens=max_tokens,
            json_mode=json_mode,
        )
        url = f"{self._base_url}/chat/completions"

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(url, headers=self._get_headers(), json=payload)
            except httpx.HTTPError as exc:
                logger.warning("OpenRouter request failed: %s", exc)
                raise AIProviderError(self.provider_name, 502, str(exc) or "connection failed") from exc

            if response.status_code != 200:
                self._raise_provider_error(response)

            return self._parse_completion_response(response.json())

        finally:
            if should_close:
                await client.aclose()

    def _parse_completion_response(self, data: dict) -> CompletionResult:
        """Parse the OpenRouter JSON response into a domain entity."""
        if "error" in data:
            error = data["error"]
            raise AIProviderError(
                provider=self.provider_name,
                status_code=error.get("code", 500),
                message=error.get("message", "Unknown error"),
            )

        choices = data.get("choices", [])
        if not choices:
            raise AIProviderError(
                provider=self.provider_name,
                status_code=500,
                message="No choices in response",
            )

        choice = choices[0]
        message = choice.get("message", {})
        usage_data = data.get("usage", {})

        return CompletionResult(
            model=data.get("model", ""),
            content=message.get("content", "") or "",
            finish_reason=choice.get("finish_reason", "stop") or "stop",
            usage=TokenUsage(
                prompt_tokens=usage_data.get("prompt_tokens", 0),
                completion_tokens=usage_data.get("completion_tokens", 0),
                total_tokens=usage_data.get("total_tokens", 0),
                cost=usage_data.get("cost"),
            ),
            provider=self.provider_name,
        )

    def _raise_provider_error(self, response: httpx.Response) -> None:
        """Raise AIProviderError from a non-200 httpx Response."""
        try:
            data = response.json()
            error = data.get("error", {})
            message = error.get("message", response.text)
        except (ValueError, AttributeError):
            message = response.text

        raise AIProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
