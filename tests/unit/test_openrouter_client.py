"""Unit tests for the OpenRouterClient."""

import json

import httpx
import pytest

from sinjapan_manager.domain.entities import PromptMessage
from sinjapan_manager.domain.exceptions import AIProviderError
from sinjapan_manager.infrastructure.openrouter.openrouter_client import OpenRouterClient


# ── Helpers ──


def _mock_openrouter_response(
    content: str = '{"translatedText": "Hello"}',
    model: str = "openai/gpt-4o-mini",
    prompt_tokens: int = 10,
    completion_tokens: int = 5,
    total_tokens: int = 15,
    cost: float | None = 0.00014,
) -> dict:
    """Build a mock OpenRouter JSON response."""
    return {
        "id": "chatcmpl-test123",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "model": model,
        "usage": {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": total_tokens,
            **({"cost": cost} if cost is not None else {}),
        },
    }


def _make_client(handler) -> OpenRouterClient:
    return OpenRouterClient(
        api_key="sk-test",
        app_name="SIN JAPAN Manager",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


MESSAGES = [
    PromptMessage(role="system", content="You translate."),
    PromptMessage(role="user", content="こんにちは"),
]


# ── Tests ──


@pytest.mark.asyncio
async def test_complete_parses_response():
    """Non-streaming call correctly parses OpenRouter JSON response."""
    client = _make_client(lambda request: httpx.Response(200, json=_mock_openrouter_response()))

    result = await client.complete(MESSAGES, "openai/gpt-4o-mini")

    assert result.content == '{"translatedText": "Hello"}'
    assert result.model == "openai/gpt-4o-mini"
    assert result.finish_reason == "stop"
    assert result.usage.total_tokens == 15
    assert result.usage.cost == 0.00014
    assert result.provider == "openrouter"


@pytest.mark.asyncio
async def test_complete_sends_expected_payload_and_headers():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, json=_mock_openrouter_response())

    client = _make_client(handler)
    await client.complete(MESSAGES, "openai/gpt-4o-mini", temperature=0.2, max_tokens=500, json_mode=True)

    request = captured[0]
    body = json.loads(request.content)
    assert request.url.path.endswith("/chat/completions")
    assert request.headers["authorization"] == "Bearer sk-test"
    assert request.headers["x-title"] == "SIN JAPAN Manager"
    assert body["messages"][1] == {"role": "user", "content": "こんにちは"}
    assert body["temperature"] == 0.2
    assert body["max_tokens"] == 500
    assert body["response_format"] == {"type": "json_object"}


@pytest.mark.asyncio
async def test_optional_parameters_are_omitted():
    captured: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(json.loads(request.content))
        return httpx.Response(200, json=_mock_openrouter_response(cost=None))

    result = await _make_client(handler).complete(MESSAGES, "m")

    assert "temperature" not in captured[0]
    assert "response_format" not in captured[0]
    assert result.usage.cost is None


@pytest.mark.asyncio
async def test_http_error_raises_provider_error():
    client = _make_client(
        lambda request: httpx.Response(429, json={"error": {"code": 429, "message": "Rate limited"}})
    )
    with pytest.raises(AIProviderError) as exc_info:
        await client.complete(MESSAGES, "m")
    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "Rate limited"
    assert exc_info.value.provider == "openrouter"


@pytest.mark.asyncio
async def test_error_in_200_body_raises_provider_error():
    client = _make_client(
        lambda request: httpx.Response(200, json={"error": {"code": 400, "message": "Bad model"}})
    )
    with pytest.raises(AIProviderError) as exc_info:
        await client.complete(MESSAGES, "m")
    assert exc_info.value.status_code == 400


@pytest.mark.asyncio
async def test_empty_choices_raise_provider_error():
    client = _make_client(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(AIProviderError):
        await client.complete(MESSAGES, "m")


@pytest.mark.asyncio
async def test_transport_failure_raises_502():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(AIProviderError) as exc_info:
        await _make_client(handler).complete(MESSAGES, "m")
    assert exc_info.value.status_code == 502
