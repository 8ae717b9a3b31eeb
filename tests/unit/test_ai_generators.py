"""Unit tests for the two AIGenerator adapters (OpenRouter and upstream backend)."""

import json

import httpx
import pytest

from sinjapan_manager.application.interfaces import CompletionProvider
from sinjapan_manager.domain.entities import AIFeature, CompletionResult, TokenUsage
from sinjapan_manager.domain.exceptions import AIProviderError
from sinjapan_manager.infrastructure.backend import BackendAIGenerator, BackendClient
from sinjapan_manager.infrastructure.llm import OpenRouterAIGenerator


class FakeCompletionProvider(CompletionProvider):
    def __init__(self, content: str):
        self.content = content
        self.calls: list[dict] = []

    @property
    def provider_name(self) -> str:
        return "openrouter"

    async def complete(self, messages, model, *, temperature=None, max_tokens=None, json_mode=False):
        self.calls.append(
            {
                "messages": messages,
                "model": model,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "json_mode": json_mode,
            }
        )
        return CompletionResult(
            model=model,
            content=self.content,
            finish_reason="stop",
            usage=TokenUsage(prompt_tokens=5, completion_tokens=7, total_tokens=12),
            provider="openrouter",
        )


# ── OpenRouterAIGenerator ──


@pytest.mark.asyncio
async def test_openrouter_generator_builds_prompt_and_parses_fenced_json():
    provider = FakeCompletionProvider('Here you go:\n```json\n{"tasks": [{"title": "調査"}]}\n```')
    generator = OpenRouterAIGenerator(provider, model="openai/gpt-4o-mini", temperature=0.5)

    result = await generator.generate(AIFeature.TASKS, {"goal": "新店舗オープン", "count": 3})

    assert result.data == {"tasks": [{"title": "調査"}]}
    assert result.model == "openai/gpt-4o-mini"
    assert result.usage.total_tokens == 12
    call = provider.calls[0]
    assert call["json_mode"] is True
    assert call["temperature"] == 0.5
    assert call["messages"][0].role == "system"
    assert "新店舗オープン" in call["messages"][1].content
    assert "3件" in call["messages"][1].content


@pytest.mark.asyncio
async def test_openrouter_chat_replays_history_between_system_and_user():
    provider = FakeCompletionProvider('{"reply": "はい、承知しました"}')
    generator = OpenRouterAIGenerator(provider, model="m")

    result = await generator.generate(
        AIFeature.CHAT,
        {
            "message": "今月の売上は？",
            "history": [
                {"role": "user", "content": "こんにちは"},
                {"role": "assistant", "content": "ご用件をどうぞ"},
            ],
        },
    )

    assert result.data == {"reply": "はい、承知しました"}
    messages = provider.calls[0]["messages"]
    assert [m.role for m in messages] == ["system", "user", "assistant", "user"]
    assert messages[2].content == "ご用件をどうぞ"
    assert messages[3].content == "今月の売上は？"


@pytest.mark.asyncio
async def test_openrouter_generator_extracts_object_from_prose():
    provider = FakeCompletionProvider('翻訳結果です {"translatedText": "Hello"} 以上')
    generator = OpenRouterAIGenerator(provider, model="m")

    result = await generator.generate(
        AIFeature.TRANSLATION, {"text": "こんにちは", "targetLanguage": "English"}
    )

    assert result.data == {"translatedText": "Hello"}
    assert "English" in provider.calls[0]["messages"][1].content


@pytest.mark.asyncio
async def test_openrouter_generator_rejects_non_json():
    generator = OpenRouterAIGenerator(FakeCompletionProvider("申し訳ありません"), model="m")
    with pytest.raises(AIProviderError) as exc_info:
        await generator.generate(AIFeature.STUDY, {"topic": "会計", "level": "beginner"})
    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_openrouter_generator_rejects_json_array():
    generator = OpenRouterAIGenerator(FakeCompletionProvider("[1, 2]"), model="m")
    with pytest.raises(AIProviderError):
        await generator.generate(AIFeature.SEO_ARTICLE, {"topic": "起業"})


# ── BackendAIGenerator ──


def _backend(handler) -> BackendClient:
    return BackendClient(
        "http://backend.test",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_backend_generator_posts_to_feature_route():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(
            200,
            json={"translatedText": "Hello", "model": "gpt-4o", "usage": {"totalTokens": 42}},
        )

    result = await BackendAIGenerator(_backend(handler)).generate(
        AIFeature.TRANSLATION, {"text": "こんにちは", "targetLanguage": "English"}
    )

    assert captured[0].url.path == "/api/ai/translate"
    assert json.loads(captured[0].content)["targetLanguage"] == "English"
    assert result.data == {"translatedText": "Hello"}
    assert result.model == "gpt-4o"
    assert result.usage.total_tokens == 42
    assert result.provider == "backend"


@pytest.mark.asyncio
async def test_backend_generator_unwraps_article():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/seo-articles/generate"
        return httpx.Response(200, json={"article": {"title": "T", "content": "C"}})

    result = await BackendAIGenerator(_backend(handler)).generate(AIFeature.SEO_ARTICLE, {"topic": "x"})
    assert result.data == {"title": "T", "content": "C"}


@pytest.mark.asyncio
async def test_backend_generator_treats_error_body_as_failure():
    handler = lambda request: httpx.Response(200, json={"error": "AI機能が無効です"})  # noqa: E731
    with pytest.raises(AIProviderError) as exc_info:
        await BackendAIGenerator(_backend(handler)).generate(AIFeature.STUDY, {"topic": "x"})
    assert exc_info.value.message == "AI機能が無効です"


@pytest.mark.asyncio
async def test_backend_generator_wraps_http_errors():
    handler = lambda request: httpx.Response(500, json={"message": "OpenAI key missing"})  # noqa: E731
    with pytest.raises(AIProviderError) as exc_info:
        await BackendAIGenerator(_backend(handler)).generate(AIFeature.TASKS, {"goal": "x"})
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "OpenAI key missing"
