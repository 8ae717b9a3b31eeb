"""Unit tests for AIService: feature calls, shaping and request logging."""

import pytest

from sinjapan_manager.application.schemas import (
    AIChatRequest,
    SeoArticleGenerationRequest,
    StudyRequest,
    TaskGenerationRequest,
    TranslationRequest,
    User,
)
from sinjapan_manager.application.services import AIService, TaskService
from sinjapan_manager.domain.entities import AIFeature
from sinjapan_manager.domain.exceptions import AIProviderError, PermissionDeniedError
from tests.fakes import FakeAIGenerator, FakeAIRequestLogRepository, FakeResourceRepository

ADMIN = User(id=1, name="Admin", role="admin")

GENERATED_TASKS = {
    "tasks": [
        {"title": "市場調査", "description": "競合を調べる", "priority": "high"},
        "LP作成",
        {"title": "Bad priority", "priority": "urgent"},
        {"title": "広告出稿", "priority": "low", "category": "marketing"},
    ]
}


@pytest.mark.asyncio
async def test_generate_tasks_parses_and_logs():
    logs = FakeAIRequestLogRepository()
    generator = FakeAIGenerator({AIFeature.TASKS: GENERATED_TASKS})
    service = AIService(generator, logs)

    response = await service.generate_tasks(
        TaskGenerationRequest(goal="新規事業の立ち上げ", count=5), user_id="3"
    )

    assert [t.title for t in response.tasks] == ["市場調査", "LP作成", "広告出稿"]
    assert response.created == []
    feature, payload = generator.requests[0]
    assert feature is AIFeature.TASKS
    assert payload == {"goal": "新規事業の立ち上げ", "context": None, "count": 5}

    entry = logs.logs[0]
    assert entry.feature == "tasks"
    assert entry.status == "success"
    assert entry.total_tokens == 30
    assert entry.user_id == "3"
    assert entry.request_context == "新規事業の立ち上げ"


@pytest.mark.asyncio
async def test_generate_tasks_respects_count():
    service = AIService(FakeAIGenerator({AIFeature.TASKS: GENERATED_TASKS}), FakeAIRequestLogRepository())
    response = await service.generate_tasks(TaskGenerationRequest(goal="x", count=1))
    assert [t.title for t in response.tasks] == ["市場調査"]


@pytest.mark.asyncio
async def test_generate_tasks_can_create_them():
    task_repo = FakeResourceRepository([{"id": 1, "title": "既存タスク", "status": "pending"}])
    service = AIService(
        FakeAIGenerator({AIFeature.TASKS: GENERATED_TASKS}),
        FakeAIRequestLogRepository(),
        tasks=TaskService(task_repo),
    )

    response = await service.generate_tasks(TaskGenerationRequest(goal="x", create=True))

    assert [t.title for t in response.created] == ["市場調査", "LP作成", "広告出稿"]
    assert len(response.items) == 4
    assert task_repo.calls_of("create")[0][1] == {
        "title": "市場調査",
        "description": "競合を調べる",
        "status": "pending",
        "priority": "high",
    }


@pytest.mark.asyncio
async def test_provider_failure_is_logged_and_raised():
    logs = FakeAIRequestLogRepository()
    error = AIProviderError("fake", 503, "overloaded")
    service = AIService(FakeAIGenerator({AIFeature.STUDY: error}), logs)

    with pytest.raises(AIProviderError):
        await service.study(StudyRequest(topic="会計"))

    assert logs.logs[0].status == "error"
    assert logs.logs[0].error_message == "overloaded"
    assert logs.logs[0].feature == "study"


@pytest.mark.asyncio
async def test_study_reply_is_shaped():
    reply = {
        "title": "会計入門",
        "explanation": "...",
        "keyPoints": ["借方", "貸方"],
        "quiz": [{"question": "Q1", "answer": "A1"}],
    }
    service = AIService(FakeAIGenerator({AIFeature.STUDY: reply}), FakeAIRequestLogRepository())
    response = await service.study(StudyRequest(topic="会計", level="advanced"))
    assert response.key_points == ["借方", "貸方"]
    assert response.quiz[0].answer == "A1"


@pytest.mark.asyncio
async def test_unexpected_reply_becomes_provider_error():
    service = AIService(
        FakeAIGenerator({AIFeature.TRANSLATION: {"text": "no translatedText"}}),
        FakeAIRequestLogRepository(),
    )
    with pytest.raises(AIProviderError) as exc_info:
        await service.translate(TranslationRequest(text="こんにちは", target_language="English"))
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "AIの応答を解析できませんでした"


@pytest.mark.asyncio
async def test_seo_draft_gets_a_slug():
    reply = {"title": "東京で起業する方法", "content": "## はじめに", "metaTitle": "起業"}
    service = AIService(FakeAIGenerator({AIFeature.SEO_ARTICLE: reply}), FakeAIRequestLogRepository())

    draft = await service.draft_seo_article(SeoArticleGenerationRequest(topic="起業"))

    assert draft.suggested_slug.startswith("article-")
    assert draft.meta_title == "起業"


@pytest.mark.asyncio
async def test_seo_draft_keeps_suggested_slug():
    reply = {"title": "Startup in Tokyo", "suggestedSlug": "startup-tokyo", "content": "..."}
    service = AIService(FakeAIGenerator({AIFeature.SEO_ARTICLE: reply}), FakeAIRequestLogRepository())
    draft = await service.draft_seo_article(SeoArticleGenerationRequest(topic="x"))
    assert draft.suggested_slug == "startup-tokyo"


@pytest.mark.asyncio
async def test_get_logs_filters_by_feature():
    logs = FakeAIRequestLogRepository()
    generator = FakeAIGenerator(
        {
            AIFeature.TRANSLATION: {"translatedText": "Hello"},
            AIFeature.TASKS: {"tasks": []},
        }
    )
    service = AIService(generator, logs)
    await service.translate(TranslationRequest(text="こんにちは", target_language="English"))
    await service.generate_tasks(TaskGenerationRequest(goal="x"))

    assert [log.feature for log in await service.get_logs(ADMIN)] == ["tasks", "translation"]
    assert [log.feature for log in await service.get_logs(ADMIN, feature="translation")] == ["translation"]


@pytest.mark.asyncio
async def test_get_logs_requires_management_role():
    service = AIService(FakeAIGenerator({}), FakeAIRequestLogRepository())
    with pytest.raises(PermissionDeniedError) as exc_info:
        await service.get_logs(User(id=3, name="Staff", role="staff"))
    assert exc_info.value.action == "ai.logs"


@pytest.mark.asyncio
async def test_unparsable_reply_is_logged_as_error():
    logs = FakeAIRequestLogRepository()
    service = AIService(FakeAIGenerator({AIFeature.TRANSLATION: {"text": "?"}}), logs)

    with pytest.raises(AIProviderError):
        await service.translate(TranslationRequest(text="こんにちは", target_language="English"))

    assert len(logs.logs) == 1
    assert logs.logs[0].status == "error"
    assert logs.logs[0].error_message == "AIの応答を解析できませんでした"
    assert logs.logs[0].model == "fake-model"


@pytest.mark.asyncio
async def test_task_reply_without_list_is_logged_as_error():
    logs = FakeAIRequestLogRepository()
    service = AIService(FakeAIGenerator({AIFeature.TASKS: {"tasks": "none"}}), logs)

    with pytest.raises(AIProviderError):
        await service.generate_tasks(TaskGenerationRequest(goal="x"))

    assert [log.status for log in logs.logs] == ["error"]


@pytest.mark.asyncio
async def test_chat_sends_history_and_returns_reply():
    logs = FakeAIRequestLogRepository()
    generator = FakeAIGenerator({AIFeature.CHAT: {"reply": "承知しました"}})
    service = AIService(generator, logs)

    response = await service.chat(
        AIChatRequest(
            message="売上をまとめて",
            history=[{"role": "user", "content": "こんにちは"}, {"role": "assistant", "content": "どうぞ"}],
        ),
        user_id="7",
    )

    assert response.reply == "承知しました"
    feature, payload = generator.requests[0]
    assert feature is AIFeature.CHAT
    assert payload["history"][1] == {"role": "assistant", "content": "どうぞ"}
    assert logs.logs[0].feature == "chat"
    assert logs.logs[0].request_context == "売上をまとめて"
