"""AI generation use cases: orchestrates generator calls and request logging."""

import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from sinjapan_manager.application.interfaces import AIGenerator, AIRequestLogRepository
from sinjapan_manager.application.schemas import (
    AIChatRequest,
    AIChatResponse,
    GeneratedTask,
    SeoArticleDraft,
    SeoArticleGenerationRequest,
    StudyRequest,
    StudyResponse,
    TaskCreate,
    TaskGenerationRequest,
    TaskGenerationResponse,
    TranslationRequest,
    TranslationResponse,
    User,
)
from sinjapan_manager.domain.entities import AIFeature, AIRequestLog, GenerationResult
from sinjapan_manager.domain.entities.navigation import can_perform
from sinjapan_manager.domain.entities.seo import slug_for
from sinjapan_manager.domain.exceptions import AIProviderError, PermissionDeniedError

from .ai_usage_logger import AIUsageLogger
from .task_service import TaskService

logger = logging.getLogger(__name__)

MSG_UNPARSABLE = "AIの応答を解析できませんでした"

S = TypeVar("S")


class AIService:
    """Application service: one method per AI feature, every call logged.

    Provider-agnostic: the generator arrives via dependency injection, so
    the upstream AI backend and OpenRouter are interchangeable. A reply is
    shaped before it is logged, so a reply that cannot be used is recorded
    as an error.
    """

    def __init__(
        self,
        generator: AIGenerator,
        log_repository: AIRequestLogRepository,
        usage_logger: AIUsageLogger | None = None,
        tasks: TaskService | None = None,
    ):
        self._generator = generator
        self._log_repository = log_repository
        self._usage_logger = usage_logger or AIUsageLogger(log_repository)
        self._tasks = tasks

    async def generate_tasks(
        self, request: TaskGenerationRequest, *, user_id: str | None = None
    ) -> TaskGenerationResponse:
        """Break a goal into tasks; optionally create them right away."""
        tasks = await self._run(
            AIFeature.TASKS,
            request.model_dump(by_alias=True, exclude={"create"}),
            lambda data: self._shape_tasks(data, request.count),
            context=request.goal,
            user_id=user_id,
        )

        response = TaskGenerationResponse(tasks=tasks)
        if request.create and self._tasks is not None and tasks:
            forms = [
                TaskCreate(
                    title=task.title,
                    description=task.description or None,
                    priority=task.priority,
                    category=task.category,
                )
                for task in tasks
            ]
            response.created, response.items = await self._tasks.create_many(forms)
        return response

    async def study(self, request: StudyRequest, *, user_id: str | None = None) -> StudyResponse:
        return await self._run(
            AIFeature.STUDY,
            request.model_dump(by_alias=True),
            lambda data: self._shape(StudyResponse, data),
            context=request.topic,
            user_id=user_id,
        )

    async def translate(
        self, request: TranslationRequest, *, user_id: str | None = None
    ) -> TranslationResponse:
        return await self._run(
            AIFeature.TRANSLATION,
            request.model_dump(by_alias=True),
            lambda data: self._shape(TranslationResponse, data),
            context=f"{request.source_language}->{request.target_language}",
            user_id=user_id,
        )

    async def chat(self, request: AIChatRequest, *, user_id: str | None = None) -> AIChatResponse:
        """Answer one assistant message given the conversation so far."""
        return await self._run(
            AIFeature.CHAT,
            request.model_dump(by_alias=True),
            lambda data: self._shape(AIChatResponse, data),
            context=request.message,
            user_id=user_id,
        )

    async def draft_seo_article(
        self, request: SeoArticleGenerationRequest, *, user_id: str | None = None
    ) -> SeoArticleDraft:
        """Generate an article draft; a missing slug is derived from the title."""
        return await self._run(
            AIFeature.SEO_ARTICLE,
            request.model_dump(by_alias=True, exclude_none=True),
            self._shape_draft,
            context=request.topic,
            user_id=user_id,
        )

    async def get_logs(
        self,
        actor: User,
        *,
        feature: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[AIRequestLog]:
        """Retrieve AI request logs, most recent first (management roles only)."""
        if not can_perform(actor.role, "ai.logs"):
            raise PermissionDeniedError("ai.logs", actor.role)
        return await self._log_repository.get_all(feature=feature, skip=skip, limit=limit)

    # ── Internal ──

    async def _run(
        self,
        feature: AIFeature,
        payload: dict[str, Any],
        shape: Callable[[dict[str, Any]], S],
        *,
        context: str | None,
        user_id: str | None,
    ) -> S:
        provider = self._generator.provider_name
        start = time.monotonic()
        result: GenerationResult | None = None
        try:
            result = await self._generator.generate(feature, payload)
            shaped = shape(result.data)
        except AIProviderError as exc:
            await self._usage_logger.log_error(
                feature=feature.value,
                provider=result.provider if result else provider,
                model=result.model if result else None,
                duration_ms=int((time.monotonic() - start) * 1000),
                error=exc,
                request_context=_truncate(context),
                user_id=user_id,
            )
            raise

        await self._usage_logger.log_request(
            feature=feature.value,
            provider=result.provider or provider,
            model=result.model,
            usage=result.usage,
            duration_ms=int((time.monotonic() - start) * 1000),
            request_context=_truncate(context),
            user_id=user_id,
        )
        return shaped

    def _shape(self, model: type[BaseModel], data: dict[str, Any]):
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            logger.warning("Unexpected %s payload from AI: %s", model.__name__, exc)
            raise AIProviderError(self._generator.provider_name, 502, MSG_UNPARSABLE) from exc

    def _shape_tasks(self, data: dict[str, Any], count: int) -> list[GeneratedTask]:
        raw_tasks = data.get("tasks")
        if not isinstance(raw_tasks, list):
            logger.warning("AI task reply has no task list: %r", data)
            raise AIProviderError(self._generator.provider_name, 502, MSG_UNPARSABLE)
        return [
            task for task in (_parse(GeneratedTask, item) for item in raw_tasks[:count])
            if task is not None
        ]

    def _shape_draft(self, data: dict[str, Any]) -> SeoArticleDraft:
        title = data.get("title")
        if isinstance(title, str):
            data = {**data, "suggestedSlug": slug_for(title, data.get("suggestedSlug") or data.get("slug"))}
        return self._shape(SeoArticleDraft, data)


def _parse(model: type[BaseModel], item: Any):
    if isinstance(item, str):
        item = {"title": item}
    try:
        return model.model_validate(item)
    except ValidationError:
        logger.warning("Dropping malformed generated item: %r", item)
        return None


def _truncate(text: str | None, limit: int = 200) -> str | None:
    if text is None:
        return None
    return text if len(text) <= limit else text[: limit - 1] + "…"
