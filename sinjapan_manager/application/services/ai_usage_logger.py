"""Centralized AI usage logger: single entry point for tracking AI generations.

Persists every generation (tasks, study, translation, SEO drafts) with
token usage, timing and contextual metadata.
"""

import logging

from sinjapan_manager.application.interfaces import AIRequestLogRepository
from sinjapan_manager.domain.entities import AIRequestLog, TokenUsage

logger = logging.getLogger(__name__)


class AIUsageLogger:
    """Tracks and persists AI usage across all features.

    Usage:
        usage_logger = AIUsageLogger(log_repository)
        await usage_logger.log_request(
            feature="translation",
            provider="openrouter",
            model="openai/gpt-4o-mini",
            usage=result.usage,
            duration_ms=42,
        )
    """

    def __init__(self, log_repository: AIRequestLogRepository):
        self._repo = log_repository

    async def log_request(
        self,
        *,
        feature: str,
        provider: str,
        model: str | None,
        usage: TokenUsage,
        duration_ms: int,
        status: str = "success",
        error_message: str | None = None,
        request_context: str | None = None,
        user_id: str | None = None,
    ) -> AIRequestLog:
        """Persist and log one AI generation.

        Args:
            feature: Which feature triggered the call ("tasks", "study", ...).
            provider: "backend" or "openrouter".
            model: Model identifier when the provider reports one.
            usage: Token usage from the generation result.
            duration_ms: Wall-clock time of the request in milliseconds.
            status: "success" or "error".
            error_message: Error details if status == "error".
            request_context: Short description of the request (e.g. the topic).
            user_id: The user who asked for it.
        """
        entry = AIRequestLog(
            feature=feature,
            provider=provider,
            model=model,
            prompt_tokens=usage.prompt_tokens,
            completion_tokens=usage.completion_tokens,
            total_tokens=usage.total_tokens,
            cost=usage.cost,
            duration_ms=duration_ms,
            status=status,
            error_message=error_message,
            request_context=request_context,
            user_id=user_id,
        )

        saved = await self._repo.create(entry)

        cost_str = f"${usage.cost:.6f}" if usage.cost else "n/a"
        ctx_str = f" ctx={request_context}" if request_context else ""
        logger.info(
            "AI [%s] provider=%s model=%s status=%s tokens=%d cost=%s %dms%s",
            feature,
            provider,
            model or "-",
            status,
            usage.total_tokens,
            cost_str,
            duration_ms,
            ctx_str,
        )
        return saved

    async def log_error(
        self,
        *,
        feature: str,
        provider: str,
        model: str | None,
        duration_ms: int,
        error: Exception,
        request_context: str | None = None,
        user_id: str | None = None,
    ) -> AIRequestLog:
        """Convenience method for logging failed generations."""
        return await self.log_request(
            feature=feature,
            provider=provider,
            model=model,
            usage=TokenUsage(),
            duration_ms=duration_ms,
            status="error",
            error_message=getattr(error, "message", None) or str(error),
            request_context=request_context,
            user_id=user_id,
        )
