"""Domain entity for AI request logging: tracks usage per feature."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class AIRequestLog:
    """A logged AI generation call.

    Every call, successful or not, is recorded with the feature that
    triggered it, token usage, timing and the error message if any.
    """

    feature: str  # "tasks" | "study" | "translation" | "seo_article" | "chat"
    provider: str  # "backend" | "openrouter"
    model: str | None = None
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    cost: float | None = None
    duration_ms: int | None = None
    status: str = "success"  # "success" | "error"
    error_message: str | None = None
    request_context: str | None = None
    user_id: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
