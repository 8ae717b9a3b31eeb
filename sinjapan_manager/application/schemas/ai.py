"""Pydantic DTOs for AI generation (tasks, study, translation, chat, SEO drafts)."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from .base import CamelModel, RequiredText
from .task import Task

StudyLevel = Literal["beginner", "intermediate", "advanced"]


# ── Tasks ──


class TaskGenerationRequest(CamelModel):
    goal: RequiredText
    context: str | None = None
    count: int = Field(default=5, ge=1, le=20)
    create: bool = Field(default=False, description="Also create the generated tasks")


class GeneratedTask(CamelModel):
    title: str
    description: str = ""
    priority: Literal["low", "medium", "high"] = "medium"
    category: str | None = None


class TaskGenerationResponse(CamelModel):
    tasks: list[GeneratedTask] = Field(default_factory=list)
    created: list[Task] = Field(default_factory=list)
    items: list[Task] = Field(default_factory=list)


# ── Study ──


class StudyRequest(CamelModel):
    topic: RequiredText
    level: StudyLevel = "beginner"


class QuizItem(CamelModel):
    question: str
    answer: str


class StudyResponse(CamelModel):
    title: str
    explanation: str
    key_points: list[str] = Field(default_factory=list)
    quiz: list[QuizItem] = Field(default_factory=list)


# ── Translation ──


class TranslationRequest(CamelModel):
    text: RequiredText
    source_language: str = "auto"
    target_language: RequiredText


class TranslationResponse(CamelModel):
    translated_text: str
    detected_language: str | None = None


# ── Assistant chat ──


class ChatTurn(CamelModel):
    role: Literal["user", "assistant"]
    content: str


class AIChatRequest(CamelModel):
    """One user message plus the conversation so far, oldest first."""

    message: RequiredText
    history: list[ChatTurn] = Field(default_factory=list, max_length=50)


class AIChatResponse(CamelModel):
    reply: str


# ── SEO drafts ──


class SeoArticleGenerationRequest(CamelModel):
    topic: RequiredText
    keywords: str | None = None


class SeoArticleDraft(CamelModel):
    title: str
    suggested_slug: str
    content: str
    meta_title: str = ""
    meta_description: str = ""


# ── Request log ──


class AIRequestLogResponse(BaseModel):
    """An AI request log entry."""

    id: int
    feature: str
    provider: str
    model: str | None
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    cost: float | None
    duration_ms: int | None
    status: str
    error_message: str | None
    request_context: str | None
    user_id: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
