"""AI endpoints: assistant chat, study notes, translation and request logs.

Task generation and SEO drafting live with their pages (``/tasks/generate``
and ``/seo-articles/generate``).
"""

from fastapi import APIRouter, Depends

from sinjapan_manager.application.schemas import (
    AIChatRequest,
    AIChatResponse,
    AIRequestLogResponse,
    StudyRequest,
    StudyResponse,
    TranslationRequest,
    TranslationResponse,
    User,
)
from sinjapan_manager.application.services import AIService
from sinjapan_manager.infrastructure.dependencies import get_ai_service, get_current_user

router = APIRouter(prefix="/ai", tags=["AI"])


@router.post("/chat", response_model=AIChatResponse)
async def chat(
    data: AIChatRequest,
    user: User = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
) -> AIChatResponse:
    return await service.chat(data, user_id=str(user.id))


@router.post("/study", response_model=StudyResponse)
async def study(
    data: StudyRequest,
    user: User = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
) -> StudyResponse:
    """Explain a topic with key points and a short quiz."""
    return await service.study(data, user_id=str(user.id))


@router.post("/translate", response_model=TranslationResponse)
async def translate(
    data: TranslationRequest,
    user: User = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
) -> TranslationResponse:
    return await service.translate(data, user_id=str(user.id))


@router.get("/logs", response_model=list[AIRequestLogResponse])
async def get_ai_logs(
    feature: str | None = None,
    skip: int = 0,
    limit: int = 100,
    user: User = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
) -> list[AIRequestLogResponse]:
    """Retrieve AI request logs, most recent first (management roles only)."""
    logs = await service.get_logs(user, feature=feature, skip=skip, limit=limit)
    return [AIRequestLogResponse.model_validate(log) for log in logs]
