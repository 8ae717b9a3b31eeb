"""AIGenerator backed by the upstream AI endpoints.

The backend owns prompts and model choice; this adapter only maps each
feature to its route and normalises failures.
"""

import logging
from typing import Any

from sinjapan_manager.application.interfaces import AIGenerator
from sinjapan_manager.domain.entities import AIFeature, GenerationResult, TokenUsage
from sinjapan_manager.domain.exceptions import AIProviderError, BackendError

from .backend_client import BackendClient

logger = logging.getLogger(__name__)

FEATURE_PATHS: dict[AIFeature, str] = {
    AIFeature.TASKS: "/api/ai/tasks",
    AIFeature.STUDY: "/api/ai/study",
    AIFeature.TRANSLATION: "/api/ai/translate",
    AIFeature.SEO_ARTICLE: "/api/seo-articles/generate",
    AIFeature.CHAT: "/api/ai/chat",
}


class BackendAIGenerator(AIGenerator):
    def __init__(self, client: BackendClient):
        self._client = client

    @property
    def provider_name(self) -> str:
        return "backend"

    async def generate(self, feature: AIFeature, payload: dict[str, Any]) -> GenerationResult:
        """POST the request to the feature's route.

        A 2xx body carrying ``{"error": ...}`` counts as a failure.
        """
        try:
            data = await self._client.post(FEATURE_PATHS[feature], json=payload)
        except BackendError as exc:
            raise AIProviderError(self.provider_name, exc.status_code, exc.message) from exc

        if not isinstance(data, dict):
            raise AIProviderError(self.provider_name, 502, "AIの応答が不正です")
        if data.get("error"):
            raise AIProviderError(self.provider_name, 502, str(data["error"]))

        # some routes wrap the result, e.g. {"article": {...}}
        for key in ("article", "result"):
            if isinstance(data.get(key), dict):
                data = {**data[key], **{k: v for k, v in data.items() if k in ("model", "usage")}}
                break

        usage = data.pop("usage", None) if isinstance(data.get("usage"), dict) else None
        return GenerationResult(
            data=data,
            provider=self.provider_name,
            model=data.pop("model", None) if isinstance(data.get("model"), str) else None,
            usage=TokenUsage(
                prompt_tokens=int((usage or {}).get("promptTokens", 0) or 0),
                completion_tokens=int((usage or {}).get("completionTokens", 0) or 0),
                total_tokens=int((usage or {}).get("totalTokens", 0) or 0),
            ),
        )
