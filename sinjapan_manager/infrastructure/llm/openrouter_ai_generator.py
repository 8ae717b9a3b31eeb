"""OpenRouter AI generator: concrete implementation of the AIGenerator port.

Reuses the OpenRouterClient for API calls, adding the Japanese prompt
templates for each generation feature and JSON extraction from the reply.
"""

import json
import logging
import re
from typing import Any

from sinjapan_manager.application.interfaces import AIGenerator, CompletionProvider
from sinjapan_manager.domain.entities import AIFeature, GenerationResult, PromptMessage
from sinjapan_manager.domain.exceptions import AIProviderError

logger = logging.getLogger(__name__)

_TASKS_SYSTEM_PROMPT = """あなたは優秀なプロジェクトマネージャーです。与えられた目標を、実行可能な具体的タスクに分解してください。

重要なルール:
1. 有効なJSONのみを返してください。説明文は不要です。
2. 形式: {"tasks": [{"title": "...", "description": "...", "priority": "low|medium|high", "category": "..."}]}
3. title は30文字以内の簡潔な日本語にしてください。
4. priority は必ず low, medium, high のいずれかにしてください。
5. 指定された件数のタスクを、実行順に並べてください。"""

_STUDY_SYSTEM_PROMPT = """あなたは経験豊富な講師です。指定されたトピックを、学習者のレベルに合わせて日本語で解説してください。

重要なルール:
1. 有効なJSONのみを返してください。
2. 形式: {"title": "...", "explanation": "...", "keyPoints": ["..."], "quiz": [{"question": "...", "answer": "..."}]}
3. keyPoints は3〜5個、quiz は3問にしてください。
4. beginner は専門用語を避け、advanced は実務レベルの内容を含めてください。"""

_TRANSLATION_SYSTEM_PROMPT = """あなたはプロの翻訳者です。与えられたテキストを指定された言語に自然に翻訳してください。

重要なルール:
1. 有効なJSONのみを返してください。
2. 形式: {"translatedText": "...", "detectedLanguage": "..."}
3. 原文の言語が "auto" の場合は言語を判定し、detectedLanguage に言語名を入れてください。
4. 固有名詞や数値はそのまま保持してください。"""

_SEO_ARTICLE_SYSTEM_PROMPT = """あなたはSEOに精通したプロのWebライターです。指定されたトピックについて、検索上位を狙える日本語の記事を書いてください。

重要なルール:
1. 有効なJSONのみを返してください。
2. 形式: {"title": "...", "suggestedSlug": "...", "content": "...", "metaTitle": "...", "metaDescription": "..."}
3. content はMarkdown形式で、見出し(##)を使って2000文字以上にしてください。
4. suggestedSlug は英小文字・数字・ハイフンのみで50文字以内にしてください。
5. metaTitle は32文字以内、metaDescription は120文字以内にしてください。
6. キーワードが指定されている場合は自然に含めてください。"""

_CHAT_SYSTEM_PROMPT = """あなたは SIN JAPAN Manager の業務アシスタントです。社内の営業、タスク管理、顧客対応、経理に関する質問に日本語で簡潔かつ具体的に答えてください。

重要なルール:
1. 有効なJSONのみを返してください。
2. 形式: {"reply": "..."}
3. 分からないことは推測せず、確認すべき点を伝えてください。"""

_LEVEL_LABELS = {"beginner": "初級", "intermediate": "中級", "advanced": "上級"}


class OpenRouterAIGenerator(AIGenerator):
    """Concrete AI generator using the OpenRouter API."""

    def __init__(
        self,
        completion_provider: CompletionProvider,
        model: str,
        temperature: float = 0.7,
    ):
        self._client = completion_provider
        self._model = model
        self._temperature = temperature

    @property
    def provider_name(self) -> str:
        return self._client.provider_name

    async def generate(self, feature: AIFeature, payload: dict[str, Any]) -> GenerationResult:
        """Build the feature prompt, run the completion and parse its JSON."""
        system_prompt, user_message, max_tokens = self._build_prompt(feature, payload)
        messages = [PromptMessage(role="system", content=system_prompt)]
        messages.extend(
            PromptMessage(role=turn["role"], content=turn["content"])
            for turn in payload.get("history") or []
        )
        messages.append(PromptMessage(role="user", content=user_message))

        result = await self._client.complete(
            messages,
            self._model,
            temperature=self._temperature,
            max_tokens=max_tokens,
            json_mode=True,
        )
        logger.debug("AI %s reply received (%d tokens)", feature.value, result.usage.total_tokens)

        try:
            data = json.loads(self._extract_json(result.content))
        except ValueError as exc:
            logger.warning("Could not parse AI %s reply: %s", feature.value, exc)
            raise AIProviderError(self.provider_name, 502, "AIの応答を解析できませんでした") from exc
        if not isinstance(data, dict):
            raise AIProviderError(self.provider_name, 502, "AIの応答を解析できませんでした")

        return GenerationResult(
            data=data,
            provider=result.provider or self.provider_name,
            model=result.model or self._model,
            usage=result.usage,
        )

    def _build_prompt(self, feature: AIFeature, payload: dict[str, Any]) -> tuple[str, str, int]:
        if feature is AIFeature.TASKS:
            user_message = f"目標: {payload['goal']}\nタスク数: {payload.get('count', 5)}件"
            if payload.get("context"):
                user_message += f"\n補足情報: {payload['context']}"
            return _TASKS_SYSTEM_PROMPT, user_message, 1500

        if feature is AIFeature.STUDY:
            level = _LEVEL_LABELS.get(payload.get("level", "beginner"), payload.get("level"))
            user_message = f"トピック: {payload['topic']}\nレベル: {level}"
            return _STUDY_SYSTEM_PROMPT, user_message, 2000

        if feature is AIFeature.TRANSLATION:
            user_message = (
                f"原文の言語: {payload.get('sourceLanguage', 'auto')}\n"
                f"翻訳先の言語: {payload['targetLanguage']}\n\n"
                f"テキスト:\n{payload['text']}"
            )
            return _TRANSLATION_SYSTEM_PROMPT, user_message, 4000

        if feature is AIFeature.SEO_ARTICLE:
            user_message = f"トピック: {payload['topic']}"
            if payload.get("keywords"):
                user_message += f"\nキーワード: {payload['keywords']}"
            return _SEO_ARTICLE_SYSTEM_PROMPT, user_message, 6000

        if feature is AIFeature.CHAT:
            return _CHAT_SYSTEM_PROMPT, payload["message"], 1500

        raise ValueError(f"Unsupported AI feature: {feature}")

    @staticmethod
    def _extract_json(text: str) -> str:
        """Extract JSON from a response that might be wrapped in markdown code blocks."""
        if "```" in text:
            match = re.search(r"```(?:json)?\s*\n?(.*?)\n?\s*```", text, re.DOTALL)
            if match:
                return match.group(1).strip()

        text = text.strip()
        if text.startswith("{"):
            return text

        # prose around a bare object
        start, end = text.find("{"), text.rfind("}")
        if start != -1 and end > start:
            return text[start : end + 1]

        raise ValueError(f"Could not extract JSON from AI response: {text[:200]}")
