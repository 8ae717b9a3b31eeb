"""Application service for SEO articles: drafts, publishing and index requests."""

import logging
from typing import Any

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import (
    IndexingResult,
    Mutation,
    RecordId,
    SeoArticle,
    SeoArticleCreate,
)
from sinjapan_manager.domain.entities.seo import slug_for
from sinjapan_manager.domain.exceptions import BackendError

from .resource_service import ResourceService

logger = logging.getLogger(__name__)


class SeoArticleService(ResourceService[SeoArticle]):
    search_fields = ("title", "keywords")
    local_filters = ("status", "is_published")

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, SeoArticle, "SeoArticle")

    async def create(
        self, form: SeoArticleCreate, refresh: dict[str, Any] | None = None
    ) -> Mutation[SeoArticle]:
        """Save an article; a missing slug is derived from the title."""
        payload = form.to_payload()
        payload["slug"] = slug_for(form.title, form.slug)
        return await self.create_payload(payload, refresh)

    async def publish(
        self, article_id: RecordId, refresh: dict[str, Any] | None = None
    ) -> Mutation[SeoArticle]:
        await self._repository.post(f"{article_id}/publish")
        return await self.refreshed(await self._get_or_none(article_id), refresh)

    async def unpublish(
        self, article_id: RecordId, refresh: dict[str, Any] | None = None
    ) -> Mutation[SeoArticle]:
        await self._repository.post(f"{article_id}/unpublish")
        return await self.refreshed(await self._get_or_none(article_id), refresh)

    async def request_indexing(
        self, article_id: RecordId, refresh: dict[str, Any] | None = None
    ) -> IndexingResult:
        """Ask the backend to submit the article URL for search indexing.

        The backend may answer 2xx with ``{"error": ...}``; that is a failure.
        """
        data = await self._repository.post(f"{article_id}/index")
        data = data if isinstance(data, dict) else {}
        if data.get("error"):
            raise BackendError(400, str(data["error"]))

        logger.info("Indexing requested for article %s", article_id)
        mutation = await self.refreshed(await self._get_or_none(article_id), refresh)
        return IndexingResult(
            message=str(data.get("message") or "インデックス送信をリクエストしました"),
            item=mutation.item,
            items=mutation.items,
        )

    async def _get_or_none(self, article_id: RecordId) -> SeoArticle | None:
        return self.to_record(await self._repository.get(article_id))
