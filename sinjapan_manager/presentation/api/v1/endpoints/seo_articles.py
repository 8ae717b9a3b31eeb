"""SEO article endpoints: drafts, publishing, index requests and AI drafting."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from sinjapan_manager.application.schemas import (
    IndexingResult,
    Mutation,
    SeoArticle,
    SeoArticleCreate,
    SeoArticleDraft,
    SeoArticleGenerationRequest,
    SeoArticleUpdate,
    User,
)
from sinjapan_manager.application.services import AIService, SeoArticleService
from sinjapan_manager.domain.exceptions import EntityNotFoundError
from sinjapan_manager.infrastructure.dependencies import (
    get_ai_service,
    get_current_user,
    get_seo_article_service,
)

router = APIRouter(prefix="/seo-articles", tags=["SEO articles"])


def article_filters(
    search: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
) -> dict:
    return {"search": search, "status": status_filter}


@router.get("", response_model=list[SeoArticle])
async def list_articles(
    filters: dict = Depends(article_filters),
    service: SeoArticleService = Depends(get_seo_article_service),
) -> list[SeoArticle]:
    return await service.list(**filters)


@router.post("/generate", response_model=SeoArticleDraft)
async def generate_article(
    data: SeoArticleGenerationRequest,
    user: User = Depends(get_current_user),
    service: AIService = Depends(get_ai_service),
) -> SeoArticleDraft:
    """Draft an article with AI; nothing is saved until the draft is submitted."""
    return await service.draft_seo_article(data, user_id=str(user.id))


@router.get("/{article_id}", response_model=SeoArticle)
async def get_article(
    article_id: str,
    service: SeoArticleService = Depends(get_seo_article_service),
) -> SeoArticle:
    try:
        return await service.get(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=Mutation[SeoArticle], status_code=status.HTTP_201_CREATED)
async def create_article(
    data: SeoArticleCreate,
    filters: dict = Depends(article_filters),
    service: SeoArticleService = Depends(get_seo_article_service),
) -> Mutation[SeoArticle]:
    """Save an article; the slug is derived from the title when left empty."""
    return await service.create(data, filters)


@router.patch("/{article_id}", response_model=Mutation[SeoArticle])
async def update_article(
    article_id: str,
    data: SeoArticleUpdate,
    filters: dict = Depends(article_filters),
    service: SeoArticleService = Depends(get_seo_article_service),
) -> Mutation[SeoArticle]:
    try:
        return await service.update(article_id, data, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{article_id}", response_model=Mutation[SeoArticle])
async def delete_article(
    article_id: str,
    filters: dict = Depends(article_filters),
    service: SeoArticleService = Depends(get_seo_article_service),
) -> Mutation[SeoArticle]:
    try:
        return await service.delete(article_id, filters)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{article_id}/publish", response_model=Mutation[SeoArticle])
async def publish_article(
    article_id: str,
    filters: dict = Depends(article_filters),
    service: SeoArticleService = Depends(get_seo_article_service),
) -> Mutation[SeoArticle]:
    return await service.publish(article_id, filters)


@router.post("/{article_id}/unpublish", response_model=Mutation[SeoArticle])
async def unpublish_article(
    article_id: str,
    filters: dict = Depends(article_filters),
    service: SeoArticleService = Depends(get_seo_article_service),
) -> Mutation[SeoArticle]:
    return await service.unpublish(article_id, filters)


@router.post("/{article_id}/index", response_model=IndexingResult)
async def request_indexing(
    article_id: str,
    filters: dict = Depends(article_filters),
    service: SeoArticleService = Depends(get_seo_article_service),
) -> IndexingResult:
    """Ask the backend to submit the article URL for search indexing."""
    return await service.request_indexing(article_id, filters)
