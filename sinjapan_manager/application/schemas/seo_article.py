"""Pydantic DTOs for SEO articles."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId, RequiredText


class SeoArticle(Record):
    title: str | None = None
    slug: str | None = None
    content: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    keywords: str | None = None
    cta_url: str | None = None
    cta_text: str | None = None
    domain: str | None = None
    site_name: str | None = None
    category_id: RecordId | None = None
    status: str | None = None
    is_published: bool | None = None
    published_at: datetime | None = None
    indexing_status: str | None = None
    indexed_at: datetime | None = None


class SeoArticleCreate(Form):
    """Schema for saving an article: title and body are required.

    A missing slug is derived from the title.
    """

    title: RequiredText
    content: RequiredText
    slug: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    keywords: str | None = None
    cta_url: str | None = None
    cta_text: str | None = None
    domain: str | None = None
    site_name: str | None = None
    category_id: RecordId | None = None


class SeoArticleUpdate(Form):
    title: RequiredText | None = None
    content: RequiredText | None = None
    slug: str | None = None
    meta_title: str | None = None
    meta_description: str | None = None
    keywords: str | None = None
    cta_url: str | None = None
    cta_text: str | None = None
    domain: str | None = None
    site_name: str | None = None
    category_id: RecordId | None = None


class IndexingResult(CamelModel):
    message: str
    item: SeoArticle | None = None
    items: list[SeoArticle] = Field(default_factory=list)
