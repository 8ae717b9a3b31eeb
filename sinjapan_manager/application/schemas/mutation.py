"""Response envelopes for mutations and bulk operations."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from .base import CamelModel

T = TypeVar("T")


class Mutation(BaseModel, Generic[T]):
    """The affected record (``None`` after a delete) plus the re-fetched list."""

    item: T | None = None
    items: list[T] = Field(default_factory=list)


class BulkResult(CamelModel, Generic[T]):
    """Outcome of a bulk create: how many were accepted and the refreshed list."""

    count: int
    items: list[T] = Field(default_factory=list)
