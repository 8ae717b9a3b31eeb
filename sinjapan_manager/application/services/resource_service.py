"""Application service for one upstream collection: list, edit, re-fetch.

Every page of the manager follows the same loop: fetch the list, submit
a form, and re-fetch the list so the caller always holds what the backend
actually stored. ``ResourceService`` implements that loop once; the page
services specialise it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Generic, TypeVar

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from sinjapan_manager.application.interfaces import JSONDict, ResourceRepository
from sinjapan_manager.application.schemas import Form, Mutation, Record, RecordId
from sinjapan_manager.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


def matches_search(record: Any, query: str | None, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match of ``query`` against any of ``fields``.

    Dotted names reach into nested objects (``"user.name"``).
    """
    if not query:
        return True
    needle = query.strip().lower()
    if not needle:
        return True
    for name in fields:
        value: Any = record
        for part in name.split("."):
            value = getattr(value, part, None)
            if value is None:
                break
        if value is not None and needle in str(value).lower():
            return True
    return False


class ResourceService(Generic[R]):
    """CRUD with re-fetch-after-mutation over a ``ResourceRepository`` port.

    ``search_fields`` turns ``search`` into a local filter over those
    attributes; without them ``search`` is forwarded to the backend.
    ``local_filters`` names filters applied locally by equality instead of
    being sent as query parameters.
    """

    search_fields: tuple[str, ...] = ()
    local_filters: tuple[str, ...] = ()

    def __init__(
        self,
        repository: ResourceRepository,
        record_type: type[R],
        entity_name: str | None = None,
    ):
        self._repository = repository
        self._record_type = record_type
        self._entity_name = entity_name or record_type.__name__

    @property
    def entity_name(self) -> str:
        return self._entity_name

    # ── Queries ──

    async def list(self, search: str | None = None, **filters: Any) -> list[R]:
        """Fetch the collection, applying upstream and local filters."""
        params: dict[str, Any] = {}
        local: dict[str, Any] = {}
        for name, value in filters.items():
            if value is None or value == "":
                continue
            if name in self.local_filters:
                local[name] = value
            else:
                params[to_camel(name)] = value
        if search and not self.search_fields:
            params["search"] = search

        records = self.to_records(await self._repository.list(params or None))
        for name, value in local.items():
            records = [r for r in records if _same(getattr(r, name, None), value)]
        if self.search_fields:
            records = [r for r in records if matches_search(r, search, self.search_fields)]
        return records

    async def get(self, record_id: RecordId) -> R:
        data = await self._repository.get(record_id)
        if data is None:
            raise EntityNotFoundError(self._entity_name, record_id)
        return self._record_type.model_validate(data)

    # ── Mutations ──

    async def create(self, form: Form, refresh: dict[str, Any] | None = None) -> Mutation[R]:
        return await self.create_payload(form.to_payload(), refresh)

    async def create_payload(
        self, payload: JSONDict, refresh: dict[str, Any] | None = None
    ) -> Mutation[R]:
        created = await self._repository.create(payload)
        logger.debug("Created %s", self._entity_name)
        return await self.refreshed(self.to_record(created), refresh)

    async def update(
        self,
        record_id: RecordId,
        form: Form,
        refresh: dict[str, Any] | None = None,
    ) -> Mutation[R]:
        return await self.update_payload(record_id, form.to_payload(partial=True), refresh)

    async def update_payload(
        self,
        record_id: RecordId,
        payload: JSONDict,
        refresh: dict[str, Any] | None = None,
    ) -> Mutation[R]:
        updated = await self._repository.update(record_id, payload)
        if updated is None:
            raise EntityNotFoundError(self._entity_name, record_id)
        return await self.refreshed(self.to_record(updated), refresh)

    async def change_status(
        self,
        record_id: RecordId,
        status: str,
        refresh: dict[str, Any] | None = None,
    ) -> Mutation[R]:
        """Immediate update carrying only the new status."""
        return await self.update_payload(record_id, {"status": status}, refresh)

    async def delete(
        self, record_id: RecordId, refresh: dict[str, Any] | None = None
    ) -> Mutation[R]:
        deleted = await self._repository.delete(record_id)
        if not deleted:
            raise EntityNotFoundError(self._entity_name, record_id)
        return await self.refreshed(None, refresh)

    # ── Helpers ──

    async def refreshed(self, item: R | None, refresh: dict[str, Any] | None) -> Mutation[R]:
        """Re-fetch the list with the caller's current filters."""
        items = await self.list(**(refresh or {}))
        return Mutation[self._record_type](item=item, items=items)

    def to_record(self, data: Any) -> R | None:
        """Validate a single backend object; non-record bodies become ``None``."""
        if not isinstance(data, dict) or "id" not in data:
            return None
        return self._record_type.model_validate(data)

    def to_records(self, rows: Iterable[Any]) -> list[R]:
        records: list[R] = []
        for row in rows:
            try:
                record = self.to_record(row)
            except ValidationError:
                logger.warning("Skipping malformed %s from backend: %r", self._entity_name, row)
                continue
            if record is not None:
                records.append(record)
        return records


def _same(left: Any, right: Any) -> bool:
    if left is None:
        return False
    return str(left) == str(right)
