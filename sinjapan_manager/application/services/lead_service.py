"""Application service for sales leads, including CSV import and activity logging."""

import logging
from typing import Any

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import (
    BulkResult,
    Lead,
    LeadActivity,
    LeadActivityCreate,
    LeadSummary,
    Mutation,
    RecordId,
)
from sinjapan_manager.domain.entities.aggregates import count_by
from sinjapan_manager.domain.entities.lead_csv import parse_lead_csv

from .resource_service import ResourceService

logger = logging.getLogger(__name__)


class LeadService(ResourceService[Lead]):
    """Leads; search, status and source filters are applied by the backend."""

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, Lead, "Lead")

    async def import_csv(
        self, csv_text: str, refresh: dict[str, Any] | None = None
    ) -> BulkResult[Lead]:
        """Parse pasted CSV and register every valid row in one bulk request.

        Raises:
            LeadImportError: If the text has no data row or no row has a name.
        """
        leads = parse_lead_csv(csv_text)
        result = await self._repository.post("bulk", {"leads": leads})

        count = len(leads)
        if isinstance(result, dict) and isinstance(result.get("count"), int):
            count = result["count"]
        logger.info("Imported %d leads from CSV (%d rows parsed)", count, len(leads))

        items = await self.list(**(refresh or {}))
        return BulkResult[Lead](count=count, items=items)

    async def activities(self, lead_id: RecordId) -> list[LeadActivity]:
        rows = await self._repository.fetch(f"{lead_id}/activities")
        return [LeadActivity.model_validate(r) for r in rows or [] if isinstance(r, dict)]

    async def log_activity(
        self,
        lead_id: RecordId,
        form: LeadActivityCreate,
        refresh: dict[str, Any] | None = None,
    ) -> Mutation[Lead]:
        """Record a contact attempt, then re-fetch the lead list."""
        await self._repository.post(f"{lead_id}/activities", form.to_payload())
        return await self.refreshed(None, refresh)

    async def summary(self, **filters: Any) -> LeadSummary:
        leads = await self.list(**filters)
        return LeadSummary(
            total=len(leads),
            by_status={str(k): v for k, v in count_by(leads, "status").items() if k},
            by_source={str(k): v for k, v in count_by(leads, "source").items() if k},
        )
