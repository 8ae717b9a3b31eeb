"""Application service for agency incentive campaigns."""

from __future__ import annotations

from typing import Any

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import AgencyIncentive, AgencyIncentiveSummaryResponse, RecordId

from .resource_service import ResourceService


def applies_to(incentive: AgencyIncentive, agency_id: RecordId) -> bool:
    """Untargeted campaigns apply to every agency."""
    target = incentive.target_agency_id
    return target is None or str(target) == str(agency_id)


class AgencyIncentiveService(ResourceService[AgencyIncentive]):
    local_filters = ("status",)
    search_fields = ("project_name", "description")

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, AgencyIncentive, "AgencyIncentive")

    async def list(
        self, search: str | None = None, *, agency_id: RecordId | None = None, **filters: Any
    ) -> list[AgencyIncentive]:
        """All campaigns, or only those one agency is eligible for."""
        incentives = await super().list(search, **filters)
        if agency_id is None or agency_id == "":
            return incentives
        return [i for i in incentives if applies_to(i, agency_id)]

    async def summary(self, agency_id: RecordId | None = None) -> AgencyIncentiveSummaryResponse:
        incentives = await self.list(agency_id=agency_id)
        return AgencyIncentiveSummaryResponse(
            total=len(incentives),
            active=sum(1 for i in incentives if i.status == "active"),
        )
