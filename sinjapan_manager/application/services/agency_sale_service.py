"""Application service for agency sales and commissions."""

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import AgencySale, AgencySalesSummaryResponse
from sinjapan_manager.domain.entities.aggregates import summarize_agency_sales

from .resource_service import ResourceService


class AgencySaleService(ResourceService[AgencySale]):
    local_filters = ("agency_id", "status")

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, AgencySale, "AgencySale")

    async def summary(self, **filters) -> AgencySalesSummaryResponse:
        """Total sales, total commission, approved-or-paid count, per-agency totals."""
        sales = await self.list(**filters)
        return AgencySalesSummaryResponse.model_validate(summarize_agency_sales(sales))
