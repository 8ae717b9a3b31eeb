"""Application service for businesses and their revenue / expense ledger."""

import asyncio
import logging
from datetime import datetime

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import (
    Business,
    BusinessesSummary,
    BusinessSale,
    BusinessSaleCreate,
    BusinessTotals,
    Mutation,
    RecordId,
    SalesTotalsResponse,
)
from sinjapan_manager.domain.entities.aggregates import (
    SalesTotals,
    combine_totals,
    to_decimal,
    totals_for_sales,
    utc_naive,
)
from sinjapan_manager.domain.exceptions import BackendError, EntityNotFoundError

from .resource_service import ResourceService

logger = logging.getLogger(__name__)


class BusinessService(ResourceService[Business]):
    """Businesses plus the per-business sales routes nested under them."""

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, Business, "Business")

    async def sales(
        self,
        business_id: RecordId,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[BusinessSale]:
        """Sales of one business, optionally limited to a period."""
        rows = await self._repository.fetch(f"{business_id}/sales")
        sales = [BusinessSale.model_validate(r) for r in rows or [] if isinstance(r, dict)]
        if start is None and end is None:
            return sales
        return [s for s in sales if _within(s.sale_date, start, end)]

    async def add_sale(
        self, business_id: RecordId, form: BusinessSaleCreate
    ) -> Mutation[BusinessSale]:
        """Record a sale and return the re-fetched ledger of that business."""
        created = await self._repository.post(f"{business_id}/sales", form.to_payload())
        item = BusinessSale.model_validate(created) if isinstance(created, dict) and "id" in created else None
        return Mutation[BusinessSale](item=item, items=await self.sales(business_id))

    async def period_totals(
        self,
        business_id: RecordId,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> SalesTotalsResponse:
        """Revenue / expenses / profit computed from the ledger for a period."""
        return _totals_response(totals_for_sales(await self.sales(business_id), start=start, end=end))

    async def totals(self, business_id: RecordId) -> SalesTotalsResponse:
        """All-time totals as reported by the backend; zero when unavailable."""
        try:
            data = await self._repository.fetch(f"{business_id}/totals")
        except BackendError as exc:
            if exc.status_code == 404:
                raise EntityNotFoundError("Business", business_id) from exc
            logger.warning("Totals unavailable for business %s: %s", business_id, exc)
            data = None
        data = data if isinstance(data, dict) else {}
        return _totals_response(
            SalesTotals(
                revenue=to_decimal(data.get("revenue")),
                expenses=to_decimal(data.get("expenses")),
            )
        )

    async def summary(self) -> BusinessesSummary:
        """Every business with its totals, plus the overall figures."""
        businesses = await self.list()
        totals = await asyncio.gather(*(self._safe_totals(b.id) for b in businesses))

        rows = []
        for business, figures in zip(businesses, totals):
            target = business.target_revenue
            rate = None
            if target:
                rate = round(float(figures.revenue / target * 100), 1)
            rows.append(
                BusinessTotals(
                    business=business,
                    totals=figures,
                    target_revenue=target,
                    achievement_rate=rate,
                )
            )

        overall = combine_totals(SalesTotals(t.revenue, t.expenses) for t in totals)
        return BusinessesSummary(businesses=rows, totals=_totals_response(overall))

    async def _safe_totals(self, business_id: RecordId) -> SalesTotalsResponse:
        try:
            return await self.totals(business_id)
        except EntityNotFoundError:
            return SalesTotalsResponse()


def _totals_response(totals: SalesTotals) -> SalesTotalsResponse:
    return SalesTotalsResponse(
        revenue=totals.revenue,
        expenses=totals.expenses,
        profit=totals.profit,
    )


def _within(value: datetime | None, start: datetime | None, end: datetime | None) -> bool:
    if value is None:
        return False
    value = utc_naive(value)
    if start is not None and value < utc_naive(start):
        return False
    if end is not None and value > utc_naive(end):
        return False
    return True
