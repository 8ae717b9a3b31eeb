"""Application service for calendar memos."""

from datetime import datetime
from zoneinfo import ZoneInfo

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import Memo, MonthGridResponse
from sinjapan_manager.domain.entities.calendar import month_bounds, month_grid

from .resource_service import ResourceService


class MemoService(ResourceService[Memo]):
    def __init__(self, repository: ResourceRepository, timezone: str = "Asia/Tokyo"):
        super().__init__(repository, Memo, "Memo")
        self._tz = ZoneInfo(timezone)

    async def between(self, start: datetime | None = None, end: datetime | None = None) -> list[Memo]:
        return await self.list(
            start=start.isoformat() if start else None,
            end=end.isoformat() if end else None,
        )

    async def month(self, year: int, month: int) -> MonthGridResponse:
        """Sunday-first month grid with each day's memos attached."""
        start, end = month_bounds(year, month, self._tz)
        memos = await self.between(start, end)
        return MonthGridResponse.model_validate(month_grid(year, month, memos, self._tz))
