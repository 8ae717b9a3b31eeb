"""Application service for the dashboard landing page."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import (
    DashboardResponse,
    QuickActionResponse,
    User,
)
from sinjapan_manager.domain.entities.dashboard import greeting_for_hour
from sinjapan_manager.domain.entities.navigation import quick_actions_for_role
from sinjapan_manager.domain.entities.role import role_label

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, repository: ResourceRepository, timezone: str = "Asia/Tokyo"):
        self._repository = repository
        self._tz = ZoneInfo(timezone)

    async def overview(self, user: User, *, now: datetime | None = None) -> DashboardResponse:
        """Greeting, role label, backend stats and quick actions for ``user``."""
        now = now or datetime.now(self._tz)
        stats = await self._repository.fetch("stats")
        return DashboardResponse(
            user=user,
            greeting=greeting_for_hour(now.astimezone(self._tz).hour),
            role_label=role_label(user.role),
            stats=stats if isinstance(stats, dict) else {},
            quick_actions=[
                QuickActionResponse.model_validate(action)
                for action in quick_actions_for_role(user.role)
            ],
        )
