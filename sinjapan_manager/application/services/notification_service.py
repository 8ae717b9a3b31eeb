"""Application service for in-app notifications."""

import logging

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import (
    BulkNotificationCreate,
    BulkResult,
    Mutation,
    Notification,
    RecordId,
    UnreadCount,
    User,
)
from sinjapan_manager.domain.entities.navigation import can_perform
from sinjapan_manager.domain.exceptions import PermissionDeniedError

from .resource_service import ResourceService

logger = logging.getLogger(__name__)


class NotificationService(ResourceService[Notification]):
    local_filters = ("is_read", "type")

    def __init__(self, repository: ResourceRepository):
        super().__init__(repository, Notification, "Notification")

    async def unread_count(self) -> UnreadCount:
        notifications = await self.list()
        return UnreadCount(count=sum(1 for n in notifications if not n.is_read))

    async def send_bulk(
        self, actor: User, form: BulkNotificationCreate
    ) -> BulkResult[Notification]:
        """Send one notification to many users (management roles only)."""
        if not can_perform(actor.role, "notifications.bulk"):
            raise PermissionDeniedError("notifications.bulk", actor.role)

        created = await self._repository.post("bulk", form.to_payload())
        count = len(created) if isinstance(created, list) else len(form.user_ids)
        logger.info("Sent notification to %d users", count)
        return BulkResult[Notification](count=count, items=await self.list())

    async def mark_read(self, notification_id: RecordId) -> Mutation[Notification]:
        await self._repository.patch(f"{notification_id}/read")
        return await self.refreshed(None, None)

    async def mark_all_read(self) -> Mutation[Notification]:
        await self._repository.post("read-all")
        return await self.refreshed(None, None)
