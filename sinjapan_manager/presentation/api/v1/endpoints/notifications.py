"""In-app notification endpoints."""

from fastapi import APIRouter, Depends, status

from sinjapan_manager.application.schemas import (
    BulkNotificationCreate,
    BulkResult,
    Mutation,
    Notification,
    NotificationCreate,
    UnreadCount,
    User,
)
from sinjapan_manager.application.services import NotificationService
from sinjapan_manager.infrastructure.dependencies import (
    get_current_user,
    get_notification_service,
)

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[Notification])
async def list_notifications(
    is_read: bool | None = None,
    type: str | None = None,
    service: NotificationService = Depends(get_notification_service),
) -> list[Notification]:
    return await service.list(is_read=is_read, type=type)


@router.get("/unread-count", response_model=UnreadCount)
async def unread_count(
    service: NotificationService = Depends(get_notification_service),
) -> UnreadCount:
    return await service.unread_count()


@router.post("", response_model=Mutation[Notification], status_code=status.HTTP_201_CREATED)
async def create_notification(
    data: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
) -> Mutation[Notification]:
    return await service.create(data)


@router.post("/bulk", response_model=BulkResult[Notification], status_code=status.HTTP_201_CREATED)
async def send_bulk(
    data: BulkNotificationCreate,
    actor: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service),
) -> BulkResult[Notification]:
    """Send the same notification to several users (management only)."""
    return await service.send_bulk(actor, data)


@router.patch("/{notification_id}/read", response_model=Mutation[Notification])
async def mark_read(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
) -> Mutation[Notification]:
    return await service.mark_read(notification_id)


@router.post("/read-all", response_model=Mutation[Notification])
async def mark_all_read(
    service: NotificationService = Depends(get_notification_service),
) -> Mutation[Notification]:
    return await service.mark_all_read()
