"""Pydantic DTOs for in-app notifications."""

from typing import Literal

from pydantic import Field

from .base import CamelModel, Form, Record, RecordId, RequiredText

NotificationType = Literal["info", "success", "warning", "error"]


class Notification(Record):
    title: str | None = None
    message: str | None = None
    type: str | None = None
    is_read: bool | None = None
    user_id: RecordId | None = None
    created_by: RecordId | None = None


class NotificationCreate(Form):
    title: RequiredText
    message: RequiredText
    type: NotificationType = "info"
    user_id: RecordId | None = None


class BulkNotificationCreate(Form):
    """Send the same notification to several users at once."""

    user_ids: list[RecordId] = Field(..., min_length=1)
    title: RequiredText
    message: RequiredText
    type: NotificationType = "info"


class UnreadCount(CamelModel):
    count: int = 0
