"""Pydantic DTOs for direct messages, chat groups and attachments."""

from pydantic import Field, model_validator

from .base import CamelModel, Form, Record, RecordId, RequiredText


class Message(Record):
    content: str | None = None
    sender_id: RecordId | None = None
    receiver_id: RecordId | None = None
    group_id: RecordId | None = None
    attachment_url: str | None = None
    attachment_name: str | None = None
    is_read: bool | None = None


class MessageCreate(Form):
    """A direct or group message: needs text or an attachment."""

    content: str = ""
    receiver_id: RecordId | None = None
    attachment_url: str | None = None
    attachment_name: str | None = None

    @model_validator(mode="after")
    def _require_content_or_attachment(self):
        self.content = self.content.strip()
        if not self.content and not self.attachment_url:
            raise ValueError("content or attachmentUrl is required")
        return self


class ChatGroup(Record):
    name: str | None = None
    description: str | None = None
    created_by: RecordId | None = None
    member_ids: list[RecordId] | None = None


class ChatGroupCreate(Form):
    name: RequiredText
    description: str | None = None
    member_ids: list[RecordId] = Field(default_factory=list)


class GroupMemberAdd(Form):
    user_id: RecordId


class UnreadBySender(CamelModel):
    sender_id: RecordId
    count: int = 0


class UnreadSummary(CamelModel):
    """Total unread direct messages and the per-sender breakdown."""

    count: int = 0
    by_sender: list[UnreadBySender] = Field(default_factory=list)


class Attachment(CamelModel):
    url: str
    name: str
