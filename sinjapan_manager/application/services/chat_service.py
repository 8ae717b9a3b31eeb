"""Application service for direct messages, chat groups and attachments."""

import asyncio
import logging

from sinjapan_manager.application.interfaces import ResourceRepository
from sinjapan_manager.application.schemas import (
    Attachment,
    ChatGroup,
    ChatGroupCreate,
    Message,
    MessageCreate,
    Mutation,
    RecordId,
    UnreadBySender,
    UnreadSummary,
    User,
)
from sinjapan_manager.domain.exceptions import AttachmentTooLargeError, BackendError

from .polling import ChangeFeed, PollingFeed

logger = logging.getLogger(__name__)


class ChatService:
    """Wraps the backend's ``/api/chat`` routes.

    Sending re-fetches the conversation, like the chat page does after
    every send.
    """

    def __init__(self, repository: ResourceRepository, *, max_upload_bytes: int = 20 * 1024 * 1024):
        self._repository = repository
        self._max_upload_bytes = max_upload_bytes

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    # ── Direct messages ──

    async def users(self) -> list[User]:
        """Everyone the current user can message (the backend excludes self)."""
        return _validate(User, await self._repository.fetch("users"))

    async def partners(self) -> list[User]:
        """Users the current user already has a conversation with."""
        return _validate(User, await self._repository.fetch("partners"))

    async def messages(self, user_id: RecordId) -> list[Message]:
        """The conversation with ``user_id``; the backend marks it read."""
        return _validate(Message, await self._repository.fetch(f"messages/{user_id}"))

    async def send(self, form: MessageCreate) -> Mutation[Message]:
        created = await self._repository.post("messages", form.to_payload())
        item = Message.model_validate(created) if isinstance(created, dict) and "id" in created else None
        items = await self.messages(form.receiver_id) if form.receiver_id is not None else []
        return Mutation[Message](item=item, items=items)

    # ── Unread ──

    async def unread(self) -> UnreadSummary:
        total, by_sender = await asyncio.gather(
            self._repository.fetch("unread-count"),
            self._unread_by_sender(),
        )
        count = total.get("count", 0) if isinstance(total, dict) else 0
        return UnreadSummary(count=int(count or 0), by_sender=by_sender)

    async def _unread_by_sender(self) -> list[UnreadBySender]:
        try:
            rows = await self._repository.fetch("unread-by-sender")
        except BackendError as exc:
            if exc.status_code != 404:
                raise
            return []
        return _validate(UnreadBySender, rows)

    # ── Groups ──

    async def groups(self) -> list[ChatGroup]:
        return _validate(ChatGroup, await self._repository.fetch("groups"))

    async def create_group(self, form: ChatGroupCreate) -> Mutation[ChatGroup]:
        created = await self._repository.post("groups", form.to_payload())
        item = ChatGroup.model_validate(created) if isinstance(created, dict) and "id" in created else None
        return Mutation[ChatGroup](item=item, items=await self.groups())

    async def group_messages(self, group_id: RecordId) -> list[Message]:
        return _validate(Message, await self._repository.fetch(f"groups/{group_id}/messages"))

    async def send_group_message(self, group_id: RecordId, form: MessageCreate) -> Mutation[Message]:
        payload = form.to_payload()
        payload.pop("receiverId", None)
        created = await self._repository.post(f"groups/{group_id}/messages", payload)
        item = Message.model_validate(created) if isinstance(created, dict) and "id" in created else None
        return Mutation[Message](item=item, items=await self.group_messages(group_id))

    async def add_member(self, group_id: RecordId, user_id: RecordId) -> Mutation[ChatGroup]:
        await self._repository.post(f"groups/{group_id}/members", {"userId": user_id})
        return Mutation[ChatGroup](items=await self.groups())

    async def remove_member(self, group_id: RecordId, user_id: RecordId) -> Mutation[ChatGroup]:
        await self._repository.remove(f"groups/{group_id}/members/{user_id}")
        return Mutation[ChatGroup](items=await self.groups())

    # ── Attachments ──

    async def upload(self, filename: str, content: bytes, content_type: str | None = None) -> Attachment:
        """Forward an attachment to the backend's storage and return its URL."""
        if len(content) > self._max_upload_bytes:
            raise AttachmentTooLargeError(len(content), self._max_upload_bytes)
        data = await self._repository.upload("upload", filename, content, content_type)
        data = data if isinstance(data, dict) else {}
        if not data.get("url"):
            raise BackendError(502, "ファイルのアップロードに失敗しました")
        logger.info("Uploaded chat attachment %s (%d bytes)", filename, len(content))
        return Attachment(url=data["url"], name=data.get("name") or filename)

    # ── Polling ──

    def message_feed(self, user_id: RecordId, interval: float, **kwargs) -> PollingFeed[Message]:
        """New messages in the conversation with ``user_id``, every ``interval`` seconds."""
        return PollingFeed(lambda: self.messages(user_id), key=lambda m: str(m.id), interval=interval, **kwargs)

    def unread_feed(self, interval: float, **kwargs) -> ChangeFeed[UnreadSummary]:
        return ChangeFeed(self.unread, interval=interval, **kwargs)


def _validate(model, rows) -> list:
    if not isinstance(rows, list):
        return []
    return [model.model_validate(row) for row in rows if isinstance(row, dict)]
