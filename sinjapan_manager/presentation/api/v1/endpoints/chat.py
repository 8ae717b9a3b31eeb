"""Chat endpoints: direct messages, groups, attachments and polling streams."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, UploadFile, status
from fastapi.responses import StreamingResponse

from sinjapan_manager.application.schemas import (
    Attachment,
    ChatGroup,
    ChatGroupCreate,
    GroupMemberAdd,
    Message,
    MessageCreate,
    Mutation,
    UnreadSummary,
    User,
)
from sinjapan_manager.application.services import ChatService, sse_event
from sinjapan_manager.config import get_settings
from sinjapan_manager.domain.exceptions import AttachmentTooLargeError
from sinjapan_manager.infrastructure.dependencies import get_chat_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["Chat"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


@router.get("/users", response_model=list[User])
async def chat_users(service: ChatService = Depends(get_chat_service)) -> list[User]:
    """Everyone the current user can start a conversation with."""
    return await service.users()


@router.get("/partners", response_model=list[User])
async def chat_partners(service: ChatService = Depends(get_chat_service)) -> list[User]:
    return await service.partners()


@router.get("/messages/{user_id}", response_model=list[Message])
async def conversation(
    user_id: str,
    service: ChatService = Depends(get_chat_service),
) -> list[Message]:
    """Messages exchanged with ``user_id``, oldest first."""
    return await service.messages(user_id)


@router.get("/messages/{user_id}/stream")
async def conversation_stream(
    user_id: str,
    request: Request,
    service: ChatService = Depends(get_chat_service),
) -> StreamingResponse:
    """SSE stream of the conversation: the full history once, then new messages.

    The backend is polled every ``CHAT_POLL_INTERVAL_SECONDS``.
    """
    feed = service.message_feed(user_id, get_settings().chat_poll_interval_seconds)

    async def event_generator():
        try:
            async for batch in feed:
                if await request.is_disconnected():
                    break
                yield sse_event("messages", batch)
        finally:
            await feed.aclose()
            logger.debug("Conversation stream with %s closed", user_id)

    return StreamingResponse(event_generator(), media_type="text/event-stream", headers=SSE_HEADERS)


@router.post("/messages", response_model=Mutation[Message], status_code=status.HTTP_201_CREATED)
async def send_message(
    data: MessageCreate,
    service: ChatService = Depends(get_chat_service),
) -> Mutation[Message]:
    """Send a direct message; returns the re-fetched conversation."""
    if data.receiver_id is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="receiverId is required",
        )
    return await service.send(data)


@router.get("/unread", response_model=UnreadSummary)
async def unread(service: ChatService = Depends(get_chat_service)) -> UnreadSummary:
    return await service.unread()


@router.get("/unread/stream")
async def unread_stream(
    request: Request,
    service: ChatService = Depends(get_chat_service),
) -> StreamingResponse:
    """SSE stream of the unread summary, emitted whenever it changes."""
    feed = service.unread_feed(get_settings().unread_poll_interval_seconds)

    async def event_generator():
        try:
            async for summary in feed:
                if await request.is_disconnected():
                    break
                yield sse_event("unread", summary)
        finally:
            await feed.aclose()

    return StreamingResponse(event_generator(), media_type="text/event-stream", headers=SSE_HEADERS)


# ── Groups ──


@router.get("/groups", response_model=list[ChatGroup])
async def list_groups(service: ChatService = Depends(get_chat_service)) -> list[ChatGroup]:
    return await service.groups()


@router.post("/groups", response_model=Mutation[ChatGroup], status_code=status.HTTP_201_CREATED)
async def create_group(
    data: ChatGroupCreate,
    service: ChatService = Depends(get_chat_service),
) -> Mutation[ChatGroup]:
    return await service.create_group(data)


@router.get("/groups/{group_id}/messages", response_model=list[Message])
async def group_messages(
    group_id: str,
    service: ChatService = Depends(get_chat_service),
) -> list[Message]:
    return await service.group_messages(group_id)


@router.post(
    "/groups/{group_id}/messages",
    response_model=Mutation[Message],
    status_code=status.HTTP_201_CREATED,
)
async def send_group_message(
    group_id: str,
    data: MessageCreate,
    service: ChatService = Depends(get_chat_service),
) -> Mutation[Message]:
    return await service.send_group_message(group_id, data)


@router.post("/groups/{group_id}/members", response_model=Mutation[ChatGroup])
async def add_member(
    group_id: str,
    data: GroupMemberAdd,
    service: ChatService = Depends(get_chat_service),
) -> Mutation[ChatGroup]:
    return await service.add_member(group_id, data.user_id)


@router.delete("/groups/{group_id}/members/{user_id}", response_model=Mutation[ChatGroup])
async def remove_member(
    group_id: str,
    user_id: str,
    service: ChatService = Depends(get_chat_service),
) -> Mutation[ChatGroup]:
    return await service.remove_member(group_id, user_id)


# ── Attachments ──


@router.post("/upload", response_model=Attachment, status_code=status.HTTP_201_CREATED)
async def upload_attachment(
    file: UploadFile,
    service: ChatService = Depends(get_chat_service),
) -> Attachment:
    """Store an attachment; send its URL with the next message.

    At most one byte past the limit is read, so an oversized body is
    rejected without buffering all of it.
    """
    content = await file.read(service.max_upload_bytes + 1)
    if len(content) > service.max_upload_bytes:
        raise AttachmentTooLargeError(file.size or len(content), service.max_upload_bytes)
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file provided")
    return await service.upload(file.filename or "attachment", content, file.content_type)
