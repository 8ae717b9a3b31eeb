"""Unit tests for ChatService: messages, unread counts, groups and uploads."""

import pytest

from sinjapan_manager.application.schemas import ChatGroupCreate, MessageCreate
from sinjapan_manager.application.services import ChatService
from sinjapan_manager.domain.exceptions import AttachmentTooLargeError, BackendError
from tests.fakes import FakeResourceRepository

CONVERSATION = [
    {"id": 1, "content": "こんにちは", "senderId": 2, "receiverId": 3},
    {"id": 2, "content": "お疲れ様です", "senderId": 3, "receiverId": 2},
]


@pytest.mark.asyncio
async def test_send_returns_refetched_conversation():
    repo = FakeResourceRepository(
        responses={
            ("POST", "messages"): {"id": 2, "content": "お疲れ様です", "senderId": 3, "receiverId": 2},
            ("GET", "messages/2"): CONVERSATION,
        }
    )
    mutation = await ChatService(repo).send(MessageCreate(content="お疲れ様です", receiver_id=2))

    assert mutation.item.id == 2
    assert [m.id for m in mutation.items] == [1, 2]
    assert repo.calls_of("post")[0][2] == {"content": "お疲れ様です", "receiverId": 2}


def test_message_needs_content_or_attachment():
    with pytest.raises(ValueError):
        MessageCreate(content="   ", receiver_id=2)
    assert MessageCreate(attachment_url="https://files/a.pdf", receiver_id=2).content == ""


@pytest.mark.asyncio
async def test_unread_summary_tolerates_missing_by_sender_route():
    repo = FakeResourceRepository(
        responses={
            ("GET", "unread-count"): {"count": 4},
            ("GET", "unread-by-sender"): BackendError(404, "Not Found"),
        }
    )
    summary = await ChatService(repo).unread()
    assert summary.count == 4
    assert summary.by_sender == []


@pytest.mark.asyncio
async def test_unread_summary_by_sender():
    repo = FakeResourceRepository(
        responses={
            ("GET", "unread-count"): {"count": 3},
            ("GET", "unread-by-sender"): [{"senderId": 2, "count": 1}, {"senderId": 5, "count": 2}],
        }
    )
    summary = await ChatService(repo).unread()
    assert [(s.sender_id, s.count) for s in summary.by_sender] == [(2, 1), (5, 2)]


@pytest.mark.asyncio
async def test_unread_propagates_other_backend_errors():
    repo = FakeResourceRepository(
        responses={
            ("GET", "unread-count"): {"count": 0},
            ("GET", "unread-by-sender"): BackendError(500, "boom"),
        }
    )
    with pytest.raises(BackendError):
        await ChatService(repo).unread()


@pytest.mark.asyncio
async def test_group_message_drops_receiver():
    repo = FakeResourceRepository(
        responses={
            ("POST", "groups/7/messages"): {"id": 30, "content": "hi", "groupId": 7},
            ("GET", "groups/7/messages"): [{"id": 30, "content": "hi", "groupId": 7}],
        }
    )
    mutation = await ChatService(repo).send_group_message(7, MessageCreate(content="hi", receiver_id=9))
    assert repo.calls_of("post")[0][2] == {"content": "hi"}
    assert mutation.items[0].group_id == 7


@pytest.mark.asyncio
async def test_group_membership_refetches_groups():
    groups = [{"id": 7, "name": "営業部", "memberIds": [1, 2]}]
    repo = FakeResourceRepository(
        responses={("GET", "groups"): groups, ("POST", "groups"): {"id": 7, "name": "営業部"}}
    )
    service = ChatService(repo)

    created = await service.create_group(ChatGroupCreate(name="営業部", member_ids=[1, 2]))
    assert created.item.name == "営業部"

    await service.add_member(7, 3)
    mutation = await service.remove_member(7, 2)
    assert repo.calls_of("post")[-1] == ("post", "groups/7/members", {"userId": 3})
    assert repo.calls_of("remove") == [("remove", "groups/7/members/2")]
    assert [g.id for g in mutation.items] == [7]


@pytest.mark.asyncio
async def test_upload_rejects_oversized_files_locally():
    repo = FakeResourceRepository()
    service = ChatService(repo, max_upload_bytes=1024 * 1024)
    with pytest.raises(AttachmentTooLargeError) as exc_info:
        await service.upload("big.bin", b"x" * (1024 * 1024 + 1))
    assert "1MB" in exc_info.value.message
    assert repo.calls == []


@pytest.mark.asyncio
async def test_upload_returns_attachment():
    repo = FakeResourceRepository(responses={("UPLOAD", "upload"): {"url": "https://files/a.pdf"}})
    attachment = await ChatService(repo).upload("a.pdf", b"%PDF", "application/pdf")
    assert attachment.url == "https://files/a.pdf"
    assert attachment.name == "a.pdf"
    assert repo.calls_of("upload") == [("upload", "upload", "a.pdf", 4, "application/pdf")]


@pytest.mark.asyncio
async def test_upload_without_url_is_an_error():
    repo = FakeResourceRepository(responses={("UPLOAD", "upload"): {}})
    with pytest.raises(BackendError) as exc_info:
        await ChatService(repo).upload("a.pdf", b"%PDF")
    assert exc_info.value.status_code == 502
