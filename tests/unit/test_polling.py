"""Unit tests for the polling feeds behind the chat SSE streams."""

import pytest

from sinjapan_manager.application.schemas import Message, UnreadSummary
from sinjapan_manager.application.services import ChangeFeed, PollingFeed, sse_event
from sinjapan_manager.domain.exceptions import BackendError


def _scripted(*replies):
    """A fetch function returning (or raising) each reply in turn."""
    queue = list(replies)

    async def fetch():
        reply = queue.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    return fetch


class FakeSleep:
    def __init__(self):
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def _msg(message_id: int) -> Message:
    return Message(id=message_id, content=f"m{message_id}")


@pytest.mark.asyncio
async def test_polling_feed_yields_snapshot_then_only_new_items():
    sleep = FakeSleep()
    feed = PollingFeed(
        _scripted([_msg(1), _msg(2)], [_msg(1), _msg(2)], [_msg(1), _msg(2), _msg(3)]),
        key=lambda m: m.id,
        interval=3.0,
        sleep=sleep,
    )

    first = await feed.__anext__()
    second = await feed.__anext__()

    assert [m.id for m in first] == [1, 2]
    assert [m.id for m in second] == [3]
    # no sleep before the first poll
    assert sleep.calls == [3.0, 3.0]


@pytest.mark.asyncio
async def test_polling_feed_skips_failed_polls():
    feed = PollingFeed(
        _scripted([_msg(1)], BackendError(502, "down"), [_msg(1), _msg(2)]),
        key=lambda m: m.id,
        interval=1.0,
        sleep=FakeSleep(),
    )
    await feed.__anext__()
    fresh = await feed.__anext__()
    assert [m.id for m in fresh] == [2]


@pytest.mark.asyncio
async def test_closed_feed_stops_iterating():
    feed = PollingFeed(_scripted([_msg(1)]), key=lambda m: m.id, interval=1.0, sleep=FakeSleep())
    await feed.__anext__()
    await feed.aclose()

    assert feed.closed
    with pytest.raises(StopAsyncIteration):
        await feed.__anext__()


@pytest.mark.asyncio
async def test_change_feed_only_emits_changes():
    feed = ChangeFeed(
        _scripted(UnreadSummary(count=1), UnreadSummary(count=1), UnreadSummary(count=2)),
        interval=10.0,
        sleep=FakeSleep(),
    )
    values = [await feed.__anext__(), await feed.__anext__()]
    assert [v.count for v in values] == [1, 2]


def test_sse_event_format():
    event = sse_event("unread", UnreadSummary(count=2))
    assert event == 'event: unread\ndata: {"count": 2, "bySender": []}\n\n'


def test_sse_event_keeps_japanese_readable():
    event = sse_event("messages", [_msg(1).model_copy(update={"content": "こんにちは"})])
    assert "こんにちは" in event
    assert event.startswith("event: messages\ndata: [")
