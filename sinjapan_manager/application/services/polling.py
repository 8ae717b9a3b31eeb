"""Fixed-interval polling feeds, consumed as async iterators.

Chat has no push channel: the browser re-asks the backend on a timer.
The feeds here run that timer on the server side so an SSE response can
stream only what changed. Closing the iterator (client disconnect) stops
the timer.
"""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from sinjapan_manager.domain.exceptions import BackendError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[Any]]


class _Poller:
    def __init__(self, interval: float, sleep: Sleep | None = None):
        self._interval = interval
        self._sleep = sleep or asyncio.sleep
        self._started = False
        self._closed = False

    def __aiter__(self):
        return self

    async def aclose(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    async def _tick(self) -> bool:
        """Wait for the next poll; False once the feed is closed."""
        if self._started:
            await self._sleep(self._interval)
        self._started = True
        return not self._closed


class PollingFeed(_Poller, Generic[T]):
    """Yields the first snapshot, then only items not seen before.

    A failed poll is logged and skipped; the next tick tries again.
    """

    def __init__(
        self,
        fetch: Callable[[], Awaitable[list[T]]],
        key: Callable[[T], Hashable],
        interval: float,
        *,
        sleep: Sleep | None = None,
    ):
        super().__init__(interval, sleep)
        self._fetch = fetch
        self._key = key
        self._seen: set[Hashable] | None = None

    async def __anext__(self) -> list[T]:
        while await self._tick():
            try:
                items = await self._fetch()
            except BackendError as exc:
                logger.warning("Poll failed: %s", exc)
                continue

            if self._seen is None:
                self._seen = {self._key(item) for item in items}
                return items

            fresh = [item for item in items if self._key(item) not in self._seen]
            if fresh:
                self._seen.update(self._key(item) for item in fresh)
                return fresh
        raise StopAsyncIteration


class ChangeFeed(_Poller, Generic[T]):
    """Yields the first value, then each value that differs from the previous poll."""

    _UNSET: Any = object()

    def __init__(
        self,
        fetch: Callable[[], Awaitable[T]],
        interval: float,
        *,
        sleep: Sleep | None = None,
    ):
        super().__init__(interval, sleep)
        self._fetch = fetch
        self._last: Any = self._UNSET

    async def __anext__(self) -> T:
        while await self._tick():
            try:
                value = await self._fetch()
            except BackendError as exc:
                logger.warning("Poll failed: %s", exc)
                continue

            if value != self._last:
                self._last = value
                return value
        raise StopAsyncIteration


def sse_event(event_type: str, data: Any) -> str:
    """Format one Server-Sent Event; pydantic models are dumped by alias."""
    sse_message = f"event: {event_type}\ndata: {json.dumps(_jsonable(data), ensure_ascii=False)}\n\n"
    return sse_message


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, list):
        return [_jsonable(item) for item in data]
    return data
