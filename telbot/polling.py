"""Long-polling drivers.

:class:`Polling` turns repeated ``getUpdates`` calls into an endless
iterator of :class:`~telbot.models.Update`; :class:`AsyncPolling` does the
same as an async iterator::

    for update in Polling(api):
        handle(update)

Updates are yielded in the order the server returned them.  The offset only
moves forward, to the highest ``update_id`` seen plus one, so each update
is yielded once.  When a ``getUpdates`` call fails the error is raised from
``__next__``; the iterator stays usable and the next call retries from the
same offset.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Deque, Iterable, List, Optional

from telbot.exceptions import TelbotError
from telbot.methods.updates import GetUpdates
from telbot.models import Update

if TYPE_CHECKING:
    from telbot.client import Api, AsyncApi

logger = logging.getLogger(__name__)

DEFAULT_POLL_TIMEOUT = 1


class PollingState(str, Enum):
    IDLE = "idle"
    AWAITING_BATCH = "awaiting_batch"
    DRAINING = "draining"


class _PollingBase:
    """Offset bookkeeping and buffering shared by both drivers."""

    def __init__(
        self,
        timeout: int = DEFAULT_POLL_TIMEOUT,
        limit: Optional[int] = None,
        allowed_updates: Optional[Iterable[str]] = None,
        offset: int = 0,
    ) -> None:
        self._timeout = timeout
        self._limit = limit
        self._allowed_updates = list(allowed_updates) if allowed_updates is not None else None
        self._offset = offset
        self._buffer: Deque[Update] = deque()
        self._state = PollingState.IDLE

    @property
    def offset(self) -> int:
        """Offset the next ``getUpdates`` call will send."""
        return self._offset

    @property
    def state(self) -> PollingState:
        return self._state

    def _request(self) -> GetUpdates:
        request = GetUpdates().with_offset(self._offset).with_timeout(self._timeout)
        if self._limit is not None:
            request.with_limit(self._limit)
        if self._allowed_updates is not None:
            request.with_allowed_updates(self._allowed_updates)
        self._state = PollingState.AWAITING_BATCH
        return request

    def _accept(self, updates: List[Update]) -> None:
        if updates:
            logger.debug("Received updates", extra={"count": len(updates), "offset": self._offset})
            self._offset = max(self._offset, max(update.update_id for update in updates) + 1)
        self._buffer.extend(updates)

    def _failed(self, exc: TelbotError) -> None:
        self._state = PollingState.IDLE
        logger.warning(
            "getUpdates failed; will retry from the same offset",
            extra={"api_endpoint": "getUpdates", "offset": self._offset, "error": str(exc)},
        )

    def _pop(self) -> Update:
        update = self._buffer.popleft()
        self._state = PollingState.DRAINING if self._buffer else PollingState.IDLE
        return update


class Polling(_PollingBase):
    """Blocking update iterator over an :class:`~telbot.client.Api`."""

    def __init__(self, api: Api, timeout: int = DEFAULT_POLL_TIMEOUT, **options) -> None:
        super().__init__(timeout, **options)
        self._api = api

    def __iter__(self) -> Polling:
        return self

    def __next__(self) -> Update:
        while not self._buffer:
            request = self._request()
            try:
                updates = self._api.send_json(request)
            except TelbotError as exc:
                self._failed(exc)
                raise
            self._accept(updates)
        return self._pop()


class AsyncPolling(_PollingBase):
    """Async update iterator over an :class:`~telbot.client.AsyncApi`."""

    def __init__(self, api: AsyncApi, timeout: int = DEFAULT_POLL_TIMEOUT, **options) -> None:
        super().__init__(timeout, **options)
        self._api = api

    def __aiter__(self) -> AsyncPolling:
        return self

    async def __anext__(self) -> Update:
        while not self._buffer:
            request = self._request()
            try:
                updates = await self._api.send_json(request)
            except TelbotError as exc:
                self._failed(exc)
                raise
            self._accept(updates)
        return self._pop()
