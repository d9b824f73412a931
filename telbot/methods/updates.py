"""Receiving updates by long polling."""

from typing import ClassVar, List, Optional

from telbot.methods.base import JsonMethod
from telbot.models import Update


class GetUpdates(JsonMethod):
    """Fetch pending updates; returns ``List[Update]``.

    Telegram forgets every update whose ``update_id`` is lower than
    ``offset``, so callers confirm a batch by requesting the next one with
    ``offset = highest update_id + 1``.
    """

    method_name: ClassVar[str] = "getUpdates"
    response_type: ClassVar = List[Update]

    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[str]] = None

    def with_offset(self, offset: int) -> "GetUpdates":
        self.offset = offset
        return self

    def with_limit(self, limit: int) -> "GetUpdates":
        self.limit = limit
        return self

    def with_timeout(self, timeout: int) -> "GetUpdates":
        """Long-polling timeout in seconds; ``0`` means short polling."""
        self.timeout = timeout
        return self

    def with_allowed_updates(self, allowed_updates: List[str]) -> "GetUpdates":
        self.allowed_updates = allowed_updates
        return self

    def with_allowed_update(self, allowed_update: str) -> "GetUpdates":
        self.allowed_updates = [*(self.allowed_updates or []), allowed_update]
        return self
