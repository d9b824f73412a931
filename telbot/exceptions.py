"""Exception hierarchy for the telbot Telegram Bot API client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from telbot.wire import ResponseParameters


class TelbotError(Exception):
    """Base class for every error raised while executing a request."""


class TelegramError(TelbotError):
    """The Bot API answered with an ``ok: false`` envelope.

    Attributes:
        description: Human-readable explanation supplied by Telegram.
        error_code: Numeric error code, when present.
        parameters: Structured hints such as ``retry_after``, when present.
        response_body: Raw decoded envelope as a dict, when available.
    """

    def __init__(
        self,
        description: Optional[str] = None,
        error_code: Optional[int] = None,
        parameters: Optional["ResponseParameters"] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialise from the fields of an error envelope."""
        self.description = description or "Unknown error"
        self.error_code = error_code
        self.parameters = parameters
        self.response_body = response_body or {}
        if error_code is None:
            super().__init__(f"Telegram error: {self.description}")
        else:
            super().__init__(f"Telegram error {error_code}: {self.description}")

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating the request (flood control)."""
        return self.parameters.retry_after if self.parameters else None

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        """Identifier of the supergroup the group was migrated to."""
        return self.parameters.migrate_to_chat_id if self.parameters else None


class TransportError(TelbotError):
    """The HTTP backend failed before a response body was obtained.

    The backend's own exception is chained as ``__cause__``.
    """


class SerializationError(TelbotError):
    """A request could not be encoded or a response could not be decoded."""
