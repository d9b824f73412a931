"""Api / AsyncApi: the request execution core.

A client is bound to one bot token.  It turns a request object into an
HTTP POST against ``<api_url>/bot<token>/<methodName>``, hands it to an HTTP
backend and decodes the ``{"ok": ...}`` envelope into the request's typed
result::

    api = Api(token)
    me = api.send_json(GetMe())
    api.send(SendPhoto(chat_id, InputFile.from_path("kiwi.jpg")))

Requests without uploads travel as JSON.  Requests carrying inline uploads
travel as ``multipart/form-data``; :meth:`Api.send` picks the right path.
Nothing is retried; every failure surfaces as a
:class:`~telbot.exceptions.TelbotError`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Tuple

from telbot.backends import AsyncHttpBackend, HttpBackend, RequestsBackend, ThreadedBackend
from telbot.exceptions import SerializationError, TelegramError, TransportError
from telbot.methods.base import FileMethod, TelegramMethod
from telbot.wire import JSON_CONTENT_TYPE, decode_response, encode_json, encode_multipart

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.telegram.org"


def _base_url(token: str, api_url: str) -> str:
    return f"{api_url.rstrip('/')}/bot{token}/"


def _json_request(method: TelegramMethod) -> Tuple[Mapping[str, str], bytes]:
    return {"Content-Type": JSON_CONTENT_TYPE}, encode_json(method)


def _multipart_request(method: FileMethod) -> Tuple[Mapping[str, str], bytes]:
    body, content_type = encode_multipart(method)
    return {"Content-Type": content_type}, body


def _has_uploads(method: TelegramMethod) -> bool:
    return isinstance(method, FileMethod) and method.files() is not None


def _decode(method: TelegramMethod, raw: bytes) -> Any:
    """Decode *raw*, logging Telegram-side and decoding failures."""
    try:
        return decode_response(method, raw)
    except TelegramError as exc:
        logger.warning(
            "Telegram returned an error",
            extra={
                "api_endpoint": method.method_name,
                "error_code": exc.error_code,
                "description": exc.description,
                "retry_after": exc.retry_after,
            },
        )
        raise
    except SerializationError as exc:
        logger.error("Response decode error", extra={"api_endpoint": method.method_name, "error": str(exc)})
        raise


def _log_transport_error(method: TelegramMethod, exc: TransportError) -> None:
    logger.error("Request transport error", extra={"api_endpoint": method.method_name, "error": str(exc)})


class Api:
    """Blocking Bot API client.

    Args:
        token: Bot token issued by @BotFather.
        backend: HTTP backend; a :class:`RequestsBackend` by default.
        api_url: Bot API server root, for self-hosted servers.
    """

    def __init__(
        self,
        token: str,
        backend: Optional[HttpBackend] = None,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._base_url = _base_url(token, api_url)
        self._backend = backend if backend is not None else RequestsBackend()

    @classmethod
    def from_env(cls, backend: Optional[HttpBackend] = None) -> Api:
        """Build a client from ``BOT_TOKEN`` and the ``TELBOT_*`` settings.

        Raises:
            EnvironmentError: If ``BOT_TOKEN`` is not set.
        """
        from telbot import config  # deferred so the core never reads the environment by itself

        if not config.BOT_TOKEN:
            raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")
        if backend is None:
            backend = RequestsBackend(timeout=config.REQUEST_TIMEOUT)
        return cls(config.BOT_TOKEN, backend, api_url=config.API_URL)

    @property
    def base_url(self) -> str:
        """``<api_url>/bot<token>/``; contains the token, so do not log it."""
        return self._base_url

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _post(self, method: TelegramMethod, headers: Mapping[str, str], body: bytes, transport: str) -> Any:
        logger.debug(
            "Sending request",
            extra={"api_endpoint": method.method_name, "transport": transport, "body_size": len(body)},
        )
        try:
            raw = self._backend.post(self._base_url + method.method_name, headers, body)
        except TransportError as exc:
            _log_transport_error(method, exc)
            raise
        return _decode(method, raw)

    # ------------------------------------------------------------------
    #  Public API
    # ------------------------------------------------------------------

    def send_json(self, method: TelegramMethod) -> Any:
        """Send *method* as a JSON body and return its decoded result.

        Inline uploads, if any, are sent as empty strings; use
        :meth:`send_file` or :meth:`send` for those.
        """
        headers, body = _json_request(method)
        return self._post(method, headers, body, "json")

    def send_file(self, method: FileMethod) -> Any:
        """Send *method* as ``multipart/form-data`` and return its decoded result."""
        headers, body = _multipart_request(method)
        return self._post(method, headers, body, "multipart")

    def send(self, method: TelegramMethod) -> Any:
        """Send *method* as multipart if it carries uploads, as JSON otherwise."""
        if _has_uploads(method):
            return self.send_file(method)
        return self.send_json(method)


class AsyncApi:
    """Coroutine Bot API client; mirrors :class:`Api`.

    Args:
        token: Bot token issued by @BotFather.
        backend: Cooperative HTTP backend; a :class:`ThreadedBackend` over
            :class:`RequestsBackend` by default.
        api_url: Bot API server root, for self-hosted servers.
    """

    def __init__(
        self,
        token: str,
        backend: Optional[AsyncHttpBackend] = None,
        api_url: str = DEFAULT_API_URL,
    ) -> None:
        self._base_url = _base_url(token, api_url)
        self._backend = backend if backend is not None else ThreadedBackend()

    @classmethod
    def from_env(cls, backend: Optional[AsyncHttpBackend] = None) -> AsyncApi:
        """Build a client from ``BOT_TOKEN`` and the ``TELBOT_*`` settings.

        Raises:
            EnvironmentError: If ``BOT_TOKEN`` is not set.
        """
        from telbot import config  # deferred so the core never reads the environment by itself

        if not config.BOT_TOKEN:
            raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")
        if backend is None:
            backend = ThreadedBackend(RequestsBackend(timeout=config.REQUEST_TIMEOUT))
        return cls(config.BOT_TOKEN, backend, api_url=config.API_URL)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _post(self, method: TelegramMethod, headers: Mapping[str, str], body: bytes, transport: str) -> Any:
        logger.debug(
            "Sending request",
            extra={"api_endpoint": method.method_name, "transport": transport, "body_size": len(body)},
        )
        try:
            raw = await self._backend.post(self._base_url + method.method_name, headers, body)
        except TransportError as exc:
            _log_transport_error(method, exc)
            raise
        return _decode(method, raw)

    async def send_json(self, method: TelegramMethod) -> Any:
        headers, body = _json_request(method)
        return await self._post(method, headers, body, "json")

    async def send_file(self, method: FileMethod) -> Any:
        headers, body = _multipart_request(method)
        return await self._post(method, headers, body, "multipart")

    async def send(self, method: TelegramMethod) -> Any:
        if _has_uploads(method):
            return await self.send_file(method)
        return await self.send_json(method)
