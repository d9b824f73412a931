"""Pluggable HTTP backends.

The execution core only needs one operation from a transport: POST *body*
with *headers* to *url* and hand back the raw response body, whatever the
HTTP status.  Telegram answers errors with a JSON envelope and a 4xx/5xx
status, so the status code is never inspected here.

Any object with a matching ``post`` method can be passed to
:class:`telbot.Api` (blocking) or :class:`telbot.AsyncApi` (coroutine).
"""

from __future__ import annotations

import asyncio
from typing import Mapping, Optional, Protocol

import requests

from telbot.exceptions import TransportError

DEFAULT_TIMEOUT: float = 30.0


class HttpBackend(Protocol):
    """Blocking transport."""

    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> bytes:
        ...


class AsyncHttpBackend(Protocol):
    """Cooperative transport."""

    async def post(self, url: str, headers: Mapping[str, str], body: bytes) -> bytes:
        ...


class RequestsBackend:
    """Blocking backend on a :class:`requests.Session`.

    Redirects are not followed.  The timeout must exceed the long-polling
    timeout used with ``getUpdates``.
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def post(self, url: str, headers: Mapping[str, str], body: bytes) -> bytes:
        """POST *body* and return the response body.

        Raises:
            TransportError: On connection failures and timeouts.
        """
        try:
            response = self._session.post(
                url,
                data=body,
                headers=dict(headers),
                timeout=self._timeout,
                allow_redirects=False,
            )
        except requests.RequestException as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc
        return response.content

    def close(self) -> None:
        self._session.close()


# ── Async adapter ────────────────────────────────────────────────────────────


async def make_request(backend: HttpBackend, url: str, headers: Mapping[str, str], body: bytes) -> bytes:
    """Run a blocking backend call inside a thread to keep the event loop free."""
    return await asyncio.to_thread(backend.post, url, headers, body)


class ThreadedBackend:
    """Cooperative backend that runs a blocking one on the default executor."""

    def __init__(self, backend: Optional[HttpBackend] = None) -> None:
        self._backend = backend if backend is not None else RequestsBackend()

    async def post(self, url: str, headers: Mapping[str, str], body: bytes) -> bytes:
        return await make_request(self._backend, url, headers, body)
