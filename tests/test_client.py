"""Tests for Api, AsyncApi and the HTTP backends."""

import json
import sys
import os
from unittest.mock import patch, MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot.backends import RequestsBackend, ThreadedBackend
from telbot.client import Api, AsyncApi
from telbot.exceptions import SerializationError, TelbotError, TelegramError, TransportError
from telbot.inputs import InputFile
from telbot.methods import GetMe, SendMessage, SendPhoto
from telbot.models import Message, User

TOKEN = "123456:ABC-DEF"
ME = {"id": 1, "is_bot": True, "first_name": "Bot", "username": "my_bot"}
MESSAGE = {"message_id": 5, "date": 1700000000, "chat": {"id": 7, "type": "private"}, "text": "hi"}


class FakeBackend:
    """Blocking backend that records calls and replays canned bodies."""

    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.calls = []

    def post(self, url, headers, body):
        self.calls.append((url, dict(headers), body))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeAsyncBackend(FakeBackend):
    async def post(self, url, headers, body):
        return FakeBackend.post(self, url, headers, body)


def _ok(result) -> bytes:
    return json.dumps({"ok": True, "result": result}).encode()


# ── TelegramError ────────────────────────────────────────────────────────────


class TestTelegramError:
    """Validate the Telegram-side exception."""

    def test_attributes(self) -> None:
        exc = TelegramError("Forbidden: bot was blocked by the user", 403)
        assert exc.error_code == 403
        assert exc.response_body == {}
        assert "403" in str(exc)
        assert "Forbidden" in str(exc)

    def test_default_description(self) -> None:
        exc = TelegramError()
        assert exc.description == "Unknown error"
        assert "Unknown error" in str(exc)

    def test_hierarchy(self) -> None:
        for cls in (TelegramError, TransportError, SerializationError):
            assert issubclass(cls, TelbotError)


# ── Api construction ─────────────────────────────────────────────────────────


class TestApiInit:
    """Validate client initialisation."""

    def test_base_url(self) -> None:
        api = Api(TOKEN, FakeBackend())
        assert api.base_url == f"https://api.telegram.org/bot{TOKEN}/"

    def test_custom_server_strips_slash(self) -> None:
        api = Api(TOKEN, FakeBackend(), api_url="http://localhost:8081/")
        assert api.base_url == f"http://localhost:8081/bot{TOKEN}/"

    def test_default_backend(self) -> None:
        assert isinstance(Api(TOKEN)._backend, RequestsBackend)

    def test_from_env(self) -> None:
        backend = FakeBackend()
        with patch("telbot.config.BOT_TOKEN", TOKEN), patch("telbot.config.API_URL", "https://api.telegram.org"):
            api = Api.from_env(backend)
        assert api.base_url.endswith(f"/bot{TOKEN}/")
        assert api._backend is backend

    def test_from_env_without_token(self) -> None:
        with patch("telbot.config.BOT_TOKEN", None):
            with pytest.raises(EnvironmentError):
                Api.from_env()


# ── Api.send_json / send_file / send ─────────────────────────────────────────


class TestApiSend:
    """Validate request dispatch and result decoding."""

    def test_send_json(self) -> None:
        backend = FakeBackend(_ok(ME))
        me = Api(TOKEN, backend).send_json(GetMe())

        assert isinstance(me, User)
        assert me.username == "my_bot"
        url, headers, body = backend.calls[0]
        assert url == f"https://api.telegram.org/bot{TOKEN}/getMe"
        assert headers == {"Content-Type": "application/json"}
        assert body == b"{}"

    def test_send_json_body(self) -> None:
        backend = FakeBackend(_ok(MESSAGE))
        msg = Api(TOKEN, backend).send_json(SendMessage(7, "hi"))
        assert isinstance(msg, Message)
        assert json.loads(backend.calls[0][2]) == {"chat_id": 7, "text": "hi"}

    def test_send_file_uses_multipart(self) -> None:
        backend = FakeBackend(_ok(MESSAGE))
        Api(TOKEN, backend).send_file(SendPhoto(7, InputFile("a.jpg", b"JPEG", "image/jpeg")))

        url, headers, body = backend.calls[0]
        assert url.endswith("/sendPhoto")
        assert headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b'filename="a.jpg"' in body
        assert b"JPEG" in body

    def test_send_picks_multipart_for_uploads(self) -> None:
        backend = FakeBackend(_ok(MESSAGE), _ok(MESSAGE))
        api = Api(TOKEN, backend)
        api.send(SendPhoto(7, InputFile("a.jpg", b"JPEG")))
        api.send(SendPhoto(7, "file-id"))

        assert backend.calls[0][1]["Content-Type"].startswith("multipart/form-data")
        assert backend.calls[1][1]["Content-Type"] == "application/json"

    def test_telegram_error_raised(self) -> None:
        backend = FakeBackend(b'{"ok":false,"error_code":401,"description":"Unauthorized"}')
        with pytest.raises(TelegramError) as exc_info:
            Api(TOKEN, backend).send_json(GetMe())
        assert exc_info.value.error_code == 401
        assert exc_info.value.description == "Unauthorized"

    def test_malformed_body_raised(self) -> None:
        backend = FakeBackend(b"not json")
        with pytest.raises(SerializationError):
            Api(TOKEN, backend).send_json(GetMe())

    def test_transport_error_propagates(self) -> None:
        backend = FakeBackend(TransportError("ConnectionError: refused"))
        with pytest.raises(TransportError):
            Api(TOKEN, backend).send_json(GetMe())

    def test_token_not_logged(self, caplog) -> None:
        backend = FakeBackend(b'{"ok":false,"error_code":400,"description":"Bad Request"}')
        with caplog.at_level("DEBUG", logger="telbot"):
            with pytest.raises(TelegramError):
                Api(TOKEN, backend).send_json(GetMe())
        assert caplog.records
        assert all(TOKEN not in record.getMessage() for record in caplog.records)
        assert any(getattr(record, "api_endpoint", None) == "getMe" for record in caplog.records)


# ── RequestsBackend ──────────────────────────────────────────────────────────


class TestRequestsBackend:
    """Validate the requests-based transport."""

    def test_post_returns_body_regardless_of_status(self) -> None:
        session = MagicMock()
        session.post.return_value = MagicMock(status_code=400, content=b'{"ok":false}')

        backend = RequestsBackend(session=session, timeout=12)
        body = backend.post("https://x/getMe", {"Content-Type": "application/json"}, b"{}")

        assert body == b'{"ok":false}'
        session.post.assert_called_once_with(
            "https://x/getMe",
            data=b"{}",
            headers={"Content-Type": "application/json"},
            timeout=12,
            allow_redirects=False,
        )

    @patch("telbot.backends.requests.Session")
    def test_connection_error_wrapped(self, mock_session_cls: MagicMock) -> None:
        mock_session_cls.return_value.post.side_effect = requests.ConnectionError("refused")

        backend = RequestsBackend()
        with pytest.raises(TransportError) as exc_info:
            backend.post("https://x/getMe", {}, b"{}")
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_timeout_wrapped(self) -> None:
        session = MagicMock()
        session.post.side_effect = requests.Timeout("read timed out")
        with pytest.raises(TransportError):
            RequestsBackend(session=session).post("https://x/getMe", {}, b"{}")


# ── AsyncApi ─────────────────────────────────────────────────────────────────


class TestAsyncApi:
    """Validate the coroutine client."""

    @pytest.mark.asyncio
    async def test_send_json(self) -> None:
        backend = FakeAsyncBackend(_ok(ME))
        me = await AsyncApi(TOKEN, backend).send_json(GetMe())
        assert me.first_name == "Bot"
        assert backend.calls[0][0].endswith("/getMe")

    @pytest.mark.asyncio
    async def test_send_picks_multipart(self) -> None:
        backend = FakeAsyncBackend(_ok(MESSAGE))
        await AsyncApi(TOKEN, backend).send(SendPhoto(7, InputFile("a.jpg", b"JPEG")))
        assert backend.calls[0][1]["Content-Type"].startswith("multipart/form-data")

    @pytest.mark.asyncio
    async def test_error_raised(self) -> None:
        backend = FakeAsyncBackend(b'{"ok":false,"error_code":400,"description":"Bad Request"}')
        with pytest.raises(TelegramError):
            await AsyncApi(TOKEN, backend).send_json(GetMe())

    @pytest.mark.asyncio
    async def test_threaded_backend(self) -> None:
        blocking = FakeBackend(_ok(ME))
        me = await AsyncApi(TOKEN, ThreadedBackend(blocking)).send_json(GetMe())
        assert me.id == 1
        assert len(blocking.calls) == 1
