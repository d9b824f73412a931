"""Tests for request body encoding and response envelope decoding."""

import json
import sys
import os
from email.parser import BytesParser
from email.policy import HTTP

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot.exceptions import SerializationError, TelegramError
from telbot.inputs import InputFile
from telbot.methods import DeleteMessage, GetMe, GetUpdates, SendMessage, SendPhoto, SendVideo
from telbot.models import InlineKeyboardButton, InlineKeyboardMarkup, Message, User
from telbot.wire import decode_response, encode_json, encode_multipart

CHAT = {"id": 7, "type": "private", "first_name": "Ada"}
MESSAGE = {"message_id": 5, "date": 1700000000, "chat": CHAT, "text": "hi"}


def _multipart_parts(body: bytes, content_type: str) -> dict:
    """Parse a multipart body into ``{field name: email part}``."""
    raw = b"Content-Type: " + content_type.encode("ascii") + b"\r\n\r\n" + body
    message = BytesParser(policy=HTTP).parsebytes(raw)
    assert message.is_multipart()
    return {part.get_param("name", header="content-disposition"): part for part in message.iter_parts()}


# ── JSON bodies ──────────────────────────────────────────────────────────────


class TestEncodeJson:
    """Validate the ``application/json`` request body."""

    def test_compact_and_without_unset_fields(self) -> None:
        assert encode_json(SendMessage(1, "hi")) == b'{"chat_id":1,"text":"hi"}'

    def test_empty_request(self) -> None:
        assert encode_json(GetMe()) == b"{}"

    def test_non_ascii_kept_as_utf8(self) -> None:
        body = encode_json(SendMessage("@channel", "привет"))
        assert "привет".encode("utf-8") in body
        assert json.loads(body) == {"chat_id": "@channel", "text": "привет"}

    def test_nested_markup(self) -> None:
        markup = InlineKeyboardMarkup.new().add_row(InlineKeyboardButton.callback("A", "a"))
        body = json.loads(encode_json(SendMessage(1, "x").with_reply_markup(markup)))
        assert body["reply_markup"] == {"inline_keyboard": [[{"text": "A", "callback_data": "a"}]]}

    def test_inline_upload_is_empty_string(self) -> None:
        body = json.loads(encode_json(SendPhoto(7, InputFile("a.jpg", b"x", "image/jpeg"))))
        assert body == {"chat_id": 7, "photo": ""}

    def test_existing_photo_id(self) -> None:
        assert encode_json(SendPhoto(7, "AgACAgIAAxkBAAI")) == b'{"chat_id":7,"photo":"AgACAgIAAxkBAAI"}'

    def test_thumb_url_kept(self) -> None:
        body = json.loads(encode_json(SendVideo(7, "BAACAgIAAxkBAAI").with_thumb("https://x/t.jpg")))
        assert body == {"chat_id": 7, "video": "BAACAgIAAxkBAAI", "thumb": "https://x/t.jpg"}

    def test_chat_id_is_bare(self) -> None:
        assert encode_json(SendMessage(-1, "hi")) == b'{"chat_id":-1,"text":"hi"}'
        assert encode_json(SendMessage("@foo", "hi")) == b'{"chat_id":"@foo","text":"hi"}'

    def test_empty_allowed_updates_kept(self) -> None:
        assert encode_json(GetUpdates().with_allowed_updates([])) == b'{"allowed_updates":[]}'
        assert encode_json(GetUpdates()) == b"{}"


# ── Multipart bodies ─────────────────────────────────────────────────────────


class TestEncodeMultipart:
    """Validate the ``multipart/form-data`` request body."""

    def test_photo_upload(self) -> None:
        request = SendPhoto(7, InputFile("photo.jpg", b"JPEGDATA", "image/jpeg"))
        body, content_type = encode_multipart(request)

        assert content_type.startswith("multipart/form-data; boundary=")
        parts = _multipart_parts(body, content_type)
        assert set(parts) == {"chat_id", "photo"}

        photo = parts["photo"]
        assert photo.get_filename() == "photo.jpg"
        assert photo.get_content_type() == "image/jpeg"
        assert photo.get_payload(decode=True) == b"JPEGDATA"

        assert parts["chat_id"].get_payload(decode=True) == b"7"

    def test_text_and_json_parts(self) -> None:
        markup = InlineKeyboardMarkup.new().add_row(InlineKeyboardButton.callback("A", "a"))
        request = (
            SendPhoto(7, InputFile("p.png", b"PNG", "image/png"))
            .with_caption("look")
            .with_reply_markup(markup)
        )
        parts = _multipart_parts(*encode_multipart(request))

        assert parts["caption"].get_payload(decode=True) == b"look"
        assert json.loads(parts["reply_markup"].get_payload(decode=True)) == {
            "inline_keyboard": [[{"text": "A", "callback_data": "a"}]]
        }
        assert parts["caption"].get_filename() is None

    def test_file_id_travels_as_text(self) -> None:
        request = SendPhoto(7, "AgACAgIAAxkBAAI")
        assert request.files() is None
        parts = _multipart_parts(*encode_multipart(request))
        assert parts["photo"].get_payload(decode=True) == b"AgACAgIAAxkBAAI"
        assert parts["photo"].get_filename() is None

    def test_upload_with_thumb_url(self) -> None:
        request = SendVideo(7, InputFile("clip.mp4", b"MP4", "video/mp4")).with_thumb("https://x/t.jpg")
        assert set(request.files()) == {"video"}
        parts = _multipart_parts(*encode_multipart(request))
        assert parts["video"].get_payload(decode=True) == b"MP4"
        assert parts["thumb"].get_payload(decode=True) == b"https://x/t.jpg"
        assert parts["thumb"].get_filename() is None


# ── Response envelope ────────────────────────────────────────────────────────


class TestDecodeResponse:
    """Validate decoding of the ``{"ok": ...}`` envelope."""

    def test_typed_result(self) -> None:
        body = json.dumps({"ok": True, "result": MESSAGE})
        msg = decode_response(SendMessage(7, "hi"), body)
        assert isinstance(msg, Message)
        assert msg.message_id == 5

    def test_user_result(self) -> None:
        body = b'{"ok":true,"result":{"id":1,"is_bot":true,"first_name":"Bot","username":"my_bot"}}'
        me = decode_response(GetMe(), body)
        assert isinstance(me, User)
        assert me.username == "my_bot"

    def test_bool_result(self) -> None:
        assert decode_response(DeleteMessage(7, 5), b'{"ok":true,"result":true}') is True

    def test_list_result(self) -> None:
        body = json.dumps({"ok": True, "result": [{"update_id": 3}, {"update_id": 4}]})
        updates = decode_response(GetUpdates(), body)
        assert [u.update_id for u in updates] == [3, 4]

    def test_error_envelope(self) -> None:
        body = b'{"ok":false,"error_code":400,"description":"Bad Request: chat not found"}'
        with pytest.raises(TelegramError) as exc_info:
            decode_response(SendMessage(7, "hi"), body)
        err = exc_info.value
        assert err.error_code == 400
        assert err.description == "Bad Request: chat not found"
        assert err.retry_after is None
        assert err.response_body["error_code"] == 400

    def test_error_with_parameters(self) -> None:
        body = b'{"ok":false,"error_code":429,"description":"Too Many Requests","parameters":{"retry_after":30}}'
        with pytest.raises(TelegramError) as exc_info:
            decode_response(SendMessage(7, "hi"), body)
        assert exc_info.value.retry_after == 30

    def test_error_without_description(self) -> None:
        with pytest.raises(TelegramError) as exc_info:
            decode_response(SendMessage(7, "hi"), b'{"ok":false}')
        assert exc_info.value.description == "Unknown error"
        assert exc_info.value.error_code is None

    def test_not_json(self) -> None:
        with pytest.raises(SerializationError):
            decode_response(GetMe(), b"<html>Bad Gateway</html>")

    def test_missing_ok(self) -> None:
        with pytest.raises(SerializationError):
            decode_response(GetMe(), b'{"result":true}')

    def test_ok_must_be_boolean(self) -> None:
        with pytest.raises(SerializationError):
            decode_response(DeleteMessage(7, 5), b'{"ok":1,"result":true}')

    def test_ok_without_result(self) -> None:
        with pytest.raises(SerializationError):
            decode_response(DeleteMessage(7, 5), b'{"ok":true}')

    def test_result_type_mismatch(self) -> None:
        with pytest.raises(SerializationError):
            decode_response(SendMessage(7, "hi"), b'{"ok":true,"result":true}')
