"""Tests for the webhook receiver adapter."""

import json
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot.exceptions import SerializationError
from telbot.models import UpdateKind
from telbot.webhook import parse_update


class TestParseUpdate:
    """Validate decoding of inbound webhook bodies."""

    def test_message_update(self) -> None:
        body = json.dumps({
            "update_id": 100,
            "message": {
                "message_id": 1,
                "date": 1700000000,
                "chat": {"id": 7, "type": "private"},
                "from": {"id": 7, "is_bot": False, "first_name": "Ada"},
                "text": "/start",
            },
        }).encode()
        update = parse_update(body)
        assert update.update_id == 100
        assert update.kind is UpdateKind.MESSAGE
        assert update.message.text == "/start"

    def test_accepts_str_body(self) -> None:
        update = parse_update('{"update_id": 5}')
        assert update.update_id == 5
        assert update.kind is None

    def test_pre_checkout_query(self) -> None:
        body = json.dumps({
            "update_id": 6,
            "pre_checkout_query": {
                "id": "pcq",
                "from": {"id": 7, "is_bot": False, "first_name": "Ada"},
                "currency": "EUR",
                "total_amount": 500,
                "invoice_payload": "order-1",
            },
        })
        update = parse_update(body)
        assert update.kind is UpdateKind.PRE_CHECKOUT_QUERY
        assert update.pre_checkout_query.answer_ok().to_dict() == {"pre_checkout_query_id": "pcq", "ok": True}

    def test_malformed_json(self) -> None:
        with pytest.raises(SerializationError):
            parse_update(b"{not json")

    def test_missing_update_id(self) -> None:
        with pytest.raises(SerializationError):
            parse_update(b'{"message": null}')
