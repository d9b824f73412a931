"""Tests for the long-polling drivers."""

import sys
import os
from unittest.mock import MagicMock, AsyncMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telbot.exceptions import TelegramError, TransportError
from telbot.methods import GetUpdates
from telbot.models import Update
from telbot.polling import AsyncPolling, Polling, PollingState


def _updates(*ids) -> list:
    return [Update(update_id=update_id) for update_id in ids]


def _sent_offsets(api: MagicMock) -> list:
    return [call.args[0].offset for call in api.send_json.call_args_list]


# ── Polling ──────────────────────────────────────────────────────────────────


class TestPolling:
    """Validate offset handling and ordering of the blocking driver."""

    def test_first_request(self) -> None:
        api = MagicMock()
        api.send_json.return_value = _updates(1)
        next(Polling(api))

        request = api.send_json.call_args.args[0]
        assert isinstance(request, GetUpdates)
        assert request.to_dict() == {"offset": 0, "timeout": 1}

    def test_options_forwarded(self) -> None:
        api = MagicMock()
        api.send_json.return_value = _updates(1)
        next(Polling(api, timeout=25, limit=10, allowed_updates=["message"]))

        assert api.send_json.call_args.args[0].to_dict() == {
            "offset": 0,
            "limit": 10,
            "timeout": 25,
            "allowed_updates": ["message"],
        }

    def test_yields_in_server_order_and_advances_offset(self) -> None:
        api = MagicMock()
        api.send_json.side_effect = [_updates(5, 3, 4), _updates(6)]
        polling = Polling(api)

        assert [next(polling).update_id for _ in range(4)] == [5, 3, 4, 6]
        assert _sent_offsets(api) == [0, 6]
        assert polling.offset == 7

    def test_empty_batches_poll_again(self) -> None:
        api = MagicMock()
        api.send_json.side_effect = [[], [], _updates(9)]
        polling = Polling(api)

        assert next(polling).update_id == 9
        assert _sent_offsets(api) == [0, 0, 0]

    def test_offset_never_moves_back(self) -> None:
        api = MagicMock()
        api.send_json.side_effect = [_updates(10), _updates(4)]
        polling = Polling(api)
        next(polling)
        next(polling)
        assert polling.offset == 11

    def test_error_then_retry_from_same_offset(self) -> None:
        api = MagicMock()
        api.send_json.side_effect = [
            _updates(1),
            TransportError("ConnectionError: reset"),
            _updates(2),
        ]
        polling = Polling(api)

        assert next(polling).update_id == 1
        with pytest.raises(TransportError):
            next(polling)
        assert polling.state is PollingState.IDLE
        assert next(polling).update_id == 2
        assert _sent_offsets(api) == [0, 2, 2]

    def test_telegram_error_surfaces(self) -> None:
        api = MagicMock()
        api.send_json.side_effect = TelegramError("Conflict: terminated by other getUpdates request", 409)
        with pytest.raises(TelegramError):
            next(Polling(api))

    def test_states(self) -> None:
        api = MagicMock()
        api.send_json.return_value = _updates(1, 2)
        polling = Polling(api)

        assert polling.state is PollingState.IDLE
        next(polling)
        assert polling.state is PollingState.DRAINING
        next(polling)
        assert polling.state is PollingState.IDLE

    def test_custom_start_offset(self) -> None:
        api = MagicMock()
        api.send_json.return_value = _updates(100)
        next(Polling(api, offset=100))
        assert _sent_offsets(api) == [100]

    def test_is_iterator(self) -> None:
        api = MagicMock()
        api.send_json.return_value = _updates(1)
        polling = Polling(api)
        assert iter(polling) is polling


# ── AsyncPolling ─────────────────────────────────────────────────────────────


class TestAsyncPolling:
    """Validate the async driver."""

    @pytest.mark.asyncio
    async def test_async_iteration(self) -> None:
        api = MagicMock()
        api.send_json = AsyncMock(side_effect=[_updates(1, 2), _updates(3)])

        seen = []
        async for update in AsyncPolling(api):
            seen.append(update.update_id)
            if len(seen) == 3:
                break

        assert seen == [1, 2, 3]
        assert _sent_offsets(api) == [0, 3]

    @pytest.mark.asyncio
    async def test_async_error_then_retry(self) -> None:
        api = MagicMock()
        api.send_json = AsyncMock(side_effect=[TransportError("timeout"), _updates(7)])
        polling = AsyncPolling(api)

        with pytest.raises(TransportError):
            await polling.__anext__()
        assert (await polling.__anext__()).update_id == 7
        assert _sent_offsets(api) == [0, 0]
