"""telbot: typed Telegram Bot API client.

Typical use::

    from telbot import Api, Polling

    api = Api(token)
    for update in Polling(api):
        if update.message and update.message.text:
            api.send_json(update.message.reply_text(update.message.text))
"""

from telbot.backends import AsyncHttpBackend, HttpBackend, RequestsBackend, ThreadedBackend
from telbot.client import Api, AsyncApi
from telbot.exceptions import SerializationError, TelbotError, TelegramError, TransportError
from telbot.inputs import InputFile, InputFileVariant
from telbot.models import ChatId, ParseMode, Update, UpdateKind
from telbot.polling import AsyncPolling, Polling, PollingState
from telbot.webhook import parse_update

__all__ = [
    "Api",
    "AsyncApi",
    "AsyncHttpBackend",
    "AsyncPolling",
    "ChatId",
    "HttpBackend",
    "InputFile",
    "InputFileVariant",
    "ParseMode",
    "Polling",
    "PollingState",
    "RequestsBackend",
    "SerializationError",
    "TelbotError",
    "TelegramError",
    "ThreadedBackend",
    "TransportError",
    "Update",
    "UpdateKind",
    "parse_update",
]

__version__ = "0.3.0"
