"""Request contracts shared by every Bot API method.

A request is a pydantic model whose fields are the method's parameters.
Required parameters are positional constructor arguments; optional ones are
set through chainable ``with_*`` setters::

    SendMessage(chat_id, "hello").with_parse_mode(ParseMode.HTML).reply_to(42)

Three layers mirror what the execution core needs to know:

* :class:`TelegramMethod`: the wire ``method_name`` and the ``response_type``
  the ``result`` field decodes into.
* :class:`JsonMethod`: may be sent as an ``application/json`` body.
* :class:`FileMethod`: may carry inline uploads, listed by :meth:`files`.
"""

from functools import lru_cache
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import TypeAdapter

from telbot.inputs import InputFile
from telbot.models import ChatId, MessageEntity, ParseMode, ReplyMarkup, TelegramModel

__all__ = [
    "ChatId",
    "TelegramMethod",
    "JsonMethod",
    "FileMethod",
    "ReplyOptions",
    "CaptionOptions",
]

_R = TypeVar("_R", bound="ReplyOptions")
_C = TypeVar("_C", bound="CaptionOptions")


@lru_cache(maxsize=None)
def _result_adapter(method_cls: Type["TelegramMethod"]) -> TypeAdapter:
    return TypeAdapter(method_cls.response_type)


class TelegramMethod(TelegramModel):
    """Base class for every Bot API request."""

    model_config = {"extra": "forbid", "validate_assignment": True}

    method_name: ClassVar[str]
    response_type: ClassVar[Any]

    def parse_result(self, value: Any) -> Any:
        """Validate the envelope's ``result`` against :attr:`response_type`."""
        return _result_adapter(type(self)).validate_python(value)


class JsonMethod(TelegramMethod):
    """A request that can be sent as a JSON body."""


class FileMethod(JsonMethod):
    """A request with fields that may hold an inline :class:`InputFile`."""

    file_fields: ClassVar[Tuple[str, ...]] = ()

    def files(self) -> Optional[Dict[str, InputFile]]:
        """Map field name to upload for every field holding an ``InputFile``.

        Returns ``None`` when nothing needs to be uploaded, in which case the
        request can travel as plain JSON.
        """
        uploads = {}
        for name in self.file_fields:
            value = getattr(self, name)
            if isinstance(value, InputFile):
                uploads[name] = value
        return uploads or None


# ------------------------------------------------------------------
#  Option groups shared by the send* methods
# ------------------------------------------------------------------


class ReplyOptions(TelegramMethod):
    """Delivery options common to the methods that send a message."""

    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None

    def without_notification(self: _R, value: bool = True) -> _R:
        """Deliver silently."""
        self.disable_notification = value
        return self

    def protected(self: _R, value: bool = True) -> _R:
        """Forbid forwarding and saving of the sent message."""
        self.protect_content = value
        return self

    def reply_to(self: _R, message_id: int) -> _R:
        self.reply_to_message_id = message_id
        return self

    def allow_without_reply(self: _R, value: bool = True) -> _R:
        """Send even if the replied-to message is gone."""
        self.allow_sending_without_reply = value
        return self

    def with_reply_markup(self: _R, reply_markup: ReplyMarkup) -> _R:
        self.reply_markup = reply_markup
        return self


class CaptionOptions(TelegramMethod):
    """Caption fields common to media-sending methods."""

    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None

    def with_caption(self: _C, caption: str) -> _C:
        self.caption = caption
        return self

    def with_parse_mode(self: _C, parse_mode: ParseMode) -> _C:
        self.parse_mode = parse_mode
        return self

    def with_caption_entities(self: _C, entities: List[MessageEntity]) -> _C:
        self.caption_entities = entities
        return self

    def with_caption_entity(self: _C, entity: MessageEntity) -> _C:
        self.caption_entities = [*(self.caption_entities or []), entity]
        return self
