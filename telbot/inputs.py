"""Outbound-only value types: uploads, input media, inline results and scopes.

These objects are only ever sent to the Bot API.  :class:`InputFile` is an
inline upload; wherever the API accepts "a file", a request field is typed
:data:`InputFileVariant` and takes either an ``InputFile`` or a string
(a ``file_id`` already on Telegram's servers, or an HTTP URL).
"""

import mimetypes
import os
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Tuple, Type, Union, get_args

from pydantic import (
    Discriminator,
    Field,
    PlainSerializer,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
    model_validator,
)

from telbot.models import (
    InlineKeyboardMarkup,
    LabeledPrice,
    MessageEntity,
    ParseMode,
    TelegramModel,
)


# ------------------------------------------------------------------
#  Files
# ------------------------------------------------------------------


class InputFile(TelegramModel):
    """In-memory file to upload.

    Encodes as ``""`` inside a JSON body; its bytes only travel as a part of
    a ``multipart/form-data`` body, named after the request field holding it.
    """

    name: str
    data: bytes = Field(repr=False)
    mime: str = "application/octet-stream"

    def __init__(self, name: str, data: bytes, mime: str = "application/octet-stream", **extra: Any) -> None:
        super().__init__(name=name, data=data, mime=mime, **extra)

    @classmethod
    def from_path(cls, path: str, mime: Optional[str] = None) -> "InputFile":
        """Read *path* from disk, guessing the MIME type from its extension."""
        with open(path, "rb") as handle:
            data = handle.read()
        guessed = mime or mimetypes.guess_type(path)[0] or "application/octet-stream"
        return cls(os.path.basename(path), data, guessed)


def _attachment_value(value: Any) -> Any:
    return "" if isinstance(value, InputFile) else value


# An upload leaves an empty placeholder in the JSON body; ids and URLs travel as-is.
InputFileVariant = Annotated[Union[InputFile, str], PlainSerializer(_attachment_value, return_type=str)]
# Fields that only accept a fresh upload.
InputFileUpload = Annotated[InputFile, PlainSerializer(_attachment_value, return_type=str)]


# ------------------------------------------------------------------
#  Input media (sendMediaGroup / editMessageMedia)
# ------------------------------------------------------------------


class _InputMediaBase(TelegramModel):
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None

    def __init__(self, media: str, **data: Any) -> None:
        super().__init__(media=media, **data)


class InputMediaPhoto(_InputMediaBase):
    type: Literal["photo"] = "photo"


class InputMediaVideo(_InputMediaBase):
    type: Literal["video"] = "video"
    thumb: Optional[InputFileVariant] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(_InputMediaBase):
    type: Literal["animation"] = "animation"
    thumb: Optional[InputFileVariant] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(_InputMediaBase):
    type: Literal["audio"] = "audio"
    thumb: Optional[InputFileVariant] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(_InputMediaBase):
    type: Literal["document"] = "document"
    thumb: Optional[InputFileVariant] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = Annotated[
    Union[InputMediaPhoto, InputMediaVideo, InputMediaAnimation, InputMediaAudio, InputMediaDocument],
    Field(discriminator="type"),
]


# ------------------------------------------------------------------
#  Input message content (inline results)
# ------------------------------------------------------------------


class InputTextMessageContent(TelegramModel):
    message_text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(TelegramModel):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(TelegramModel):
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(TelegramModel):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InputInvoiceMessageContent(TelegramModel):
    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


# Checked in order: a venue also carries coordinates, an invoice also has a title.
_CONTENT_MARKERS = (
    ("currency", "invoice"),
    ("address", "venue"),
    ("phone_number", "contact"),
    ("latitude", "location"),
    ("message_text", "text"),
)


def _has_field(value: Any, key: str) -> bool:
    if isinstance(value, dict):
        return key in value
    return getattr(value, key, None) is not None


def _content_kind(value: Any) -> Optional[str]:
    return next((kind for key, kind in _CONTENT_MARKERS if _has_field(value, key)), None)


# Untagged on the wire; told apart by the fields present.
InputMessageContent = Annotated[
    Union[
        Annotated[InputInvoiceMessageContent, Tag("invoice")],
        Annotated[InputVenueMessageContent, Tag("venue")],
        Annotated[InputContactMessageContent, Tag("contact")],
        Annotated[InputLocationMessageContent, Tag("location")],
        Annotated[InputTextMessageContent, Tag("text")],
    ],
    Discriminator(_content_kind),
]


# ------------------------------------------------------------------
#  Inline query results
# ------------------------------------------------------------------


class InlineQueryResultKind(TelegramModel):
    """Content of an inline query result, without its ``id``.

    Each subclass fixes the wire ``type``; cached variants share the type of
    their non-cached counterpart and are told apart by a ``*_file_id`` field.
    """

    result_type: ClassVar[str]

    def with_id(self, id: str) -> "InlineQueryResult":
        """Wrap this content into a result identified by *id*."""
        return InlineQueryResult(id=id, kind=self)


class _CaptionedKind(InlineQueryResultKind):
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class InlineQueryResultArticle(InlineQueryResultKind):
    result_type: ClassVar[str] = "article"

    title: str
    input_message_content: InputMessageContent
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultPhoto(_CaptionedKind):
    result_type: ClassVar[str] = "photo"

    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultGif(_CaptionedKind):
    result_type: ClassVar[str] = "gif"

    gif_url: str
    thumb_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultMpeg4Gif(_CaptionedKind):
    result_type: ClassVar[str] = "mpeg4_gif"

    mpeg4_url: str
    thumb_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVideo(_CaptionedKind):
    result_type: ClassVar[str] = "video"

    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultAudio(_CaptionedKind):
    result_type: ClassVar[str] = "audio"

    audio_url: str
    title: str
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVoice(_CaptionedKind):
    result_type: ClassVar[str] = "voice"

    voice_url: str
    title: str
    voice_duration: Optional[int] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultDocument(_CaptionedKind):
    result_type: ClassVar[str] = "document"

    title: str
    document_url: str
    mime_type: str
    description: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(InlineQueryResultKind):
    result_type: ClassVar[str] = "location"

    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultVenue(InlineQueryResultKind):
    result_type: ClassVar[str] = "venue"

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultContact(InlineQueryResultKind):
    result_type: ClassVar[str] = "contact"

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultGame(InlineQueryResultKind):
    result_type: ClassVar[str] = "game"

    game_short_name: str


class InlineQueryResultCachedPhoto(_CaptionedKind):
    result_type: ClassVar[str] = "photo"

    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedGif(_CaptionedKind):
    result_type: ClassVar[str] = "gif"

    gif_file_id: str
    title: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedMpeg4Gif(_CaptionedKind):
    result_type: ClassVar[str] = "mpeg4_gif"

    mpeg4_file_id: str
    title: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedSticker(InlineQueryResultKind):
    result_type: ClassVar[str] = "sticker"

    sticker_file_id: str
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedDocument(_CaptionedKind):
    result_type: ClassVar[str] = "document"

    title: str
    document_file_id: str
    description: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVideo(_CaptionedKind):
    result_type: ClassVar[str] = "video"

    video_file_id: str
    title: str
    description: Optional[str] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVoice(_CaptionedKind):
    result_type: ClassVar[str] = "voice"

    voice_file_id: str
    title: str
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedAudio(_CaptionedKind):
    result_type: ClassVar[str] = "audio"

    audio_file_id: str
    input_message_content: Optional[InputMessageContent] = None


AnyInlineQueryResultKind = Union[
    InlineQueryResultArticle,
    InlineQueryResultPhoto,
    InlineQueryResultGif,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultVideo,
    InlineQueryResultAudio,
    InlineQueryResultVoice,
    InlineQueryResultDocument,
    InlineQueryResultLocation,
    InlineQueryResultVenue,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedGif,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedVideo,
    InlineQueryResultCachedVoice,
    InlineQueryResultCachedAudio,
]


def _is_cached(kind_cls: Type[InlineQueryResultKind]) -> bool:
    return any(name.endswith("_file_id") for name in kind_cls.model_fields)


_RESULT_KINDS: Dict[Tuple[str, bool], Type[InlineQueryResultKind]] = {
    (kind_cls.result_type, _is_cached(kind_cls)): kind_cls
    for kind_cls in get_args(AnyInlineQueryResultKind)
}


class InlineQueryResult(TelegramModel):
    """One result of an inline query.

    On the wire the kind's fields are flattened next to ``id`` and
    ``reply_markup``, and ``type`` is derived from the kind::

        InlineQueryResultArticle(
            title="Hello",
            input_message_content=InputTextMessageContent(message_text="hi"),
        ).with_id("x")
    """

    id: str
    kind: AnyInlineQueryResultKind
    reply_markup: Optional[InlineKeyboardMarkup] = None

    @model_validator(mode="before")
    @classmethod
    def _split_kind(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "kind" in data or "type" not in data:
            return data
        fields = dict(data)
        result_type = fields.pop("type")
        outer = {key: fields.pop(key) for key in ("id", "reply_markup") if key in fields}
        cached = any(key.endswith("_file_id") for key in fields)
        kind_cls = _RESULT_KINDS.get((result_type, cached))
        if kind_cls is None:
            raise ValueError(f"unknown inline query result type {result_type!r}")
        outer["kind"] = kind_cls.model_validate(fields)
        return outer

    @model_serializer(mode="wrap")
    def _flatten_kind(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        kind = data.pop("kind")
        flattened = {"type": self.kind.result_type, "id": data.pop("id")}
        flattened.update(kind)
        flattened.update(data)
        return flattened

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "InlineQueryResult":
        self.reply_markup = reply_markup
        return self


# ------------------------------------------------------------------
#  Bot command scopes
# ------------------------------------------------------------------


class BotCommandScopeDefault(TelegramModel):
    type: Literal["default"] = "default"


class BotCommandScopeAllPrivateChats(TelegramModel):
    type: Literal["all_private_chats"] = "all_private_chats"


class BotCommandScopeAllGroupChats(TelegramModel):
    type: Literal["all_group_chats"] = "all_group_chats"


class BotCommandScopeAllChatAdministrators(TelegramModel):
    type: Literal["all_chat_administrators"] = "all_chat_administrators"


class BotCommandScopeChat(TelegramModel):
    type: Literal["chat"] = "chat"
    chat_id: Union[int, str]


class BotCommandScopeChatAdministrators(TelegramModel):
    type: Literal["chat_administrators"] = "chat_administrators"
    chat_id: Union[int, str]


class BotCommandScopeChatMember(TelegramModel):
    type: Literal["chat_member"] = "chat_member"
    chat_id: Union[int, str]
    user_id: int


BotCommandScope = Annotated[
    Union[
        BotCommandScopeDefault,
        BotCommandScopeAllPrivateChats,
        BotCommandScopeAllGroupChats,
        BotCommandScopeAllChatAdministrators,
        BotCommandScopeChat,
        BotCommandScopeChatAdministrators,
        BotCommandScopeChatMember,
    ],
    Field(discriminator="type"),
]


# ------------------------------------------------------------------
#  Payments
# ------------------------------------------------------------------


class ShippingOption(TelegramModel):
    id: str
    title: str
    prices: List[LabeledPrice]
