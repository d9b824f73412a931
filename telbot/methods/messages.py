"""Sending, editing and deleting messages."""

from typing import ClassVar, List, Optional, Union

from pydantic import model_validator

from telbot.inputs import InputFileVariant, InputMedia
from telbot.methods.base import CaptionOptions, ChatId, FileMethod, JsonMethod, ReplyOptions
from telbot.models import (
    ChatAction,
    InlineKeyboardMarkup,
    Message,
    MessageEntity,
    MessageId,
    ParseMode,
    Poll,
    PollType,
)

EditResult = Union[Message, bool]
"""Edits of bot-sent messages return the message; inline messages return ``True``."""


# ------------------------------------------------------------------
#  Text, forward and copy
# ------------------------------------------------------------------


class SendMessage(ReplyOptions, JsonMethod):
    method_name: ClassVar[str] = "sendMessage"
    response_type: ClassVar = Message

    chat_id: ChatId
    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None

    def __init__(self, chat_id: ChatId, text: str, **data) -> None:
        super().__init__(chat_id=chat_id, text=text, **data)

    def with_parse_mode(self, parse_mode: ParseMode) -> "SendMessage":
        self.parse_mode = parse_mode
        return self

    def with_entities(self, entities: List[MessageEntity]) -> "SendMessage":
        self.entities = entities
        return self

    def with_entity(self, entity: MessageEntity) -> "SendMessage":
        self.entities = [*(self.entities or []), entity]
        return self

    def with_disable_web_page_preview(self, value: bool = True) -> "SendMessage":
        self.disable_web_page_preview = value
        return self


class ForwardMessage(JsonMethod):
    method_name: ClassVar[str] = "forwardMessage"
    response_type: ClassVar = Message

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None

    def __init__(self, chat_id: ChatId, from_chat_id: ChatId, message_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id, **data)

    def without_notification(self, value: bool = True) -> "ForwardMessage":
        self.disable_notification = value
        return self

    def protected(self, value: bool = True) -> "ForwardMessage":
        self.protect_content = value
        return self


class CopyMessage(CaptionOptions, ReplyOptions, JsonMethod):
    """Copy a message without a link to the original; returns :class:`MessageId`."""

    method_name: ClassVar[str] = "copyMessage"
    response_type: ClassVar = MessageId

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int

    def __init__(self, chat_id: ChatId, from_chat_id: ChatId, message_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, from_chat_id=from_chat_id, message_id=message_id, **data)


# ------------------------------------------------------------------
#  Media
# ------------------------------------------------------------------


class SendPhoto(CaptionOptions, ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendPhoto"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("photo",)

    chat_id: ChatId
    photo: InputFileVariant

    def __init__(self, chat_id: ChatId, photo: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, photo=photo, **data)


class SendAudio(CaptionOptions, ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendAudio"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("audio", "thumb")

    chat_id: ChatId
    audio: InputFileVariant
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    thumb: Optional[InputFileVariant] = None

    def __init__(self, chat_id: ChatId, audio: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, audio=audio, **data)

    def with_duration(self, duration: int) -> "SendAudio":
        self.duration = duration
        return self

    def with_performer(self, performer: str) -> "SendAudio":
        self.performer = performer
        return self

    def with_title(self, title: str) -> "SendAudio":
        self.title = title
        return self

    def with_thumb(self, thumb: InputFileVariant) -> "SendAudio":
        self.thumb = thumb
        return self


class SendDocument(CaptionOptions, ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendDocument"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("document", "thumb")

    chat_id: ChatId
    document: InputFileVariant
    thumb: Optional[InputFileVariant] = None
    disable_content_type_detection: Optional[bool] = None

    def __init__(self, chat_id: ChatId, document: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, document=document, **data)

    def with_thumb(self, thumb: InputFileVariant) -> "SendDocument":
        self.thumb = thumb
        return self

    def with_disable_content_type_detection(self, value: bool = True) -> "SendDocument":
        self.disable_content_type_detection = value
        return self


class SendVideo(CaptionOptions, ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendVideo"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("video", "thumb")

    chat_id: ChatId
    video: InputFileVariant
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFileVariant] = None
    supports_streaming: Optional[bool] = None

    def __init__(self, chat_id: ChatId, video: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, video=video, **data)

    def with_duration(self, duration: int) -> "SendVideo":
        self.duration = duration
        return self

    def with_dimensions(self, width: int, height: int) -> "SendVideo":
        self.width = width
        self.height = height
        return self

    def with_thumb(self, thumb: InputFileVariant) -> "SendVideo":
        self.thumb = thumb
        return self

    def with_supports_streaming(self, value: bool = True) -> "SendVideo":
        self.supports_streaming = value
        return self


class SendAnimation(CaptionOptions, ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendAnimation"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("animation", "thumb")

    chat_id: ChatId
    animation: InputFileVariant
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[InputFileVariant] = None

    def __init__(self, chat_id: ChatId, animation: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, animation=animation, **data)

    def with_duration(self, duration: int) -> "SendAnimation":
        self.duration = duration
        return self

    def with_dimensions(self, width: int, height: int) -> "SendAnimation":
        self.width = width
        self.height = height
        return self

    def with_thumb(self, thumb: InputFileVariant) -> "SendAnimation":
        self.thumb = thumb
        return self


class SendVoice(CaptionOptions, ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendVoice"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("voice",)

    chat_id: ChatId
    voice: InputFileVariant
    duration: Optional[int] = None

    def __init__(self, chat_id: ChatId, voice: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, voice=voice, **data)

    def with_duration(self, duration: int) -> "SendVoice":
        self.duration = duration
        return self


class SendVideoNote(ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendVideoNote"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("video_note", "thumb")

    chat_id: ChatId
    video_note: InputFileVariant
    duration: Optional[int] = None
    length: Optional[int] = None
    thumb: Optional[InputFileVariant] = None

    def __init__(self, chat_id: ChatId, video_note: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, video_note=video_note, **data)

    def with_duration(self, duration: int) -> "SendVideoNote":
        self.duration = duration
        return self

    def with_length(self, length: int) -> "SendVideoNote":
        self.length = length
        return self

    def with_thumb(self, thumb: InputFileVariant) -> "SendVideoNote":
        self.thumb = thumb
        return self


class SendMediaGroup(JsonMethod):
    """Send 2-10 items as an album; returns ``List[Message]``.

    Each item references its media by ``file_id``, URL or ``attach://`` name.
    """

    method_name: ClassVar[str] = "sendMediaGroup"
    response_type: ClassVar = List[Message]

    chat_id: ChatId
    media: List[InputMedia]
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None

    def __init__(self, chat_id: ChatId, media: Optional[List[InputMedia]] = None, **data) -> None:
        super().__init__(chat_id=chat_id, media=media or [], **data)

    def with_media(self, media: InputMedia) -> "SendMediaGroup":
        self.media = [*self.media, media]
        return self

    def without_notification(self, value: bool = True) -> "SendMediaGroup":
        self.disable_notification = value
        return self

    def protected(self, value: bool = True) -> "SendMediaGroup":
        self.protect_content = value
        return self

    def reply_to(self, message_id: int) -> "SendMediaGroup":
        self.reply_to_message_id = message_id
        return self

    def allow_without_reply(self, value: bool = True) -> "SendMediaGroup":
        self.allow_sending_without_reply = value
        return self


# ------------------------------------------------------------------
#  Locations, venues, contacts, polls, dice
# ------------------------------------------------------------------


class SendLocation(ReplyOptions, JsonMethod):
    method_name: ClassVar[str] = "sendLocation"
    response_type: ClassVar = Message

    chat_id: ChatId
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None

    def __init__(self, chat_id: ChatId, latitude: float, longitude: float, **data) -> None:
        super().__init__(chat_id=chat_id, latitude=latitude, longitude=longitude, **data)

    def with_horizontal_accuracy(self, accuracy: float) -> "SendLocation":
        self.horizontal_accuracy = accuracy
        return self

    def with_live_period(self, live_period: int) -> "SendLocation":
        """Keep the location live for *live_period* seconds (60-86400)."""
        self.live_period = live_period
        return self

    def with_heading(self, heading: int) -> "SendLocation":
        self.heading = heading
        return self

    def with_proximity_alert_radius(self, radius: int) -> "SendLocation":
        self.proximity_alert_radius = radius
        return self


class _EditTarget(JsonMethod):
    """Address of the message to edit: a chat message or an inline message."""

    chat_id: Optional[ChatId] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_target(self) -> "_EditTarget":
        in_chat = self.chat_id is not None and self.message_id is not None
        inline = self.inline_message_id is not None
        if in_chat == inline:
            raise ValueError("edit needs either chat_id and message_id, or inline_message_id")
        return self


class EditMessageLiveLocation(_EditTarget):
    method_name: ClassVar[str] = "editMessageLiveLocation"
    response_type: ClassVar = EditResult

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    @classmethod
    def new(cls, chat_id: ChatId, message_id: int, latitude: float, longitude: float) -> "EditMessageLiveLocation":
        return cls(chat_id=chat_id, message_id=message_id, latitude=latitude, longitude=longitude)

    @classmethod
    def new_inline(cls, inline_message_id: str, latitude: float, longitude: float) -> "EditMessageLiveLocation":
        return cls(inline_message_id=inline_message_id, latitude=latitude, longitude=longitude)

    def with_horizontal_accuracy(self, accuracy: float) -> "EditMessageLiveLocation":
        self.horizontal_accuracy = accuracy
        return self

    def with_heading(self, heading: int) -> "EditMessageLiveLocation":
        self.heading = heading
        return self

    def with_proximity_alert_radius(self, radius: int) -> "EditMessageLiveLocation":
        self.proximity_alert_radius = radius
        return self

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "EditMessageLiveLocation":
        self.reply_markup = reply_markup
        return self


class StopMessageLiveLocation(_EditTarget):
    method_name: ClassVar[str] = "stopMessageLiveLocation"
    response_type: ClassVar = EditResult

    reply_markup: Optional[InlineKeyboardMarkup] = None

    @classmethod
    def new(cls, chat_id: ChatId, message_id: int) -> "StopMessageLiveLocation":
        return cls(chat_id=chat_id, message_id=message_id)

    @classmethod
    def new_inline(cls, inline_message_id: str) -> "StopMessageLiveLocation":
        return cls(inline_message_id=inline_message_id)

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "StopMessageLiveLocation":
        self.reply_markup = reply_markup
        return self


class SendVenue(ReplyOptions, JsonMethod):
    method_name: ClassVar[str] = "sendVenue"
    response_type: ClassVar = Message

    chat_id: ChatId
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None

    def __init__(self, chat_id: ChatId, latitude: float, longitude: float, title: str, address: str, **data) -> None:
        super().__init__(
            chat_id=chat_id, latitude=latitude, longitude=longitude, title=title, address=address, **data
        )

    def with_foursquare(self, foursquare_id: str, foursquare_type: Optional[str] = None) -> "SendVenue":
        self.foursquare_id = foursquare_id
        self.foursquare_type = foursquare_type
        return self

    def with_google_place(self, google_place_id: str, google_place_type: Optional[str] = None) -> "SendVenue":
        self.google_place_id = google_place_id
        self.google_place_type = google_place_type
        return self


class SendContact(ReplyOptions, JsonMethod):
    method_name: ClassVar[str] = "sendContact"
    response_type: ClassVar = Message

    chat_id: ChatId
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None

    def __init__(self, chat_id: ChatId, phone_number: str, first_name: str, **data) -> None:
        super().__init__(chat_id=chat_id, phone_number=phone_number, first_name=first_name, **data)

    def with_last_name(self, last_name: str) -> "SendContact":
        self.last_name = last_name
        return self

    def with_vcard(self, vcard: str) -> "SendContact":
        self.vcard = vcard
        return self


class SendPoll(ReplyOptions, JsonMethod):
    """Send a native poll.

    Use :meth:`new_regular` or :meth:`new_quiz`.  ``open_period`` and
    ``close_date`` are mutually exclusive; each setter clears the other.
    """

    method_name: ClassVar[str] = "sendPoll"
    response_type: ClassVar = Message

    chat_id: ChatId
    question: str
    options: List[str]
    is_anonymous: Optional[bool] = None
    type: Optional[PollType] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_parse_mode: Optional[ParseMode] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None

    @model_validator(mode="after")
    def _check_poll(self) -> "SendPoll":
        if self.open_period is not None and self.close_date is not None:
            raise ValueError("open_period and close_date are mutually exclusive")
        if self.type is PollType.QUIZ and self.correct_option_id is None:
            raise ValueError("quiz poll requires correct_option_id")
        return self

    @classmethod
    def new_regular(cls, chat_id: ChatId, question: str, options: List[str]) -> "SendPoll":
        return cls(chat_id=chat_id, question=question, options=options, type=PollType.REGULAR)

    @classmethod
    def new_quiz(cls, chat_id: ChatId, question: str, options: List[str], correct_option_id: int) -> "SendPoll":
        return cls(
            chat_id=chat_id,
            question=question,
            options=options,
            type=PollType.QUIZ,
            correct_option_id=correct_option_id,
        )

    def with_option(self, option: str) -> "SendPoll":
        self.options = [*self.options, option]
        return self

    def with_is_anonymous(self, value: bool = True) -> "SendPoll":
        self.is_anonymous = value
        return self

    def with_allows_multiple_answers(self, value: bool = True) -> "SendPoll":
        self.allows_multiple_answers = value
        return self

    def with_explanation(self, explanation: str) -> "SendPoll":
        self.explanation = explanation
        return self

    def with_explanation_parse_mode(self, parse_mode: ParseMode) -> "SendPoll":
        self.explanation_parse_mode = parse_mode
        return self

    def with_explanation_entity(self, entity: MessageEntity) -> "SendPoll":
        self.explanation_entities = [*(self.explanation_entities or []), entity]
        return self

    def with_open_period(self, open_period: int) -> "SendPoll":
        self.close_date = None
        self.open_period = open_period
        return self

    def with_close_date(self, close_date: int) -> "SendPoll":
        self.open_period = None
        self.close_date = close_date
        return self

    def with_is_closed(self, value: bool = True) -> "SendPoll":
        self.is_closed = value
        return self


class SendDice(ReplyOptions, JsonMethod):
    method_name: ClassVar[str] = "sendDice"
    response_type: ClassVar = Message

    chat_id: ChatId
    emoji: Optional[str] = None

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)

    def with_emoji(self, emoji: str) -> "SendDice":
        """One of 🎲, 🎯, 🏀, ⚽, 🎳 or 🎰."""
        self.emoji = emoji
        return self


class SendChatAction(JsonMethod):
    method_name: ClassVar[str] = "sendChatAction"
    response_type: ClassVar = bool

    chat_id: ChatId
    action: ChatAction

    def __init__(self, chat_id: ChatId, action: ChatAction, **data) -> None:
        super().__init__(chat_id=chat_id, action=action, **data)


# ------------------------------------------------------------------
#  Editing and deleting
# ------------------------------------------------------------------


class EditMessageText(_EditTarget):
    method_name: ClassVar[str] = "editMessageText"
    response_type: ClassVar = EditResult

    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    @classmethod
    def new(cls, chat_id: ChatId, message_id: int, text: str) -> "EditMessageText":
        return cls(chat_id=chat_id, message_id=message_id, text=text)

    @classmethod
    def new_inline(cls, inline_message_id: str, text: str) -> "EditMessageText":
        return cls(inline_message_id=inline_message_id, text=text)

    def with_parse_mode(self, parse_mode: ParseMode) -> "EditMessageText":
        self.parse_mode = parse_mode
        return self

    def with_entity(self, entity: MessageEntity) -> "EditMessageText":
        self.entities = [*(self.entities or []), entity]
        return self

    def with_disable_web_page_preview(self, value: bool = True) -> "EditMessageText":
        self.disable_web_page_preview = value
        return self

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "EditMessageText":
        self.reply_markup = reply_markup
        return self


class EditMessageCaption(_EditTarget):
    method_name: ClassVar[str] = "editMessageCaption"
    response_type: ClassVar = EditResult

    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    @classmethod
    def new(cls, chat_id: ChatId, message_id: int) -> "EditMessageCaption":
        return cls(chat_id=chat_id, message_id=message_id)

    @classmethod
    def new_inline(cls, inline_message_id: str) -> "EditMessageCaption":
        return cls(inline_message_id=inline_message_id)

    def with_caption(self, caption: str) -> "EditMessageCaption":
        self.caption = caption
        return self

    def with_parse_mode(self, parse_mode: ParseMode) -> "EditMessageCaption":
        self.parse_mode = parse_mode
        return self

    def with_caption_entity(self, entity: MessageEntity) -> "EditMessageCaption":
        self.caption_entities = [*(self.caption_entities or []), entity]
        return self

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "EditMessageCaption":
        self.reply_markup = reply_markup
        return self


class EditMessageMedia(_EditTarget):
    method_name: ClassVar[str] = "editMessageMedia"
    response_type: ClassVar = EditResult

    media: InputMedia
    reply_markup: Optional[InlineKeyboardMarkup] = None

    @classmethod
    def new(cls, chat_id: ChatId, message_id: int, media: InputMedia) -> "EditMessageMedia":
        return cls(chat_id=chat_id, message_id=message_id, media=media)

    @classmethod
    def new_inline(cls, inline_message_id: str, media: InputMedia) -> "EditMessageMedia":
        return cls(inline_message_id=inline_message_id, media=media)

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "EditMessageMedia":
        self.reply_markup = reply_markup
        return self


class EditMessageReplyMarkup(_EditTarget):
    method_name: ClassVar[str] = "editMessageReplyMarkup"
    response_type: ClassVar = EditResult

    reply_markup: Optional[InlineKeyboardMarkup] = None

    @classmethod
    def new(cls, chat_id: ChatId, message_id: int) -> "EditMessageReplyMarkup":
        return cls(chat_id=chat_id, message_id=message_id)

    @classmethod
    def new_inline(cls, inline_message_id: str) -> "EditMessageReplyMarkup":
        return cls(inline_message_id=inline_message_id)

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "EditMessageReplyMarkup":
        self.reply_markup = reply_markup
        return self


class StopPoll(JsonMethod):
    method_name: ClassVar[str] = "stopPoll"
    response_type: ClassVar = Poll

    chat_id: ChatId
    message_id: int
    reply_markup: Optional[InlineKeyboardMarkup] = None

    def __init__(self, chat_id: ChatId, message_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, message_id=message_id, **data)

    def with_reply_markup(self, reply_markup: InlineKeyboardMarkup) -> "StopPoll":
        self.reply_markup = reply_markup
        return self


class DeleteMessage(JsonMethod):
    method_name: ClassVar[str] = "deleteMessage"
    response_type: ClassVar = bool

    chat_id: ChatId
    message_id: int

    def __init__(self, chat_id: ChatId, message_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, message_id=message_id, **data)
