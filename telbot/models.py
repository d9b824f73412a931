"""Pydantic data models for objects exchanged with the Telegram Bot API.

Every class corresponds to an object of the Bot API.  Field names are the
snake_case wire names; ``from`` is exposed as ``from_field``.  Unknown
fields in responses are ignored, and :meth:`TelegramModel.to_dict` never
emits optional fields that are unset.

Objects that identify a chat, a user or a message carry shortcut methods
that build the matching request (``chat.send_message("hi")``); the request
still has to be sent through :class:`telbot.Api` or :class:`telbot.AsyncApi`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Discriminator, Field, Tag, model_validator

if TYPE_CHECKING:
    from telbot import methods
    from telbot.inputs import InlineQueryResult, InputFile, InputFileVariant, InputMedia, ShippingOption


ChatId = Union[int, str]
"""Numeric chat identifier or ``@channelusername``; emitted bare on the wire."""


class TelegramModel(BaseModel):
    """Base class for every Telegram object."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire form of this object, omitting unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ------------------------------------------------------------------
#  Enumerations
# ------------------------------------------------------------------


_MARKDOWN_V2_SPECIALS = "_*[]()~`>#+-=|{}.!"
_MARKDOWN_SPECIALS = "_*`["


class ParseMode(str, Enum):
    """Formatting dialect for message text and captions."""

    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"
    MARKDOWN = "Markdown"

    def escape(self, text: str) -> str:
        """Escape *text* so it renders literally in this dialect."""
        if self is ParseMode.HTML:
            return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        specials = _MARKDOWN_V2_SPECIALS if self is ParseMode.MARKDOWN_V2 else _MARKDOWN_SPECIALS
        return "".join("\\" + char if char in specials else char for char in text)


class ChatType(str, Enum):
    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


class ChatAction(str, Enum):
    """Activity shown to users by ``sendChatAction``."""

    TYPING = "typing"
    UPLOAD_PHOTO = "upload_photo"
    RECORD_VIDEO = "record_video"
    UPLOAD_VIDEO = "upload_video"
    RECORD_VOICE = "record_voice"
    UPLOAD_VOICE = "upload_voice"
    UPLOAD_DOCUMENT = "upload_document"
    CHOOSE_STICKER = "choose_sticker"
    FIND_LOCATION = "find_location"
    RECORD_VIDEO_NOTE = "record_video_note"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


class MessageEntityType(str, Enum):
    MENTION = "mention"
    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    PHONE_NUMBER = "phone_number"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"


class PollType(str, Enum):
    REGULAR = "regular"
    QUIZ = "quiz"


class MaskPoint(str, Enum):
    """Part of the face a mask is placed on."""

    FOREHEAD = "forehead"
    EYES = "eyes"
    MOUTH = "mouth"
    CHIN = "chin"


class MessageKind(str, Enum):
    """Content carried by a :class:`Message`, named after its payload field."""

    TEXT = "text"
    ANIMATION = "animation"
    AUDIO = "audio"
    DOCUMENT = "document"
    PHOTO = "photo"
    STICKER = "sticker"
    VIDEO = "video"
    VIDEO_NOTE = "video_note"
    VOICE = "voice"
    CONTACT = "contact"
    DICE = "dice"
    GAME = "game"
    POLL = "poll"
    VENUE = "venue"
    LOCATION = "location"
    NEW_CHAT_MEMBERS = "new_chat_members"
    LEFT_CHAT_MEMBER = "left_chat_member"
    NEW_CHAT_TITLE = "new_chat_title"
    NEW_CHAT_PHOTO = "new_chat_photo"
    DELETE_CHAT_PHOTO = "delete_chat_photo"
    GROUP_CHAT_CREATED = "group_chat_created"
    SUPERGROUP_CHAT_CREATED = "supergroup_chat_created"
    CHANNEL_CHAT_CREATED = "channel_chat_created"
    MESSAGE_AUTO_DELETE_TIMER_CHANGED = "message_auto_delete_timer_changed"
    MIGRATE_TO_CHAT_ID = "migrate_to_chat_id"
    MIGRATE_FROM_CHAT_ID = "migrate_from_chat_id"
    PINNED_MESSAGE = "pinned_message"
    INVOICE = "invoice"
    SUCCESSFUL_PAYMENT = "successful_payment"
    CONNECTED_WEBSITE = "connected_website"
    PASSPORT_DATA = "passport_data"
    PROXIMITY_ALERT_TRIGGERED = "proximity_alert_triggered"
    VOICE_CHAT_SCHEDULED = "voice_chat_scheduled"
    VOICE_CHAT_STARTED = "voice_chat_started"
    VOICE_CHAT_ENDED = "voice_chat_ended"
    VOICE_CHAT_PARTICIPANTS_INVITED = "voice_chat_participants_invited"


class UpdateKind(str, Enum):
    """Payload carried by an :class:`Update`, named after its field."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"


class ButtonAction(str, Enum):
    """Action performed by an :class:`InlineKeyboardButton`."""

    URL = "url"
    LOGIN_URL = "login_url"
    CALLBACK_DATA = "callback_data"
    SWITCH_INLINE_QUERY = "switch_inline_query"
    SWITCH_INLINE_QUERY_CURRENT_CHAT = "switch_inline_query_current_chat"
    CALLBACK_GAME = "callback_game"
    PAY = "pay"


# ------------------------------------------------------------------
#  Users and chats
# ------------------------------------------------------------------


class User(TelegramModel):
    """A Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None

    @property
    def full_name(self) -> str:
        if self.last_name:
            return f"{self.first_name} {self.last_name}"
        return self.first_name

    def get_profile_photos(self) -> "methods.GetUserProfilePhotos":
        from telbot.methods import GetUserProfilePhotos
        return GetUserProfilePhotos(self.id)

    def ban_from(self, chat_id: ChatId) -> "methods.BanChatMember":
        from telbot.methods import BanChatMember
        return BanChatMember(chat_id, self.id)

    def unban_from(self, chat_id: ChatId) -> "methods.UnbanChatMember":
        from telbot.methods import UnbanChatMember
        return UnbanChatMember(chat_id, self.id)

    def restrict_from(self, chat_id: ChatId, permissions: ChatPermissions) -> "methods.RestrictChatMember":
        from telbot.methods import RestrictChatMember
        return RestrictChatMember(chat_id, self.id, permissions)

    def promote_from(self, chat_id: ChatId) -> "methods.PromoteChatMember":
        from telbot.methods import PromoteChatMember
        return PromoteChatMember(chat_id, self.id)

    def set_administrator_title_from(self, chat_id: ChatId, custom_title: str) -> "methods.SetChatAdministratorCustomTitle":
        from telbot.methods import SetChatAdministratorCustomTitle
        return SetChatAdministratorCustomTitle(chat_id, self.id, custom_title)

    def approve_join_to(self, chat_id: ChatId) -> "methods.ApproveChatJoinRequest":
        from telbot.methods import ApproveChatJoinRequest
        return ApproveChatJoinRequest(chat_id, self.id)

    def decline_join_to(self, chat_id: ChatId) -> "methods.DeclineChatJoinRequest":
        from telbot.methods import DeclineChatJoinRequest
        return DeclineChatJoinRequest(chat_id, self.id)

    def get_member_from(self, chat_id: ChatId) -> "methods.GetChatMember":
        from telbot.methods import GetChatMember
        return GetChatMember(chat_id, self.id)


class ChatPhoto(TelegramModel):
    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatLocation(TelegramModel):
    location: Location
    address: str


class ChatPermissions(TelegramModel):
    """Actions non-administrator members are allowed to take in a chat.

    Start from ``ChatPermissions()`` (nothing set) and chain the ``allow_*``
    setters::

        ChatPermissions().allow_send_messages().allow_send_polls(False)
    """

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None

    def allow_send_messages(self, value: bool = True) -> ChatPermissions:
        self.can_send_messages = value
        return self

    def allow_send_media_messages(self, value: bool = True) -> ChatPermissions:
        self.can_send_media_messages = value
        return self

    def allow_send_polls(self, value: bool = True) -> ChatPermissions:
        self.can_send_polls = value
        return self

    def allow_send_other_messages(self, value: bool = True) -> ChatPermissions:
        self.can_send_other_messages = value
        return self

    def allow_add_web_page_previews(self, value: bool = True) -> ChatPermissions:
        self.can_add_web_page_previews = value
        return self

    def allow_change_info(self, value: bool = True) -> ChatPermissions:
        self.can_change_info = value
        return self

    def allow_invite_users(self, value: bool = True) -> ChatPermissions:
        self.can_invite_users = value
        return self

    def allow_pin_messages(self, value: bool = True) -> ChatPermissions:
        self.can_pin_messages = value
        return self


class ChatInviteLink(TelegramModel):
    invite_link: str
    creator: User
    creates_join_request: bool
    is_primary: bool
    is_revoked: bool
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    pending_join_request_count: Optional[int] = None


class Chat(TelegramModel):
    """A private chat, group, supergroup or channel.

    The shortcut methods build requests addressed to this chat.
    """

    id: int
    type: ChatType
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    has_private_forwards: Optional[bool] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    message_auto_delete_time: Optional[int] = None
    has_protected_content: Optional[bool] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional[ChatLocation] = None

    # ── sending ──────────────────────────────────────────────────────────

    def send_message(self, text: str) -> "methods.SendMessage":
        from telbot.methods import SendMessage
        return SendMessage(self.id, text)

    def forward_from(self, from_chat_id: ChatId, message_id: int) -> "methods.ForwardMessage":
        from telbot.methods import ForwardMessage
        return ForwardMessage(self.id, from_chat_id, message_id)

    def copy_from(self, from_chat_id: ChatId, message_id: int) -> "methods.CopyMessage":
        from telbot.methods import CopyMessage
        return CopyMessage(self.id, from_chat_id, message_id)

    def send_photo(self, photo: InputFileVariant) -> "methods.SendPhoto":
        from telbot.methods import SendPhoto
        return SendPhoto(self.id, photo)

    def send_audio(self, audio: InputFileVariant) -> "methods.SendAudio":
        from telbot.methods import SendAudio
        return SendAudio(self.id, audio)

    def send_document(self, document: InputFileVariant) -> "methods.SendDocument":
        from telbot.methods import SendDocument
        return SendDocument(self.id, document)

    def send_video(self, video: InputFileVariant) -> "methods.SendVideo":
        from telbot.methods import SendVideo
        return SendVideo(self.id, video)

    def send_animation(self, animation: InputFileVariant) -> "methods.SendAnimation":
        from telbot.methods import SendAnimation
        return SendAnimation(self.id, animation)

    def send_voice(self, voice: InputFileVariant) -> "methods.SendVoice":
        from telbot.methods import SendVoice
        return SendVoice(self.id, voice)

    def send_video_note(self, video_note: InputFileVariant) -> "methods.SendVideoNote":
        from telbot.methods import SendVideoNote
        return SendVideoNote(self.id, video_note)

    def send_media_group(self, media: List[InputMedia]) -> "methods.SendMediaGroup":
        from telbot.methods import SendMediaGroup
        return SendMediaGroup(self.id, media)

    def send_location(self, latitude: float, longitude: float) -> "methods.SendLocation":
        from telbot.methods import SendLocation
        return SendLocation(self.id, latitude, longitude)

    def send_venue(self, latitude: float, longitude: float, title: str, address: str) -> "methods.SendVenue":
        from telbot.methods import SendVenue
        return SendVenue(self.id, latitude, longitude, title, address)

    def send_contact(self, phone_number: str, first_name: str) -> "methods.SendContact":
        from telbot.methods import SendContact
        return SendContact(self.id, phone_number, first_name)

    def send_poll(self, question: str, options: List[str]) -> "methods.SendPoll":
        from telbot.methods import SendPoll
        return SendPoll.new_regular(self.id, question, options)

    def send_quiz(self, question: str, options: List[str], correct_option_id: int) -> "methods.SendPoll":
        from telbot.methods import SendPoll
        return SendPoll.new_quiz(self.id, question, options, correct_option_id)

    def send_dice(self) -> "methods.SendDice":
        from telbot.methods import SendDice
        return SendDice(self.id)

    def send_sticker(self, sticker: InputFileVariant) -> "methods.SendSticker":
        from telbot.methods import SendSticker
        return SendSticker(self.id, sticker)

    def send_game(self, game_short_name: str) -> "methods.SendGame":
        from telbot.methods import SendGame
        return SendGame(self.id, game_short_name)

    def send_chat_action(self, action: ChatAction) -> "methods.SendChatAction":
        from telbot.methods import SendChatAction
        return SendChatAction(self.id, action)

    # ── editing and deleting ─────────────────────────────────────────────

    def edit_text_of(self, message_id: int, text: str) -> "methods.EditMessageText":
        from telbot.methods import EditMessageText
        return EditMessageText.new(self.id, message_id, text)

    def edit_caption_of(self, message_id: int) -> "methods.EditMessageCaption":
        from telbot.methods import EditMessageCaption
        return EditMessageCaption.new(self.id, message_id)

    def edit_media_of(self, message_id: int, media: InputMedia) -> "methods.EditMessageMedia":
        from telbot.methods import EditMessageMedia
        return EditMessageMedia.new(self.id, message_id, media)

    def edit_reply_markup_of(self, message_id: int) -> "methods.EditMessageReplyMarkup":
        from telbot.methods import EditMessageReplyMarkup
        return EditMessageReplyMarkup.new(self.id, message_id)

    def stop_poll(self, message_id: int) -> "methods.StopPoll":
        from telbot.methods import StopPoll
        return StopPoll(self.id, message_id)

    def delete_message(self, message_id: int) -> "methods.DeleteMessage":
        from telbot.methods import DeleteMessage
        return DeleteMessage(self.id, message_id)

    # ── members ──────────────────────────────────────────────────────────

    def ban(self, user_id: int) -> "methods.BanChatMember":
        from telbot.methods import BanChatMember
        return BanChatMember(self.id, user_id)

    def unban(self, user_id: int) -> "methods.UnbanChatMember":
        from telbot.methods import UnbanChatMember
        return UnbanChatMember(self.id, user_id)

    def restrict(self, user_id: int, permissions: ChatPermissions) -> "methods.RestrictChatMember":
        from telbot.methods import RestrictChatMember
        return RestrictChatMember(self.id, user_id, permissions)

    def promote(self, user_id: int) -> "methods.PromoteChatMember":
        from telbot.methods import PromoteChatMember
        return PromoteChatMember(self.id, user_id)

    def set_administrator_title(self, user_id: int, custom_title: str) -> "methods.SetChatAdministratorCustomTitle":
        from telbot.methods import SetChatAdministratorCustomTitle
        return SetChatAdministratorCustomTitle(self.id, user_id, custom_title)

    def set_permissions(self, permissions: ChatPermissions) -> "methods.SetChatPermissions":
        from telbot.methods import SetChatPermissions
        return SetChatPermissions(self.id, permissions)

    def approve_join(self, user_id: int) -> "methods.ApproveChatJoinRequest":
        from telbot.methods import ApproveChatJoinRequest
        return ApproveChatJoinRequest(self.id, user_id)

    def decline_join(self, user_id: int) -> "methods.DeclineChatJoinRequest":
        from telbot.methods import DeclineChatJoinRequest
        return DeclineChatJoinRequest(self.id, user_id)

    def get_administrators(self) -> "methods.GetChatAdministrators":
        from telbot.methods import GetChatAdministrators
        return GetChatAdministrators(self.id)

    def get_member_count(self) -> "methods.GetChatMemberCount":
        from telbot.methods import GetChatMemberCount
        return GetChatMemberCount(self.id)

    def get_member(self, user_id: int) -> "methods.GetChatMember":
        from telbot.methods import GetChatMember
        return GetChatMember(self.id, user_id)

    # ── invite links ─────────────────────────────────────────────────────

    def export_invite_link(self) -> "methods.ExportChatInviteLink":
        from telbot.methods import ExportChatInviteLink
        return ExportChatInviteLink(self.id)

    def create_invite_link(self) -> "methods.CreateChatInviteLink":
        from telbot.methods import CreateChatInviteLink
        return CreateChatInviteLink(self.id)

    def edit_invite_link(self, invite_link: str) -> "methods.EditChatInviteLink":
        from telbot.methods import EditChatInviteLink
        return EditChatInviteLink(self.id, invite_link)

    def revoke_invite_link(self, invite_link: str) -> "methods.RevokeChatInviteLink":
        from telbot.methods import RevokeChatInviteLink
        return RevokeChatInviteLink(self.id, invite_link)

    # ── chat settings ────────────────────────────────────────────────────

    def set_photo(self, photo: InputFile) -> "methods.SetChatPhoto":
        from telbot.methods import SetChatPhoto
        return SetChatPhoto(self.id, photo)

    def delete_photo(self) -> "methods.DeleteChatPhoto":
        from telbot.methods import DeleteChatPhoto
        return DeleteChatPhoto(self.id)

    def set_title(self, title: str) -> "methods.SetChatTitle":
        from telbot.methods import SetChatTitle
        return SetChatTitle(self.id, title)

    def set_description(self, description: str) -> "methods.SetChatDescription":
        from telbot.methods import SetChatDescription
        return SetChatDescription(self.id, description)

    def remove_description(self) -> "methods.SetChatDescription":
        from telbot.methods import SetChatDescription
        return SetChatDescription.new_empty(self.id)

    def set_sticker_set(self, sticker_set_name: str) -> "methods.SetChatStickerSet":
        from telbot.methods import SetChatStickerSet
        return SetChatStickerSet(self.id, sticker_set_name)

    def delete_sticker_set(self) -> "methods.DeleteChatStickerSet":
        from telbot.methods import DeleteChatStickerSet
        return DeleteChatStickerSet(self.id)

    def pin_message(self, message_id: int) -> "methods.PinChatMessage":
        from telbot.methods import PinChatMessage
        return PinChatMessage(self.id, message_id)

    def unpin_message(self, message_id: int) -> "methods.UnpinChatMessage":
        from telbot.methods import UnpinChatMessage
        return UnpinChatMessage(self.id, message_id)

    def unpin_latest_message(self) -> "methods.UnpinChatMessage":
        from telbot.methods import UnpinChatMessage
        return UnpinChatMessage.new_recent(self.id)

    def unpin_all_messages(self) -> "methods.UnpinAllChatMessages":
        from telbot.methods import UnpinAllChatMessages
        return UnpinAllChatMessages(self.id)

    def leave(self) -> "methods.LeaveChat":
        from telbot.methods import LeaveChat
        return LeaveChat(self.id)

    def get_details(self) -> "methods.GetChat":
        from telbot.methods import GetChat
        return GetChat(self.id)


# ------------------------------------------------------------------
#  Chat members
# ------------------------------------------------------------------


class _ChatMemberBase(TelegramModel):
    user: User

    @property
    def in_chat(self) -> bool:
        """Whether the user is currently a member of the chat."""
        return True


class ChatMemberOwner(_ChatMemberBase):
    """The chat creator; ``creator`` on the wire."""

    status: Literal["creator"] = "creator"
    is_anonymous: bool
    custom_title: Optional[str] = None


class ChatMemberAdministrator(_ChatMemberBase):
    status: Literal["administrator"] = "administrator"
    can_be_edited: bool
    is_anonymous: bool
    can_manage_chat: bool
    can_delete_messages: bool
    can_manage_voice_chats: bool
    can_restrict_members: bool
    can_promote_members: bool
    can_change_info: bool
    can_invite_users: bool
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    custom_title: Optional[str] = None


class ChatMemberMember(_ChatMemberBase):
    status: Literal["member"] = "member"


class ChatMemberRestricted(_ChatMemberBase):
    """A member under restrictions; may or may not still be in the chat."""

    status: Literal["restricted"] = "restricted"
    is_member: bool
    can_change_info: bool
    can_invite_users: bool
    can_pin_messages: bool
    can_send_messages: bool
    can_send_media_messages: bool
    can_send_polls: bool
    can_send_other_messages: bool
    can_add_web_page_previews: bool
    until_date: int

    @property
    def in_chat(self) -> bool:
        return self.is_member

    @property
    def permissions(self) -> ChatPermissions:
        """The restriction flags gathered as :class:`ChatPermissions`."""
        return ChatPermissions(
            can_send_messages=self.can_send_messages,
            can_send_media_messages=self.can_send_media_messages,
            can_send_polls=self.can_send_polls,
            can_send_other_messages=self.can_send_other_messages,
            can_add_web_page_previews=self.can_add_web_page_previews,
            can_change_info=self.can_change_info,
            can_invite_users=self.can_invite_users,
            can_pin_messages=self.can_pin_messages,
        )


class ChatMemberLeft(_ChatMemberBase):
    status: Literal["left"] = "left"

    @property
    def in_chat(self) -> bool:
        return False


class ChatMemberBanned(_ChatMemberBase):
    """A banned user; ``kicked`` on the wire."""

    status: Literal["kicked"] = "kicked"
    until_date: int

    @property
    def in_chat(self) -> bool:
        return False


ChatMember = Annotated[
    Union[
        ChatMemberOwner,
        ChatMemberAdministrator,
        ChatMemberMember,
        ChatMemberRestricted,
        ChatMemberLeft,
        ChatMemberBanned,
    ],
    Field(discriminator="status"),
]


class ChatMemberUpdated(TelegramModel):
    chat: Chat
    from_field: User = Field(alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink] = None


class ChatJoinRequest(TelegramModel):
    chat: Chat
    from_field: User = Field(alias="from")
    date: int
    bio: Optional[str] = None
    invite_link: Optional[ChatInviteLink] = None

    def approve(self) -> "methods.ApproveChatJoinRequest":
        from telbot.methods import ApproveChatJoinRequest
        return ApproveChatJoinRequest(self.chat.id, self.from_field.id)

    def decline(self) -> "methods.DeclineChatJoinRequest":
        from telbot.methods import DeclineChatJoinRequest
        return DeclineChatJoinRequest(self.chat.id, self.from_field.id)


# ------------------------------------------------------------------
#  Message contents
# ------------------------------------------------------------------


class MessageEntity(TelegramModel):
    """A special span of text: command, link, formatting and so on.

    ``offset`` and ``length`` count UTF-16 code units.  ``pre`` entities may
    carry a ``language``, ``text_link`` requires ``url`` and ``text_mention``
    requires ``user``.
    """

    type: MessageEntityType
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None

    @model_validator(mode="after")
    def _check_kind_payload(self) -> MessageEntity:
        if self.type is MessageEntityType.TEXT_LINK and self.url is None:
            raise ValueError("text_link entity requires url")
        if self.type is MessageEntityType.TEXT_MENTION and self.user is None:
            raise ValueError("text_mention entity requires user")
        return self

    @classmethod
    def new(cls, type: MessageEntityType, offset: int, length: int) -> MessageEntity:
        return cls(type=type, offset=offset, length=length)

    @classmethod
    def pre(cls, offset: int, length: int, language: Optional[str] = None) -> MessageEntity:
        return cls(type=MessageEntityType.PRE, offset=offset, length=length, language=language)

    @classmethod
    def text_link(cls, offset: int, length: int, url: str) -> MessageEntity:
        return cls(type=MessageEntityType.TEXT_LINK, offset=offset, length=length, url=url)

    @classmethod
    def text_mention(cls, offset: int, length: int, user: User) -> MessageEntity:
        return cls(type=MessageEntityType.TEXT_MENTION, offset=offset, length=length, user=user)

    def extract(self, text: str) -> str:
        """Return the part of *text* this entity covers."""
        encoded = text.encode("utf-16-le")
        return encoded[self.offset * 2:(self.offset + self.length) * 2].decode("utf-16-le")


class PhotoSize(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramModel):
    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramModel):
    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramModel):
    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramModel):
    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class File(TelegramModel):
    """A file ready to be downloaded via ``https://api.telegram.org/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


class UserProfilePhotos(TelegramModel):
    total_count: int
    photos: List[List[PhotoSize]]


class Contact(TelegramModel):
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramModel):
    emoji: str
    value: int


class PollOption(TelegramModel):
    text: str
    voter_count: int


class PollAnswer(TelegramModel):
    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramModel):
    """A native poll; quiz polls may carry the correct option and an explanation."""

    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: PollType
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Location(TelegramModel):
    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramModel):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class ProximityAlertTriggered(TelegramModel):
    traveler: User
    watcher: User
    distance: int


class MessageAutoDeleteTimerChanged(TelegramModel):
    message_auto_delete_time: int


class VoiceChatScheduled(TelegramModel):
    start_date: int


class VoiceChatStarted(TelegramModel):
    pass


class VoiceChatEnded(TelegramModel):
    duration: int


class VoiceChatParticipantsInvited(TelegramModel):
    users: Optional[List[User]] = None


class MessageId(TelegramModel):
    message_id: int


# ------------------------------------------------------------------
#  Stickers and games
# ------------------------------------------------------------------


class MaskPosition(TelegramModel):
    point: MaskPoint
    x_shift: float
    y_shift: float
    scale: float


class Sticker(TelegramModel):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramModel):
    name: str
    title: str
    is_animated: bool
    contains_masks: bool
    stickers: List[Sticker]
    thumb: Optional[PhotoSize] = None


class CallbackGame(TelegramModel):
    """Placeholder for the game button; encodes as ``{}``."""


class Game(TelegramModel):
    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str] = None
    text_entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None


class GameHighScore(TelegramModel):
    position: int
    user: User
    score: int


# ------------------------------------------------------------------
#  Payments and passport
# ------------------------------------------------------------------


class LabeledPrice(TelegramModel):
    """A price portion in the smallest units of the currency."""

    label: str
    amount: int


class Invoice(TelegramModel):
    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramModel):
    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramModel):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class SuccessfulPayment(TelegramModel):
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class ShippingQuery(TelegramModel):
    id: str
    from_field: User = Field(alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress

    def answer_ok(self, shipping_options: List[ShippingOption]) -> "methods.AnswerShippingQuery":
        from telbot.methods import AnswerShippingQuery
        return AnswerShippingQuery.accept(self.id, shipping_options)

    def answer_error(self, error_message: str) -> "methods.AnswerShippingQuery":
        from telbot.methods import AnswerShippingQuery
        return AnswerShippingQuery.error(self.id, error_message)


class PreCheckoutQuery(TelegramModel):
    id: str
    from_field: User = Field(alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None

    def answer_ok(self) -> "methods.AnswerPreCheckoutQuery":
        from telbot.methods import AnswerPreCheckoutQuery
        return AnswerPreCheckoutQuery.accept(self.id)

    def answer_error(self, error_message: str) -> "methods.AnswerPreCheckoutQuery":
        from telbot.methods import AnswerPreCheckoutQuery
        return AnswerPreCheckoutQuery.error(self.id, error_message)


class PassportFile(TelegramModel):
    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramModel):
    type: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List[PassportFile]] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: Optional[List[PassportFile]] = None
    hash: str


class EncryptedCredentials(TelegramModel):
    data: str
    hash: str
    secret: str


class PassportData(TelegramModel):
    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


# ------------------------------------------------------------------
#  Keyboards
# ------------------------------------------------------------------


class KeyboardButtonPollType(TelegramModel):
    type: Optional[PollType] = None


class KeyboardButton(TelegramModel):
    """A button of a custom reply keyboard; at most one request field may be set."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[KeyboardButtonPollType] = None

    @model_validator(mode="after")
    def _check_single_request(self) -> KeyboardButton:
        requested = [
            value for value in (self.request_contact, self.request_location, self.request_poll)
            if value is not None
        ]
        if len(requested) > 1:
            raise ValueError("keyboard button can request at most one of contact, location or poll")
        return self


class ReplyKeyboardMarkup(TelegramModel):
    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None

    @classmethod
    def from_rows(cls, rows: List[List[KeyboardButton]]) -> ReplyKeyboardMarkup:
        return cls(keyboard=rows)

    def add_row(self, *buttons: KeyboardButton) -> ReplyKeyboardMarkup:
        self.keyboard.append(list(buttons))
        return self

    def with_resize_keyboard(self, value: bool = True) -> ReplyKeyboardMarkup:
        self.resize_keyboard = value
        return self

    def with_one_time_keyboard(self, value: bool = True) -> ReplyKeyboardMarkup:
        self.one_time_keyboard = value
        return self

    def with_input_field_placeholder(self, placeholder: str) -> ReplyKeyboardMarkup:
        self.input_field_placeholder = placeholder
        return self

    def with_selective(self, value: bool = True) -> ReplyKeyboardMarkup:
        self.selective = value
        return self


class ReplyKeyboardRemove(TelegramModel):
    """Removes the custom keyboard; always encodes ``remove_keyboard: true``."""

    remove_keyboard: Literal[True] = True
    selective: Optional[bool] = None


class ForceReply(TelegramModel):
    """Shows a reply interface; always encodes ``force_reply: true``."""

    force_reply: Literal[True] = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class LoginUrl(TelegramModel):
    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


_BUTTON_ACTIONS = tuple(action.value for action in ButtonAction)


class InlineKeyboardButton(TelegramModel):
    """A button of an inline keyboard; exactly one action field is set.

    Use the constructors rather than setting fields by hand::

        InlineKeyboardButton.callback("Yes", "vote:yes")
        InlineKeyboardButton.link("Docs", "https://core.telegram.org/bots/api")
    """

    text: str
    url: Optional[str] = None
    login_url: Optional[LoginUrl] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[CallbackGame] = None
    pay: Optional[bool] = None

    @model_validator(mode="after")
    def _check_single_action(self) -> InlineKeyboardButton:
        present = [name for name in _BUTTON_ACTIONS if getattr(self, name) is not None]
        if len(present) != 1:
            raise ValueError(f"inline keyboard button needs exactly one action, got {present or 'none'}")
        return self

    @property
    def action(self) -> ButtonAction:
        for name in _BUTTON_ACTIONS:
            if getattr(self, name) is not None:
                return ButtonAction(name)
        raise AssertionError("unreachable: validated button without action")

    @classmethod
    def link(cls, text: str, url: str) -> InlineKeyboardButton:
        return cls(text=text, url=url)

    @classmethod
    def login(cls, text: str, login_url: LoginUrl) -> InlineKeyboardButton:
        return cls(text=text, login_url=login_url)

    @classmethod
    def callback(cls, text: str, data: str) -> InlineKeyboardButton:
        return cls(text=text, callback_data=data)

    @classmethod
    def switch_inline(cls, text: str, query: str = "") -> InlineKeyboardButton:
        return cls(text=text, switch_inline_query=query)

    @classmethod
    def switch_inline_current_chat(cls, text: str, query: str = "") -> InlineKeyboardButton:
        return cls(text=text, switch_inline_query_current_chat=query)

    @classmethod
    def game(cls, text: str) -> InlineKeyboardButton:
        return cls(text=text, callback_game=CallbackGame())

    @classmethod
    def payment(cls, text: str) -> InlineKeyboardButton:
        return cls(text=text, pay=True)


class InlineKeyboardMarkup(TelegramModel):
    inline_keyboard: List[List[InlineKeyboardButton]]

    @classmethod
    def new(cls) -> InlineKeyboardMarkup:
        return cls(inline_keyboard=[])

    @classmethod
    def from_rows(cls, rows: List[List[InlineKeyboardButton]]) -> InlineKeyboardMarkup:
        return cls(inline_keyboard=rows)

    def add_row(self, *buttons: InlineKeyboardButton) -> InlineKeyboardMarkup:
        self.inline_keyboard.append(list(buttons))
        return self


_REPLY_MARKUP_KEYS = ("inline_keyboard", "keyboard", "remove_keyboard", "force_reply")


def _reply_markup_kind(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return next((key for key in _REPLY_MARKUP_KEYS if key in value), None)
    return next((key for key in _REPLY_MARKUP_KEYS if hasattr(value, key)), None)


# Untagged on the wire; each kind has one field no other kind carries.
ReplyMarkup = Annotated[
    Union[
        Annotated[InlineKeyboardMarkup, Tag("inline_keyboard")],
        Annotated[ReplyKeyboardMarkup, Tag("keyboard")],
        Annotated[ReplyKeyboardRemove, Tag("remove_keyboard")],
        Annotated[ForceReply, Tag("force_reply")],
    ],
    Discriminator(_reply_markup_kind),
]


# ------------------------------------------------------------------
#  Messages
# ------------------------------------------------------------------

# Order matters: an animation message also carries ``document`` and a venue
# message also carries ``location``.
_MESSAGE_KIND_FIELDS = tuple(kind.value for kind in MessageKind)


class Message(TelegramModel):
    """A message in a chat.

    Exactly one content field is normally present; :attr:`kind` reports
    which one, or ``None`` for content this library does not know.
    """

    message_id: int
    from_field: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    date: int
    chat: Chat
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    is_automatic_forward: Optional[bool] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    has_protected_content: Optional[bool] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    message_auto_delete_timer_changed: Optional[MessageAutoDeleteTimerChanged] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional[Message] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    connected_website: Optional[str] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    voice_chat_scheduled: Optional[VoiceChatScheduled] = None
    voice_chat_started: Optional[VoiceChatStarted] = None
    voice_chat_ended: Optional[VoiceChatEnded] = None
    voice_chat_participants_invited: Optional[VoiceChatParticipantsInvited] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None

    @property
    def kind(self) -> Optional[MessageKind]:
        for name in _MESSAGE_KIND_FIELDS:
            if getattr(self, name) is not None:
                return MessageKind(name)
        return None

    def reply_text(self, text: str) -> "methods.SendMessage":
        """Build a text reply to this message in the same chat."""
        from telbot.methods import SendMessage
        return SendMessage(self.chat.id, text).reply_to(self.message_id)

    def forward_to(self, chat_id: ChatId) -> "methods.ForwardMessage":
        from telbot.methods import ForwardMessage
        return ForwardMessage(chat_id, self.chat.id, self.message_id)

    def copy_to(self, chat_id: ChatId) -> "methods.CopyMessage":
        from telbot.methods import CopyMessage
        return CopyMessage(chat_id, self.chat.id, self.message_id)

    def edit_text(self, text: str) -> "methods.EditMessageText":
        from telbot.methods import EditMessageText
        return EditMessageText.new(self.chat.id, self.message_id, text)

    def pin(self) -> "methods.PinChatMessage":
        from telbot.methods import PinChatMessage
        return PinChatMessage(self.chat.id, self.message_id)

    def delete(self) -> "methods.DeleteMessage":
        from telbot.methods import DeleteMessage
        return DeleteMessage(self.chat.id, self.message_id)


# ------------------------------------------------------------------
#  Queries
# ------------------------------------------------------------------


class InlineQuery(TelegramModel):
    id: str
    from_field: User = Field(alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional[Location] = None

    def answer(self, results: List[InlineQueryResult]) -> "methods.AnswerInlineQuery":
        from telbot.methods import AnswerInlineQuery
        return AnswerInlineQuery(self.id, results)


class ChosenInlineResult(TelegramModel):
    result_id: str
    from_field: User = Field(alias="from")
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None
    query: str


class CallbackQuery(TelegramModel):
    id: str
    from_field: User = Field(alias="from")
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    chat_instance: str
    data: Optional[str] = None
    game_short_name: Optional[str] = None

    def answer(self) -> "methods.AnswerCallbackQuery":
        from telbot.methods import AnswerCallbackQuery
        return AnswerCallbackQuery(self.id)


# ------------------------------------------------------------------
#  Bot settings and updates
# ------------------------------------------------------------------


class BotCommand(TelegramModel):
    command: str
    description: str


class WebhookInfo(TelegramModel):
    """Contains information about the current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


_UPDATE_KIND_FIELDS = tuple(kind.value for kind in UpdateKind)


class Update(TelegramModel):
    """An incoming update.

    At most one payload field is present.  Updates of a type this library
    does not model decode with no payload and :attr:`kind` ``None``.
    """

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None
    my_chat_member: Optional[ChatMemberUpdated] = None
    chat_member: Optional[ChatMemberUpdated] = None
    chat_join_request: Optional[ChatJoinRequest] = None

    @model_validator(mode="after")
    def _check_single_payload(self) -> Update:
        present = [name for name in _UPDATE_KIND_FIELDS if getattr(self, name) is not None]
        if len(present) > 1:
            raise ValueError(f"update carries more than one payload: {present}")
        return self

    @property
    def kind(self) -> Optional[UpdateKind]:
        for name in _UPDATE_KIND_FIELDS:
            if getattr(self, name) is not None:
                return UpdateKind(name)
        return None

    @property
    def payload(self) -> Any:
        """The object stored in the field named by :attr:`kind`."""
        kind = self.kind
        return getattr(self, kind.value) if kind is not None else None


# Resolve references to classes defined further down the module.
for _model in (ChatLocation, Chat, ChatMemberUpdated, ChatJoinRequest):
    _model.model_rebuild()
