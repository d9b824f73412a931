"""Chat administration: members, invite links, settings and pins."""

from typing import ClassVar, List, Optional

from telbot.inputs import InputFile, InputFileUpload
from telbot.methods.base import ChatId, FileMethod, JsonMethod
from telbot.models import Chat, ChatInviteLink, ChatMember, ChatPermissions


# ------------------------------------------------------------------
#  Members
# ------------------------------------------------------------------


class BanChatMember(JsonMethod):
    method_name: ClassVar[str] = "banChatMember"
    response_type: ClassVar = bool

    chat_id: ChatId
    user_id: int
    until_date: Optional[int] = None
    revoke_messages: Optional[bool] = None

    def __init__(self, chat_id: ChatId, user_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, **data)

    def with_until_date(self, until_date: int) -> "BanChatMember":
        """Unix time the ban is lifted; under 30 seconds or over 366 days means forever."""
        self.until_date = until_date
        return self

    def with_revoke_messages(self, value: bool = True) -> "BanChatMember":
        self.revoke_messages = value
        return self


class UnbanChatMember(JsonMethod):
    method_name: ClassVar[str] = "unbanChatMember"
    response_type: ClassVar = bool

    chat_id: ChatId
    user_id: int
    only_if_banned: Optional[bool] = None

    def __init__(self, chat_id: ChatId, user_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, **data)

    def with_only_if_banned(self, value: bool = True) -> "UnbanChatMember":
        self.only_if_banned = value
        return self


class RestrictChatMember(JsonMethod):
    method_name: ClassVar[str] = "restrictChatMember"
    response_type: ClassVar = bool

    chat_id: ChatId
    user_id: int
    permissions: ChatPermissions
    until_date: Optional[int] = None

    def __init__(self, chat_id: ChatId, user_id: int, permissions: ChatPermissions, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, permissions=permissions, **data)

    def with_until_date(self, until_date: int) -> "RestrictChatMember":
        self.until_date = until_date
        return self


class PromoteChatMember(JsonMethod):
    """Grant or revoke administrator rights.

    Every right left unset keeps its current value; :meth:`demote` sets all
    of them to ``False``.
    """

    method_name: ClassVar[str] = "promoteChatMember"
    response_type: ClassVar = bool

    chat_id: ChatId
    user_id: int
    is_anonymous: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_voice_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None

    def __init__(self, chat_id: ChatId, user_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, **data)

    @classmethod
    def demote(cls, chat_id: ChatId, user_id: int) -> "PromoteChatMember":
        rights = {name: False for name in cls.model_fields if name.startswith("can_")}
        return cls(chat_id, user_id, is_anonymous=False, **rights)

    def with_is_anonymous(self, value: bool = True) -> "PromoteChatMember":
        self.is_anonymous = value
        return self

    def allow_manage_chat(self, value: bool = True) -> "PromoteChatMember":
        self.can_manage_chat = value
        return self

    def allow_post_messages(self, value: bool = True) -> "PromoteChatMember":
        self.can_post_messages = value
        return self

    def allow_edit_messages(self, value: bool = True) -> "PromoteChatMember":
        self.can_edit_messages = value
        return self

    def allow_delete_messages(self, value: bool = True) -> "PromoteChatMember":
        self.can_delete_messages = value
        return self

    def allow_manage_voice_chats(self, value: bool = True) -> "PromoteChatMember":
        self.can_manage_voice_chats = value
        return self

    def allow_restrict_members(self, value: bool = True) -> "PromoteChatMember":
        self.can_restrict_members = value
        return self

    def allow_promote_members(self, value: bool = True) -> "PromoteChatMember":
        self.can_promote_members = value
        return self

    def allow_change_info(self, value: bool = True) -> "PromoteChatMember":
        self.can_change_info = value
        return self

    def allow_invite_users(self, value: bool = True) -> "PromoteChatMember":
        self.can_invite_users = value
        return self

    def allow_pin_messages(self, value: bool = True) -> "PromoteChatMember":
        self.can_pin_messages = value
        return self


class SetChatAdministratorCustomTitle(JsonMethod):
    method_name: ClassVar[str] = "setChatAdministratorCustomTitle"
    response_type: ClassVar = bool

    chat_id: ChatId
    user_id: int
    custom_title: str

    def __init__(self, chat_id: ChatId, user_id: int, custom_title: str, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, custom_title=custom_title, **data)


class SetChatPermissions(JsonMethod):
    method_name: ClassVar[str] = "setChatPermissions"
    response_type: ClassVar = bool

    chat_id: ChatId
    permissions: ChatPermissions

    def __init__(self, chat_id: ChatId, permissions: ChatPermissions, **data) -> None:
        super().__init__(chat_id=chat_id, permissions=permissions, **data)


# ------------------------------------------------------------------
#  Invite links and join requests
# ------------------------------------------------------------------


class ExportChatInviteLink(JsonMethod):
    """Generate a new primary invite link, revoking the old one; returns ``str``."""

    method_name: ClassVar[str] = "exportChatInviteLink"
    response_type: ClassVar = str

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


class CreateChatInviteLink(JsonMethod):
    method_name: ClassVar[str] = "createChatInviteLink"
    response_type: ClassVar = ChatInviteLink

    chat_id: ChatId
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)

    def with_name(self, name: str) -> "CreateChatInviteLink":
        self.name = name
        return self

    def with_expire_date(self, expire_date: int) -> "CreateChatInviteLink":
        self.expire_date = expire_date
        return self

    def with_member_limit(self, member_limit: int) -> "CreateChatInviteLink":
        self.member_limit = member_limit
        return self

    def with_creates_join_request(self, value: bool = True) -> "CreateChatInviteLink":
        self.creates_join_request = value
        return self


class EditChatInviteLink(JsonMethod):
    method_name: ClassVar[str] = "editChatInviteLink"
    response_type: ClassVar = ChatInviteLink

    chat_id: ChatId
    invite_link: str
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None

    def __init__(self, chat_id: ChatId, invite_link: str, **data) -> None:
        super().__init__(chat_id=chat_id, invite_link=invite_link, **data)

    def with_name(self, name: str) -> "EditChatInviteLink":
        self.name = name
        return self

    def with_expire_date(self, expire_date: int) -> "EditChatInviteLink":
        self.expire_date = expire_date
        return self

    def with_member_limit(self, member_limit: int) -> "EditChatInviteLink":
        self.member_limit = member_limit
        return self

    def with_creates_join_request(self, value: bool = True) -> "EditChatInviteLink":
        self.creates_join_request = value
        return self


class RevokeChatInviteLink(JsonMethod):
    method_name: ClassVar[str] = "revokeChatInviteLink"
    response_type: ClassVar = ChatInviteLink

    chat_id: ChatId
    invite_link: str

    def __init__(self, chat_id: ChatId, invite_link: str, **data) -> None:
        super().__init__(chat_id=chat_id, invite_link=invite_link, **data)


class ApproveChatJoinRequest(JsonMethod):
    method_name: ClassVar[str] = "approveChatJoinRequest"
    response_type: ClassVar = bool

    chat_id: ChatId
    user_id: int

    def __init__(self, chat_id: ChatId, user_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, **data)


class DeclineChatJoinRequest(JsonMethod):
    method_name: ClassVar[str] = "declineChatJoinRequest"
    response_type: ClassVar = bool

    chat_id: ChatId
    user_id: int

    def __init__(self, chat_id: ChatId, user_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, **data)


# ------------------------------------------------------------------
#  Chat settings
# ------------------------------------------------------------------


class SetChatPhoto(FileMethod):
    """Upload a new chat photo; only inline uploads are accepted."""

    method_name: ClassVar[str] = "setChatPhoto"
    response_type: ClassVar = bool
    file_fields: ClassVar = ("photo",)

    chat_id: ChatId
    photo: InputFileUpload

    def __init__(self, chat_id: ChatId, photo: InputFile, **data) -> None:
        super().__init__(chat_id=chat_id, photo=photo, **data)


class DeleteChatPhoto(JsonMethod):
    method_name: ClassVar[str] = "deleteChatPhoto"
    response_type: ClassVar = bool

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


class SetChatTitle(JsonMethod):
    method_name: ClassVar[str] = "setChatTitle"
    response_type: ClassVar = bool

    chat_id: ChatId
    title: str

    def __init__(self, chat_id: ChatId, title: str, **data) -> None:
        super().__init__(chat_id=chat_id, title=title, **data)


class SetChatDescription(JsonMethod):
    method_name: ClassVar[str] = "setChatDescription"
    response_type: ClassVar = bool

    chat_id: ChatId
    description: Optional[str] = None

    def __init__(self, chat_id: ChatId, description: Optional[str] = None, **data) -> None:
        super().__init__(chat_id=chat_id, description=description, **data)

    @classmethod
    def new_empty(cls, chat_id: ChatId) -> "SetChatDescription":
        """Remove the description."""
        return cls(chat_id)


class PinChatMessage(JsonMethod):
    method_name: ClassVar[str] = "pinChatMessage"
    response_type: ClassVar = bool

    chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None

    def __init__(self, chat_id: ChatId, message_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, message_id=message_id, **data)

    def without_notification(self, value: bool = True) -> "PinChatMessage":
        self.disable_notification = value
        return self


class UnpinChatMessage(JsonMethod):
    method_name: ClassVar[str] = "unpinChatMessage"
    response_type: ClassVar = bool

    chat_id: ChatId
    message_id: Optional[int] = None

    def __init__(self, chat_id: ChatId, message_id: Optional[int] = None, **data) -> None:
        super().__init__(chat_id=chat_id, message_id=message_id, **data)

    @classmethod
    def new_recent(cls, chat_id: ChatId) -> "UnpinChatMessage":
        """Unpin the most recently pinned message."""
        return cls(chat_id)


class UnpinAllChatMessages(JsonMethod):
    method_name: ClassVar[str] = "unpinAllChatMessages"
    response_type: ClassVar = bool

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


class LeaveChat(JsonMethod):
    method_name: ClassVar[str] = "leaveChat"
    response_type: ClassVar = bool

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


class SetChatStickerSet(JsonMethod):
    method_name: ClassVar[str] = "setChatStickerSet"
    response_type: ClassVar = bool

    chat_id: ChatId
    sticker_set_name: str

    def __init__(self, chat_id: ChatId, sticker_set_name: str, **data) -> None:
        super().__init__(chat_id=chat_id, sticker_set_name=sticker_set_name, **data)


class DeleteChatStickerSet(JsonMethod):
    method_name: ClassVar[str] = "deleteChatStickerSet"
    response_type: ClassVar = bool

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


# ------------------------------------------------------------------
#  Queries
# ------------------------------------------------------------------


class GetChat(JsonMethod):
    method_name: ClassVar[str] = "getChat"
    response_type: ClassVar = Chat

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


class GetChatAdministrators(JsonMethod):
    method_name: ClassVar[str] = "getChatAdministrators"
    response_type: ClassVar = List[ChatMember]

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


class GetChatMemberCount(JsonMethod):
    method_name: ClassVar[str] = "getChatMemberCount"
    response_type: ClassVar = int

    chat_id: ChatId

    def __init__(self, chat_id: ChatId, **data) -> None:
        super().__init__(chat_id=chat_id, **data)


class GetChatMember(JsonMethod):
    method_name: ClassVar[str] = "getChatMember"
    response_type: ClassVar = ChatMember

    chat_id: ChatId
    user_id: int

    def __init__(self, chat_id: ChatId, user_id: int, **data) -> None:
        super().__init__(chat_id=chat_id, user_id=user_id, **data)
