"""Request objects for every supported Bot API method."""

from telbot.methods.base import CaptionOptions, ChatId, FileMethod, JsonMethod, ReplyOptions, TelegramMethod
from telbot.methods.updates import GetUpdates
from telbot.methods.webhook import (
    DeleteWebhook,
    GetWebhookInfo,
    SetWebhook,
)
from telbot.methods.bot import (
    Close,
    DeleteMyCommands,
    GetMe,
    GetMyCommands,
    LogOut,
    SetMyCommands,
)
from telbot.methods.messages import (
    CopyMessage,
    DeleteMessage,
    EditMessageCaption,
    EditMessageLiveLocation,
    EditMessageMedia,
    EditMessageReplyMarkup,
    EditMessageText,
    ForwardMessage,
    SendAnimation,
    SendAudio,
    SendChatAction,
    SendContact,
    SendDice,
    SendDocument,
    SendLocation,
    SendMediaGroup,
    SendMessage,
    SendPhoto,
    SendPoll,
    SendVenue,
    SendVideo,
    SendVideoNote,
    SendVoice,
    StopMessageLiveLocation,
    StopPoll,
    EditResult,
)
from telbot.methods.chats import (
    ApproveChatJoinRequest,
    BanChatMember,
    CreateChatInviteLink,
    DeclineChatJoinRequest,
    DeleteChatPhoto,
    DeleteChatStickerSet,
    EditChatInviteLink,
    ExportChatInviteLink,
    GetChat,
    GetChatAdministrators,
    GetChatMember,
    GetChatMemberCount,
    LeaveChat,
    PinChatMessage,
    PromoteChatMember,
    RestrictChatMember,
    RevokeChatInviteLink,
    SetChatAdministratorCustomTitle,
    SetChatDescription,
    SetChatPermissions,
    SetChatPhoto,
    SetChatStickerSet,
    SetChatTitle,
    UnbanChatMember,
    UnpinAllChatMessages,
    UnpinChatMessage,
)
from telbot.methods.users import (
    GetFile,
    GetUserProfilePhotos,
)
from telbot.methods.queries import (
    AnswerCallbackQuery,
    AnswerInlineQuery,
)
from telbot.methods.stickers import (
    AddStickerToSet,
    CreateNewStickerSet,
    DeleteStickerFromSet,
    GetStickerSet,
    SendSticker,
    SetStickerPositionInSet,
    SetStickerSetThumb,
    UploadStickerFile,
)
from telbot.methods.payments import (
    AnswerPreCheckoutQuery,
    AnswerShippingQuery,
    SendInvoice,
)
from telbot.methods.games import (
    GetGameHighScores,
    SendGame,
    SetGameScore,
)
