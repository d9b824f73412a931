"""Games and high scores."""

from typing import ClassVar, List, Optional

from pydantic import model_validator

from telbot.methods.base import JsonMethod, ReplyOptions
from telbot.methods.messages import EditResult
from telbot.models import GameHighScore, InlineKeyboardMarkup, Message


class SendGame(ReplyOptions, JsonMethod):
    method_name: ClassVar[str] = "sendGame"
    response_type: ClassVar = Message

    chat_id: int
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None

    def __init__(self, chat_id: int, game_short_name: str, **data) -> None:
        super().__init__(chat_id=chat_id, game_short_name=game_short_name, **data)


class _GameTarget(JsonMethod):
    user_id: int
    chat_id: Optional[int] = None
    message_id: Optional[int] = None
    inline_message_id: Optional[str] = None

    @model_validator(mode="after")
    def _check_target(self) -> "_GameTarget":
        in_chat = self.chat_id is not None and self.message_id is not None
        if in_chat == (self.inline_message_id is not None):
            raise ValueError("game message needs either chat_id and message_id, or inline_message_id")
        return self


class SetGameScore(_GameTarget):
    method_name: ClassVar[str] = "setGameScore"
    response_type: ClassVar = EditResult

    score: int
    force: Optional[bool] = None
    disable_edit_message: Optional[bool] = None

    @classmethod
    def new(cls, user_id: int, score: int, chat_id: int, message_id: int) -> "SetGameScore":
        return cls(user_id=user_id, score=score, chat_id=chat_id, message_id=message_id)

    @classmethod
    def new_inline(cls, user_id: int, score: int, inline_message_id: str) -> "SetGameScore":
        return cls(user_id=user_id, score=score, inline_message_id=inline_message_id)

    def with_force(self, value: bool = True) -> "SetGameScore":
        """Allow the score to decrease."""
        self.force = value
        return self

    def with_disable_edit_message(self, value: bool = True) -> "SetGameScore":
        self.disable_edit_message = value
        return self


class GetGameHighScores(_GameTarget):
    method_name: ClassVar[str] = "getGameHighScores"
    response_type: ClassVar = List[GameHighScore]

    @classmethod
    def new(cls, user_id: int, chat_id: int, message_id: int) -> "GetGameHighScores":
        return cls(user_id=user_id, chat_id=chat_id, message_id=message_id)

    @classmethod
    def new_inline(cls, user_id: int, inline_message_id: str) -> "GetGameHighScores":
        return cls(user_id=user_id, inline_message_id=inline_message_id)
