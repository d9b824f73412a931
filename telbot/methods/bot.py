"""Bot identity, session and command list."""

from typing import ClassVar, List, Optional

from telbot.inputs import BotCommandScope
from telbot.methods.base import JsonMethod
from telbot.models import BotCommand, User


class GetMe(JsonMethod):
    method_name: ClassVar[str] = "getMe"
    response_type: ClassVar = User


class LogOut(JsonMethod):
    """Log out from the cloud Bot API server before moving to a local one."""

    method_name: ClassVar[str] = "logOut"
    response_type: ClassVar = bool


class Close(JsonMethod):
    """Close the bot instance before moving it between local servers."""

    method_name: ClassVar[str] = "close"
    response_type: ClassVar = bool


class SetMyCommands(JsonMethod):
    method_name: ClassVar[str] = "setMyCommands"
    response_type: ClassVar = bool

    commands: List[BotCommand]
    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None

    def __init__(self, commands: Optional[List[BotCommand]] = None, **data) -> None:
        super().__init__(commands=commands or [], **data)

    def with_command(self, command: BotCommand) -> "SetMyCommands":
        self.commands = [*self.commands, command]
        return self

    def with_scope(self, scope: BotCommandScope) -> "SetMyCommands":
        self.scope = scope
        return self

    def with_language_code(self, language_code: str) -> "SetMyCommands":
        self.language_code = language_code
        return self


class DeleteMyCommands(JsonMethod):
    method_name: ClassVar[str] = "deleteMyCommands"
    response_type: ClassVar = bool

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None

    def with_scope(self, scope: BotCommandScope) -> "DeleteMyCommands":
        self.scope = scope
        return self

    def with_language_code(self, language_code: str) -> "DeleteMyCommands":
        self.language_code = language_code
        return self


class GetMyCommands(JsonMethod):
    method_name: ClassVar[str] = "getMyCommands"
    response_type: ClassVar = List[BotCommand]

    scope: Optional[BotCommandScope] = None
    language_code: Optional[str] = None

    def with_scope(self, scope: BotCommandScope) -> "GetMyCommands":
        self.scope = scope
        return self

    def with_language_code(self, language_code: str) -> "GetMyCommands":
        self.language_code = language_code
        return self
