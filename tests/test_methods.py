"""Tests for request objects: wire names, builders and parameter rules."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from telbot.inputs import (
    BotCommandScopeChat,
    BotCommandScopeDefault,
    InlineQueryResultArticle,
    InputFile,
    InputMediaPhoto,
    InputTextMessageContent,
    ShippingOption,
)
from telbot.methods import (
    AnswerInlineQuery,
    AnswerPreCheckoutQuery,
    AnswerShippingQuery,
    CopyMessage,
    CreateNewStickerSet,
    EditMessageLiveLocation,
    EditMessageText,
    GetChatMember,
    GetUpdates,
    PromoteChatMember,
    SendMediaGroup,
    SendMessage,
    SendPhoto,
    SendPoll,
    SendVideo,
    SetChatPhoto,
    SetGameScore,
    SetMyCommands,
    SetWebhook,
    UnpinChatMessage,
)
from telbot.methods.queries import MAX_INLINE_RESULTS
from telbot.models import (
    BotCommand,
    Chat,
    ChatMemberAdministrator,
    LabeledPrice,
    Message,
    MessageEntity,
    MessageEntityType,
    MessageId,
    ParseMode,
    User,
)


def _article(result_id: str):
    return InlineQueryResultArticle(
        title=result_id,
        input_message_content=InputTextMessageContent(message_text=result_id),
    ).with_id(result_id)


# ── Contract ─────────────────────────────────────────────────────────────────


class TestMethodContract:
    """Validate method names, response types and field checks."""

    def test_wire_names(self) -> None:
        assert SendMessage.method_name == "sendMessage"
        assert GetUpdates.method_name == "getUpdates"
        assert GetChatMember.method_name == "getChatMember"

    def test_unknown_parameter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SendMessage(1, "hi", text_colour="red")

    def test_assignment_is_validated(self) -> None:
        request = SendMessage(1, "hi")
        with pytest.raises(ValidationError):
            request.reply_to("not a number")

    def test_copy_message_result(self) -> None:
        assert isinstance(CopyMessage(1, 2, 3).parse_result({"message_id": 9}), MessageId)

    def test_chat_member_result(self) -> None:
        member = GetChatMember(1, 2).parse_result({
            "status": "administrator",
            "user": {"id": 2, "is_bot": False, "first_name": "Bo"},
            "can_be_edited": False,
            "is_anonymous": False,
            "can_manage_chat": True,
            "can_delete_messages": True,
            "can_manage_voice_chats": False,
            "can_restrict_members": True,
            "can_promote_members": False,
            "can_change_info": True,
            "can_invite_users": True,
        })
        assert isinstance(member, ChatMemberAdministrator)

    def test_edit_result_either_message_or_true(self) -> None:
        request = EditMessageText.new(1, 2, "new")
        assert request.parse_result(True) is True
        message = {"message_id": 2, "date": 0, "chat": {"id": 1, "type": "private"}, "text": "new"}
        assert isinstance(request.parse_result(message), Message)


# ── Messages ─────────────────────────────────────────────────────────────────


class TestSendMessage:
    """Validate the chainable setters of sendMessage."""

    def test_setters(self) -> None:
        request = (
            SendMessage(7, "*hi*")
            .with_parse_mode(ParseMode.MARKDOWN_V2)
            .with_disable_web_page_preview()
            .without_notification()
            .protected()
            .reply_to(3)
            .allow_without_reply()
        )
        assert request.to_dict() == {
            "chat_id": 7,
            "text": "*hi*",
            "parse_mode": "MarkdownV2",
            "disable_web_page_preview": True,
            "disable_notification": True,
            "protect_content": True,
            "reply_to_message_id": 3,
            "allow_sending_without_reply": True,
        }

    def test_entities_accumulate(self) -> None:
        request = (
            SendMessage(7, "bold link")
            .with_entity(MessageEntity.new(MessageEntityType.BOLD, 0, 4))
            .with_entity(MessageEntity.text_link(5, 4, "https://example.com"))
        )
        assert [e["type"] for e in request.to_dict()["entities"]] == ["bold", "text_link"]

    def test_channel_username(self) -> None:
        assert SendMessage("@news", "x").to_dict()["chat_id"] == "@news"


class TestFileMethods:
    """Validate upload detection."""

    def test_files_none_without_uploads(self) -> None:
        assert SendPhoto(7, "file-id").files() is None

    def test_files_lists_uploads(self) -> None:
        upload = InputFile("a.jpg", b"x", "image/jpeg")
        assert SendPhoto(7, upload).files() == {"photo": upload}

    def test_video_field_name(self) -> None:
        upload = InputFile("clip.mp4", b"x", "video/mp4")
        thumb = InputFile("thumb.jpg", b"t", "image/jpeg")
        request = SendVideo(7, upload).with_thumb(thumb).with_dimensions(640, 480)
        assert set(request.files()) == {"video", "thumb"}
        assert request.to_dict() == {"chat_id": 7, "video": "", "thumb": "", "width": 640, "height": 480}

    def test_set_chat_photo_is_upload(self) -> None:
        request = Chat(id=-100, type="supergroup").set_photo(InputFile("logo.png", b"p", "image/png"))
        assert isinstance(request, SetChatPhoto)
        assert set(request.files()) == {"photo"}

    def test_webhook_certificate(self) -> None:
        request = SetWebhook("https://bot.example.com/hook")
        assert request.files() is None
        request.with_certificate(InputFile("cert.pem", b"PEM", "application/x-pem-file"))
        assert set(request.files()) == {"certificate"}

    def test_remove_webhook(self) -> None:
        assert SetWebhook.remove_previous().to_dict() == {"url": ""}

    def test_media_group(self) -> None:
        request = SendMediaGroup(7).with_media(InputMediaPhoto("a")).with_media(InputMediaPhoto("b"))
        assert [m["media"] for m in request.to_dict()["media"]] == ["a", "b"]


class TestEditTargets:
    """Edits address either a chat message or an inline message."""

    def test_chat_message(self) -> None:
        assert EditMessageText.new(1, 2, "t").to_dict() == {"chat_id": 1, "message_id": 2, "text": "t"}

    def test_inline_message(self) -> None:
        assert EditMessageText.new_inline("abc", "t").to_dict() == {"inline_message_id": "abc", "text": "t"}

    def test_missing_target(self) -> None:
        with pytest.raises(ValidationError):
            EditMessageText(text="t")

    def test_both_targets(self) -> None:
        with pytest.raises(ValidationError):
            EditMessageLiveLocation(
                chat_id=1, message_id=2, inline_message_id="abc", latitude=0.0, longitude=0.0,
            )

    def test_game_score_target(self) -> None:
        assert SetGameScore.new_inline(5, 100, "abc").to_dict() == {
            "user_id": 5, "inline_message_id": "abc", "score": 100,
        }
        with pytest.raises(ValidationError):
            SetGameScore(user_id=5, score=1, chat_id=1)


# ── Polls ────────────────────────────────────────────────────────────────────


class TestSendPoll:
    """Validate poll builders and their exclusive parameters."""

    def test_regular(self) -> None:
        data = SendPoll.new_regular(1, "Lunch?", ["Pizza", "Sushi"]).to_dict()
        assert data["type"] == "regular"
        assert data["options"] == ["Pizza", "Sushi"]

    def test_quiz(self) -> None:
        data = SendPoll.new_quiz(1, "2+2?", ["3", "4"], 1).to_dict()
        assert data["type"] == "quiz"
        assert data["correct_option_id"] == 1

    def test_quiz_needs_answer(self) -> None:
        with pytest.raises(ValidationError):
            SendPoll(chat_id=1, question="?", options=["a", "b"], type="quiz")

    def test_open_period_clears_close_date(self) -> None:
        request = SendPoll.new_regular(1, "?", ["a", "b"]).with_close_date(1700000000).with_open_period(60)
        data = request.to_dict()
        assert data["open_period"] == 60
        assert "close_date" not in data

    def test_close_date_clears_open_period(self) -> None:
        request = SendPoll.new_regular(1, "?", ["a", "b"]).with_open_period(60).with_close_date(1700000000)
        data = request.to_dict()
        assert data["close_date"] == 1700000000
        assert "open_period" not in data

    def test_both_rejected_on_construction(self) -> None:
        with pytest.raises(ValidationError):
            SendPoll(chat_id=1, question="?", options=["a", "b"], open_period=5, close_date=6)


# ── Chats ────────────────────────────────────────────────────────────────────


class TestChatMethods:
    def test_demote_clears_rights(self) -> None:
        data = PromoteChatMember.demote(1, 2).to_dict()
        assert data["chat_id"] == 1
        assert data["user_id"] == 2
        assert all(value is False for key, value in data.items() if key.startswith("can_"))

    def test_unpin_recent(self) -> None:
        assert UnpinChatMessage.new_recent(1).to_dict() == {"chat_id": 1}

    def test_user_shortcut(self) -> None:
        request = User(id=2, is_bot=False, first_name="Bo").get_member_from(-100)
        assert request.to_dict() == {"chat_id": -100, "user_id": 2}


# ── Inline queries ───────────────────────────────────────────────────────────


class TestAnswerInlineQuery:
    """Validate the inline answer builder."""

    def test_results_flattened(self) -> None:
        data = AnswerInlineQuery("q1").with_result(_article("a")).with_cache_time(0).to_dict()
        assert data["results"][0]["type"] == "article"
        assert data["results"][0]["id"] == "a"
        assert data["cache_time"] == 0

    def test_result_limit(self) -> None:
        results = [_article(str(i)) for i in range(MAX_INLINE_RESULTS)]
        request = AnswerInlineQuery("q1", results)
        assert len(request.results) == MAX_INLINE_RESULTS
        with pytest.raises(ValidationError):
            request.with_result(_article("one too many"))
        with pytest.raises(ValidationError):
            AnswerInlineQuery("q1", results + [_article("x")])

    def test_switch_pm(self) -> None:
        data = AnswerInlineQuery("q1").with_switch_pm("Sign in", "login").to_dict()
        assert data["switch_pm_text"] == "Sign in"
        assert data["switch_pm_parameter"] == "login"


# ── Bot, stickers, payments ──────────────────────────────────────────────────


class TestMiscMethods:
    def test_commands_and_scope(self) -> None:
        request = (
            SetMyCommands()
            .with_command(BotCommand(command="start", description="Start"))
            .with_scope(BotCommandScopeChat(chat_id=5))
        )
        assert request.to_dict() == {
            "commands": [{"command": "start", "description": "Start"}],
            "scope": {"type": "chat", "chat_id": 5},
        }
        assert SetMyCommands().with_scope(BotCommandScopeDefault()).to_dict()["scope"] == {"type": "default"}

    def test_sticker_formats_exclusive(self) -> None:
        tgs = InputFile("s.tgs", b"t", "application/x-tgsticker")
        request = CreateNewStickerSet.new_png(1, "pack_by_bot", "Pack", "file-id", "😀")
        request.with_tgs_sticker(tgs)
        assert request.png_sticker is None
        assert request.files() == {"tgs_sticker": tgs}
        with pytest.raises(ValidationError):
            CreateNewStickerSet(
                user_id=1, name="n", title="t", emojis="😀", png_sticker="id", tgs_sticker=tgs,
            )

    def test_shipping_answers(self) -> None:
        option = ShippingOption(id="std", title="Standard", prices=[LabeledPrice(label="Post", amount=500)])
        assert AnswerShippingQuery.accept("s1", [option]).to_dict()["ok"] is True
        assert AnswerShippingQuery.error("s1", "No delivery").to_dict() == {
            "shipping_query_id": "s1", "ok": False, "error_message": "No delivery",
        }

    def test_pre_checkout_answer(self) -> None:
        assert AnswerPreCheckoutQuery.accept("p1").to_dict() == {"pre_checkout_query_id": "p1", "ok": True}
