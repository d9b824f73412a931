"""Answering callback and inline queries."""

from typing import ClassVar, List, Optional

from pydantic import model_validator

from telbot.inputs import InlineQueryResult
from telbot.methods.base import JsonMethod

MAX_INLINE_RESULTS = 50


class AnswerCallbackQuery(JsonMethod):
    method_name: ClassVar[str] = "answerCallbackQuery"
    response_type: ClassVar = bool

    callback_query_id: str
    text: Optional[str] = None
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = None

    def __init__(self, callback_query_id: str, **data) -> None:
        super().__init__(callback_query_id=callback_query_id, **data)

    def with_text(self, text: str) -> "AnswerCallbackQuery":
        self.text = text
        return self

    def with_show_alert(self, value: bool = True) -> "AnswerCallbackQuery":
        self.show_alert = value
        return self

    def with_url(self, url: str) -> "AnswerCallbackQuery":
        self.url = url
        return self

    def with_cache_time(self, cache_time: int) -> "AnswerCallbackQuery":
        self.cache_time = cache_time
        return self


class AnswerInlineQuery(JsonMethod):
    """Send up to 50 results for an inline query."""

    method_name: ClassVar[str] = "answerInlineQuery"
    response_type: ClassVar = bool

    inline_query_id: str
    results: List[InlineQueryResult]
    cache_time: Optional[int] = None
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = None
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = None

    def __init__(self, inline_query_id: str, results: Optional[List[InlineQueryResult]] = None, **data) -> None:
        super().__init__(inline_query_id=inline_query_id, results=results or [], **data)

    @model_validator(mode="after")
    def _check_result_count(self) -> "AnswerInlineQuery":
        if len(self.results) > MAX_INLINE_RESULTS:
            raise ValueError(f"at most {MAX_INLINE_RESULTS} results are allowed, got {len(self.results)}")
        return self

    def with_result(self, result: InlineQueryResult) -> "AnswerInlineQuery":
        self.results = [*self.results, result]
        return self

    def with_cache_time(self, cache_time: int) -> "AnswerInlineQuery":
        self.cache_time = cache_time
        return self

    def with_is_personal(self, value: bool = True) -> "AnswerInlineQuery":
        self.is_personal = value
        return self

    def with_next_offset(self, next_offset: str) -> "AnswerInlineQuery":
        self.next_offset = next_offset
        return self

    def with_switch_pm(self, text: str, parameter: str) -> "AnswerInlineQuery":
        """Show a button that opens a private chat with the bot and sends ``/start parameter``."""
        self.switch_pm_text = text
        self.switch_pm_parameter = parameter
        return self
