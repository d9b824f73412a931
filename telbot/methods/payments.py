"""Invoices and payment query answers."""

from typing import ClassVar, List, Optional

from telbot.inputs import ShippingOption
from telbot.methods.base import ChatId, JsonMethod, ReplyOptions
from telbot.models import InlineKeyboardMarkup, LabeledPrice, Message


class SendInvoice(ReplyOptions, JsonMethod):
    """Send an invoice; ``prices`` are in the smallest units of ``currency``."""

    method_name: ClassVar[str] = "sendInvoice"
    response_type: ClassVar = Message

    chat_id: ChatId
    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    start_parameter: Optional[str] = None
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
    reply_markup: Optional[InlineKeyboardMarkup] = None

    def __init__(
        self,
        chat_id: ChatId,
        title: str,
        description: str,
        payload: str,
        provider_token: str,
        currency: str,
        prices: Optional[List[LabeledPrice]] = None,
        **data,
    ) -> None:
        super().__init__(
            chat_id=chat_id,
            title=title,
            description=description,
            payload=payload,
            provider_token=provider_token,
            currency=currency,
            prices=prices or [],
            **data,
        )

    def with_price(self, price: LabeledPrice) -> "SendInvoice":
        self.prices = [*self.prices, price]
        return self

    def with_tips(self, max_tip_amount: int, suggested_tip_amounts: List[int]) -> "SendInvoice":
        self.max_tip_amount = max_tip_amount
        self.suggested_tip_amounts = suggested_tip_amounts
        return self

    def with_start_parameter(self, start_parameter: str) -> "SendInvoice":
        self.start_parameter = start_parameter
        return self

    def with_provider_data(self, provider_data: str) -> "SendInvoice":
        self.provider_data = provider_data
        return self

    def with_photo(self, photo_url: str, width: Optional[int] = None, height: Optional[int] = None) -> "SendInvoice":
        self.photo_url = photo_url
        self.photo_width = width
        self.photo_height = height
        return self

    def with_need_name(self, value: bool = True) -> "SendInvoice":
        self.need_name = value
        return self

    def with_need_phone_number(self, value: bool = True) -> "SendInvoice":
        self.need_phone_number = value
        return self

    def with_need_email(self, value: bool = True) -> "SendInvoice":
        self.need_email = value
        return self

    def with_need_shipping_address(self, value: bool = True) -> "SendInvoice":
        self.need_shipping_address = value
        return self

    def with_is_flexible(self, value: bool = True) -> "SendInvoice":
        self.is_flexible = value
        return self


class AnswerShippingQuery(JsonMethod):
    method_name: ClassVar[str] = "answerShippingQuery"
    response_type: ClassVar = bool

    shipping_query_id: str
    ok: bool
    shipping_options: Optional[List[ShippingOption]] = None
    error_message: Optional[str] = None

    @classmethod
    def accept(cls, shipping_query_id: str, shipping_options: List[ShippingOption]) -> "AnswerShippingQuery":
        return cls(shipping_query_id=shipping_query_id, ok=True, shipping_options=shipping_options)

    @classmethod
    def error(cls, shipping_query_id: str, error_message: str) -> "AnswerShippingQuery":
        return cls(shipping_query_id=shipping_query_id, ok=False, error_message=error_message)


class AnswerPreCheckoutQuery(JsonMethod):
    method_name: ClassVar[str] = "answerPreCheckoutQuery"
    response_type: ClassVar = bool

    pre_checkout_query_id: str
    ok: bool
    error_message: Optional[str] = None

    @classmethod
    def accept(cls, pre_checkout_query_id: str) -> "AnswerPreCheckoutQuery":
        return cls(pre_checkout_query_id=pre_checkout_query_id, ok=True)

    @classmethod
    def error(cls, pre_checkout_query_id: str, error_message: str) -> "AnswerPreCheckoutQuery":
        return cls(pre_checkout_query_id=pre_checkout_query_id, ok=False, error_message=error_message)
