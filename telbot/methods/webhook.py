"""Webhook registration."""

from typing import ClassVar, List, Optional

from telbot.inputs import InputFile, InputFileUpload
from telbot.methods.base import FileMethod, JsonMethod
from telbot.models import WebhookInfo


class SetWebhook(FileMethod):
    """Register an HTTPS ``url`` Telegram will POST updates to; returns ``bool``.

    An empty ``url`` removes the current webhook, see :meth:`remove_previous`.
    A self-signed ``certificate`` is uploaded as a multipart part.
    """

    method_name: ClassVar[str] = "setWebhook"
    response_type: ClassVar = bool
    file_fields: ClassVar = ("certificate",)

    url: str
    certificate: Optional[InputFileUpload] = None
    ip_address: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
    drop_pending_updates: Optional[bool] = None

    def __init__(self, url: str, **data) -> None:
        super().__init__(url=url, **data)

    @classmethod
    def remove_previous(cls) -> "SetWebhook":
        return cls("")

    def with_certificate(self, certificate: InputFile) -> "SetWebhook":
        self.certificate = certificate
        return self

    def with_ip_address(self, ip_address: str) -> "SetWebhook":
        self.ip_address = ip_address
        return self

    def with_max_connections(self, max_connections: int) -> "SetWebhook":
        self.max_connections = max_connections
        return self

    def with_allowed_updates(self, allowed_updates: List[str]) -> "SetWebhook":
        self.allowed_updates = allowed_updates
        return self

    def with_allowed_update(self, allowed_update: str) -> "SetWebhook":
        self.allowed_updates = [*(self.allowed_updates or []), allowed_update]
        return self

    def with_drop_pending_updates(self, value: bool = True) -> "SetWebhook":
        self.drop_pending_updates = value
        return self


class DeleteWebhook(JsonMethod):
    method_name: ClassVar[str] = "deleteWebhook"
    response_type: ClassVar = bool

    drop_pending_updates: Optional[bool] = None

    def with_drop_pending_updates(self, value: bool = True) -> "DeleteWebhook":
        self.drop_pending_updates = value
        return self


class GetWebhookInfo(JsonMethod):
    method_name: ClassVar[str] = "getWebhookInfo"
    response_type: ClassVar = WebhookInfo
