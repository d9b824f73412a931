"""Sending stickers and managing sticker sets."""

from typing import ClassVar, Optional

from pydantic import model_validator

from telbot.inputs import InputFile, InputFileUpload, InputFileVariant
from telbot.methods.base import ChatId, FileMethod, JsonMethod, ReplyOptions
from telbot.models import File, MaskPosition, Message, StickerSet


class SendSticker(ReplyOptions, FileMethod):
    method_name: ClassVar[str] = "sendSticker"
    response_type: ClassVar = Message
    file_fields: ClassVar = ("sticker",)

    chat_id: ChatId
    sticker: InputFileVariant

    def __init__(self, chat_id: ChatId, sticker: InputFileVariant, **data) -> None:
        super().__init__(chat_id=chat_id, sticker=sticker, **data)


class GetStickerSet(JsonMethod):
    method_name: ClassVar[str] = "getStickerSet"
    response_type: ClassVar = StickerSet

    name: str

    def __init__(self, name: str, **data) -> None:
        super().__init__(name=name, **data)


class UploadStickerFile(FileMethod):
    """Upload a PNG for later use in sticker-set methods; returns :class:`File`."""

    method_name: ClassVar[str] = "uploadStickerFile"
    response_type: ClassVar = File
    file_fields: ClassVar = ("png_sticker",)

    user_id: int
    png_sticker: InputFileUpload

    def __init__(self, user_id: int, png_sticker: InputFile, **data) -> None:
        super().__init__(user_id=user_id, png_sticker=png_sticker, **data)


class _StickerUpload(FileMethod):
    """A sticker given either as PNG (upload or reference) or as TGS (upload only).

    The two forms are mutually exclusive; each setter clears the other.
    """

    file_fields: ClassVar = ("png_sticker", "tgs_sticker")

    user_id: int
    name: str
    emojis: str
    png_sticker: Optional[InputFileVariant] = None
    tgs_sticker: Optional[InputFileUpload] = None
    mask_position: Optional[MaskPosition] = None

    @model_validator(mode="after")
    def _check_single_sticker(self) -> "_StickerUpload":
        if self.png_sticker is not None and self.tgs_sticker is not None:
            raise ValueError("png_sticker and tgs_sticker are mutually exclusive")
        return self

    def with_png_sticker(self, png_sticker: InputFileVariant):
        self.tgs_sticker = None
        self.png_sticker = png_sticker
        return self

    def with_tgs_sticker(self, tgs_sticker: InputFile):
        self.png_sticker = None
        self.tgs_sticker = tgs_sticker
        return self

    def with_mask_position(self, mask_position: MaskPosition):
        self.mask_position = mask_position
        return self


class CreateNewStickerSet(_StickerUpload):
    method_name: ClassVar[str] = "createNewStickerSet"
    response_type: ClassVar = bool

    title: str
    contains_masks: Optional[bool] = None

    @classmethod
    def new_png(cls, user_id: int, name: str, title: str, png_sticker: InputFileVariant, emojis: str) -> "CreateNewStickerSet":
        return cls(user_id=user_id, name=name, title=title, png_sticker=png_sticker, emojis=emojis)

    @classmethod
    def new_tgs(cls, user_id: int, name: str, title: str, tgs_sticker: InputFile, emojis: str) -> "CreateNewStickerSet":
        return cls(user_id=user_id, name=name, title=title, tgs_sticker=tgs_sticker, emojis=emojis)

    def with_contains_masks(self, value: bool = True) -> "CreateNewStickerSet":
        self.contains_masks = value
        return self


class AddStickerToSet(_StickerUpload):
    method_name: ClassVar[str] = "addStickerToSet"
    response_type: ClassVar = bool

    @classmethod
    def new_png(cls, user_id: int, name: str, png_sticker: InputFileVariant, emojis: str) -> "AddStickerToSet":
        return cls(user_id=user_id, name=name, png_sticker=png_sticker, emojis=emojis)

    @classmethod
    def new_tgs(cls, user_id: int, name: str, tgs_sticker: InputFile, emojis: str) -> "AddStickerToSet":
        return cls(user_id=user_id, name=name, tgs_sticker=tgs_sticker, emojis=emojis)


class SetStickerPositionInSet(JsonMethod):
    method_name: ClassVar[str] = "setStickerPositionInSet"
    response_type: ClassVar = bool

    sticker: str
    position: int

    def __init__(self, sticker: str, position: int, **data) -> None:
        super().__init__(sticker=sticker, position=position, **data)


class DeleteStickerFromSet(JsonMethod):
    method_name: ClassVar[str] = "deleteStickerFromSet"
    response_type: ClassVar = bool

    sticker: str

    def __init__(self, sticker: str, **data) -> None:
        super().__init__(sticker=sticker, **data)


class SetStickerSetThumb(FileMethod):
    method_name: ClassVar[str] = "setStickerSetThumb"
    response_type: ClassVar = bool
    file_fields: ClassVar = ("thumb",)

    name: str
    user_id: int
    thumb: Optional[InputFileVariant] = None

    def __init__(self, name: str, user_id: int, **data) -> None:
        super().__init__(name=name, user_id=user_id, **data)

    def with_thumb(self, thumb: InputFileVariant) -> "SetStickerSetThumb":
        self.thumb = thumb
        return self
