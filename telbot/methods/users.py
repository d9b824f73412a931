"""User profile photos and file downloads."""

from typing import ClassVar, Optional

from telbot.methods.base import JsonMethod
from telbot.models import File, UserProfilePhotos


class GetUserProfilePhotos(JsonMethod):
    method_name: ClassVar[str] = "getUserProfilePhotos"
    response_type: ClassVar = UserProfilePhotos

    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = None

    def __init__(self, user_id: int, **data) -> None:
        super().__init__(user_id=user_id, **data)

    def with_offset(self, offset: int) -> "GetUserProfilePhotos":
        self.offset = offset
        return self

    def with_limit(self, limit: int) -> "GetUserProfilePhotos":
        self.limit = limit
        return self


class GetFile(JsonMethod):
    """Prepare a file for download; the returned ``file_path`` stays valid for an hour."""

    method_name: ClassVar[str] = "getFile"
    response_type: ClassVar = File

    file_id: str

    def __init__(self, file_id: str, **data) -> None:
        super().__init__(file_id=file_id, **data)
