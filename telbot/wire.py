"""Wire formats: request bodies and the response envelope.

Every Bot API response is a JSON object of one of two shapes::

    {"ok": true, "result": ...}
    {"ok": false, "error_code": 400, "description": "...", "parameters": {...}}

:func:`decode_response` turns the first into the request's typed result and
the second into :class:`~telbot.exceptions.TelegramError`.
"""

import json
from typing import Any, Dict, List, Optional, Tuple, Union

import urllib3
from pydantic import StrictBool, ValidationError

from telbot.exceptions import SerializationError, TelegramError
from telbot.methods.base import FileMethod, TelegramMethod
from telbot.models import TelegramModel

JSON_CONTENT_TYPE = "application/json"


class ResponseParameters(TelegramModel):
    """Extra information attached to some errors."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


class ApiResponse(TelegramModel):
    """The ``{"ok": ...}`` envelope around every result."""

    ok: StrictBool
    result: Any = None
    error_code: Optional[int] = None
    description: Optional[str] = None
    parameters: Optional[ResponseParameters] = None


# ------------------------------------------------------------------
#  Request bodies
# ------------------------------------------------------------------


def _payload(method: TelegramMethod) -> Dict[str, Any]:
    try:
        return method.to_dict()
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot encode {method.method_name}: {exc}") from exc


def encode_json(method: TelegramMethod) -> bytes:
    """Encode *method* as a UTF-8 JSON object body."""
    return json.dumps(_payload(method), ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def encode_multipart(method: FileMethod) -> Tuple[bytes, str]:
    """Encode *method* as ``multipart/form-data``.

    Walks the top-level fields of the JSON form in order.  A field holding an
    inline upload becomes a file part carrying the upload's name and MIME
    type; every other field becomes a text part (strings as-is, anything else
    as compact JSON).

    Returns:
        The body and the ``Content-Type`` header value, boundary included.
    """
    uploads = method.files() or {}
    fields: List[Tuple[str, Union[str, Tuple[str, bytes, str]]]] = []
    for key, value in _payload(method).items():
        upload = uploads.get(key)
        if upload is not None:
            fields.append((key, (upload.name, upload.data, upload.mime)))
        elif isinstance(value, str):
            fields.append((key, value))
        else:
            fields.append((key, json.dumps(value, ensure_ascii=False, separators=(",", ":"))))
    try:
        return urllib3.encode_multipart_formdata(fields)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot assemble multipart body for {method.method_name}: {exc}") from exc


# ------------------------------------------------------------------
#  Response envelope
# ------------------------------------------------------------------


def decode_response(method: TelegramMethod, body: Union[bytes, str]) -> Any:
    """Decode a raw response *body* for *method*.

    Raises:
        TelegramError: The envelope has ``ok: false``.
        SerializationError: The body is not a valid envelope, or ``result``
            does not match the method's response type.
    """
    try:
        envelope = ApiResponse.model_validate_json(body)
    except ValidationError as exc:
        raise SerializationError(f"malformed response envelope for {method.method_name}: {exc}") from exc

    if not envelope.ok:
        raise TelegramError(
            envelope.description,
            envelope.error_code,
            envelope.parameters,
            response_body=envelope.to_dict(),
        )

    if "result" not in envelope.model_fields_set:
        raise SerializationError(f"response for {method.method_name} has ok=true but no result")
    try:
        return method.parse_result(envelope.result)
    except ValidationError as exc:
        raise SerializationError(f"unexpected result for {method.method_name}: {exc}") from exc
