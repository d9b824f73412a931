"""Webhook receiver adapter.

Telegram POSTs each update as a JSON body to the URL registered with
``setWebhook``.  Host frameworks hand the raw body to :func:`parse_update`
and answer with any 2xx status once the update is handled.
"""

import logging
from typing import Union

from pydantic import ValidationError

from telbot.exceptions import SerializationError
from telbot.models import Update

logger = logging.getLogger(__name__)


def parse_update(body: Union[bytes, str]) -> Update:
    """Decode one inbound webhook body into an :class:`Update`.

    Raises:
        SerializationError: If *body* is not a valid update.
    """
    try:
        update = Update.model_validate_json(body)
    except ValidationError as exc:
        logger.error("Malformed webhook update", extra={"error": str(exc), "body_size": len(body)})
        raise SerializationError(f"malformed webhook update: {exc}") from exc
    logger.debug(
        "Webhook update received",
        extra={"update_id": update.update_id, "kind": update.kind.value if update.kind else None},
    )
    return update
