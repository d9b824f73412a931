"""Photo bot: answers ``/start`` with an uploaded picture.

Usage::

    python examples/photo.py path/to/picture.jpg
"""

import sys
import time

from telbot import Api, InputFile, Polling, TelbotError
from telbot import config
from telbot.logger import TelbotLogger

logger = TelbotLogger.get_logger(config.LOG_LEVEL, config.LOG_FILE)


def run(picture_path: str) -> None:
    api = Api.from_env()
    picture = InputFile.from_path(picture_path)

    logger.info("Photo bot is running", extra={"picture": picture.name, "mime": picture.mime})
    polling = Polling(api, timeout=config.POLL_TIMEOUT)
    while True:
        try:
            update = next(polling)
        except TelbotError:
            time.sleep(5)
            continue

        message = update.message
        if message is None or not (message.text or "").startswith("/start"):
            continue
        try:
            api.send(message.chat.send_photo(picture).with_caption(picture.name))
        except TelbotError as exc:
            logger.error("sendPhoto failed", extra={"chat_id": message.chat.id, "error": str(exc)})


if __name__ == "__main__":
    if len(sys.argv) != 2:
        sys.exit(__doc__)
    run(sys.argv[1])
