"""Echo bot: answers every text message with the same text.

Run with ``BOT_TOKEN`` set in the environment or in a ``.env`` file::

    python examples/echo.py
"""

import time

from telbot import Api, Polling, TelbotError, TelegramError
from telbot import config
from telbot.logger import TelbotLogger

logger = TelbotLogger.get_logger(config.LOG_LEVEL, config.LOG_FILE)

_RETRY_DELAY = 5


def run() -> None:
    """Poll forever, echoing text messages back to their chat."""
    api = Api.from_env()
    polling = Polling(api, timeout=config.POLL_TIMEOUT)

    logger.info("Echo bot is running. Polling for updates...")
    while True:
        try:
            update = next(polling)
        except TelegramError as exc:
            delay = exc.retry_after or _RETRY_DELAY
            logger.warning("getUpdates rejected, retrying", extra={"retry_after": delay})
            time.sleep(delay)
            continue
        except TelbotError:
            time.sleep(_RETRY_DELAY)
            continue

        message = update.message
        if message is None or message.text is None:
            continue
        try:
            api.send_json(message.reply_text(message.text))
        except TelbotError as exc:
            logger.error("Reply failed", extra={"chat_id": message.chat.id, "error": str(exc)})


if __name__ == "__main__":
    run()
