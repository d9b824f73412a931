"""TelbotLogger: structured logging for the ``telbot`` package.

Library modules log through ``logging.getLogger(__name__)``, which makes
them children of the ``telbot`` logger and leaves handler setup to the host
program.  Bots that want the package's own output call
:meth:`TelbotLogger.get_logger` once; it attaches a stderr handler and,
optionally, a size-rotated file, both emitting one JSON object per line.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Optional

_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    """Render a record as a JSON line.

    Request context attached through ``extra=`` (``api_endpoint``,
    ``error_code``, ``retry_after``, ``offset`` ...) becomes top-level keys::

        {"timestamp": "...", "level": "WARNING", "logger": "telbot.client",
         "message": "Telegram returned an error", "api_endpoint": "sendMessage",
         "error_code": 403, ...}
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RESERVED and key not in entry
        )
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_file,
            maxBytes=TelbotLogger.MAX_BYTES,
            backupCount=TelbotLogger.BACKUP_COUNT,
            encoding="utf-8",
        ))
    return handlers


class TelbotLogger:
    """Process-wide owner of the ``telbot`` logger's handlers.

    Usage::

        from telbot.logger import TelbotLogger

        logger = TelbotLogger.get_logger(logging.INFO, "logs/bot.log")
        logger.info("Polling started", extra={"offset": 0})
    """

    NAME = "telbot"
    MAX_BYTES = 5 * 1024 * 1024
    BACKUP_COUNT = 5

    _instance: Optional["TelbotLogger"] = None
    _logger: logging.Logger

    def __new__(cls, level: int = logging.WARNING, log_file: Optional[str] = None) -> "TelbotLogger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._logger = instance._configure(level, log_file)
            cls._instance = instance
        return cls._instance

    @classmethod
    def _configure(cls, level: int, log_file: Optional[str]) -> logging.Logger:
        logger = logging.getLogger(cls.NAME)
        logger.setLevel(level)
        # Handlers survive module reloads; attach them only once.
        if not logger.handlers:
            formatter = _JsonFormatter()
            for handler in _build_handlers(log_file):
                handler.setFormatter(formatter)
                logger.addHandler(handler)
        return logger

    @staticmethod
    def get_logger(level: int = logging.WARNING, log_file: Optional[str] = None) -> logging.Logger:
        """Return the ``telbot`` logger, configuring it on the first call.

        Later calls ignore their arguments; use :meth:`set_level` to change
        verbosity afterwards.
        """
        return TelbotLogger(level, log_file)._logger

    @staticmethod
    def set_level(level: int) -> None:
        TelbotLogger.get_logger().setLevel(level)

    def cleanup(self) -> None:
        """Flush, close and detach every handler."""
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
