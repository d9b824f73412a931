"""Environment-driven settings for bots built on telbot.

Loads ``BOT_TOKEN`` and the ``TELBOT_*`` variables from the environment via
``python-dotenv``.  All values are resolved at import time so host programs
can ``from telbot.config import ...`` without repeated lookups.  The request
core never imports this module on its own; only :meth:`telbot.Api.from_env`,
:meth:`telbot.AsyncApi.from_env` and the example bots do.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_seconds(raw: str | None, default: float) -> float:
    """Parse a positive number of seconds, falling back to *default*.

    Non-numeric and non-positive values are ignored.
    """
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_level(raw: str | None) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant."""
    if not raw:
        return logging.WARNING
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
API_URL: str = os.environ.get("TELBOT_API_URL") or "https://api.telegram.org"
REQUEST_TIMEOUT: float = _parse_seconds(os.environ.get("TELBOT_REQUEST_TIMEOUT"), 30.0)
POLL_TIMEOUT: int = int(_parse_seconds(os.environ.get("TELBOT_POLL_TIMEOUT"), 1))
LOG_LEVEL: int = _parse_level(os.environ.get("TELBOT_LOG_LEVEL"))
LOG_FILE: str | None = os.environ.get("TELBOT_LOG_FILE") or None


# ── Startup diagnostics ─────────────────────────────────────────────────────

# Handlers belong to the host program; see TelbotLogger.get_logger.
logger = logging.getLogger(__name__)

if BOT_TOKEN:
    logger.info("Config loaded: BOT_TOKEN is set")
else:
    logger.warning("Config loaded: BOT_TOKEN is NOT set")
