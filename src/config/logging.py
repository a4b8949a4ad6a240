"""Logging setup shared by the deeplink bot and the `deeplink` CLI.

Records go to stderr, so CLI output on stdout stays pure JSON.
"""

from __future__ import annotations

import logging
import os

# Per-update chatter from aiogram; the handler already logs one line per message.
_QUIET_LOGGERS = ("aiogram.event", "aiogram.dispatcher")


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    Parser diagnostics (`src.deeplink.*`) are DEBUG only; raw deeplinks are never logged above that.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
