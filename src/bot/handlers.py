"""aiogram message handlers.

Hard contract: every incoming message produces exactly one reply. A recognized deeplink (even a
malformed one) is answered with the intent as JSON; anything else, including internal errors, is
answered with `UNSUPPORTED_REPLY` and logged internally.
"""

from __future__ import annotations

import json
import logging
from time import monotonic
from typing import Any

from aiogram.types import Message

from src.app import App
from src.deeplink.parser import UnrecognizedFormatError, parse_deeplink_with_source

logger = logging.getLogger(__name__)

UNSUPPORTED_REPLY = "Unsupported deeplink"


def _is_command_text(text: str) -> bool:
    return text.lstrip().startswith("/")


def render_intent(intent_dict: dict[str, Any], indent: int) -> str:
    """Render a serialized intent as the bot reply body."""

    return json.dumps(intent_dict, ensure_ascii=False, indent=indent or None)


async def handle_message(message: Message, app: App) -> None:
    """Handle any incoming Telegram message and reply exactly once."""

    started = monotonic()
    reply = UNSUPPORTED_REPLY

    # noinspection PyBroadException
    try:
        raw_text = (message.text or message.caption or "")
        if not raw_text.strip() or _is_command_text(raw_text):
            await message.answer(UNSUPPORTED_REPLY)
            return

        parse_result = parse_deeplink_with_source(raw_text)
        reply = render_intent(parse_result.intent.to_dict(), app.settings.bot_reply_indent)

        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "handled source=%s type=%s latency_ms=%d",
            parse_result.source,
            parse_result.intent.type,
            latency_ms,
        )
    except UnrecognizedFormatError as exc:
        latency_ms = int((monotonic() - started) * 1000)
        logger.info("unsupported reason=%s latency_ms=%d", exc, latency_ms)
    except Exception:
        # Handler boundary: any internal error must still produce the single fixed reply,
        # without leaking details.
        logger.exception("handler failed")
        reply = UNSUPPORTED_REPLY

    await message.answer(reply)
