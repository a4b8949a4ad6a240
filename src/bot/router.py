"""Router that sends every incoming message, text or captioned media, to the deeplink handler."""

from __future__ import annotations

from aiogram import Router

from src.bot.handlers import handle_message

router = Router(name="deeplink")
router.message.register(handle_message)
