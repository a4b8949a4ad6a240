"""Tests for process logging setup and bot routing."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from src.bot.handlers import handle_message
from src.bot.router import router
from src.config.logging import configure_logging


@pytest.fixture
def _restore_aiogram_levels() -> Iterator[None]:
    names = ("aiogram.event", "aiogram.dispatcher")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.usefixtures("_restore_aiogram_levels")
def test_aiogram_update_chatter_is_quieted() -> None:
    configure_logging("debug")

    assert logging.getLogger("aiogram.event").level == logging.WARNING
    assert logging.getLogger("aiogram.dispatcher").level == logging.WARNING


def test_router_sends_messages_to_deeplink_handler() -> None:
    assert router.name == "deeplink"
    assert [handler.callback for handler in router.message.handlers] == [handle_message]
