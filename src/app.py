"""Application composition root.

This module wires together configuration for the bot runtime.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.config.settings import Settings


@dataclass(frozen=True)
class App:
    """Shared application dependencies for handlers."""

    settings: Settings


def create_app(settings: Settings) -> App:
    """Create the application container."""

    return App(settings=settings)
