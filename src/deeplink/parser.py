"""Deeplink dispatcher.

Rules are evaluated once, in a fixed order, and the first rule whose predicate matches decides the
result. A matching rule never falls through to a lower-priority one: if its parser finds the body
malformed, the caller gets an intent carrying a diagnostic `message` instead.

Order:
    1) bare addresses: Solana -> Stellar -> Ethereum,
    2) URI schemes: `ethereum:` -> `web+stellar:` -> `solana:`,
    3) `http(s)://` websites.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from src.deeplink.address import address_intent
from src.deeplink.ethereum import is_ethereum_uri, parse_ethereum
from src.deeplink.schema import Chain, DeeplinkIntent
from src.deeplink.solana import is_solana_uri, parse_solana
from src.deeplink.stellar import is_stellar_uri, parse_stellar
from src.deeplink.validators import (
    is_valid_ethereum_address,
    is_valid_solana_address,
    is_valid_stellar_address,
)
from src.deeplink.website import is_website_url, parse_website

logger = logging.getLogger(__name__)


class UnrecognizedFormatError(ValueError):
    """Raised when no rule recognizes the input as a supported deeplink."""


@dataclass(frozen=True)
class ParseResult:
    """Parsed intent plus the name of the rule that produced it."""

    intent: DeeplinkIntent
    source: str


@dataclass(frozen=True)
class _Rule:
    name: str
    matches: Callable[[str], bool]
    parse: Callable[[str], DeeplinkIntent | None]


_RULES: tuple[_Rule, ...] = (
    _Rule("solana_address", is_valid_solana_address, partial(address_intent, Chain.solana)),
    _Rule("stellar_address", is_valid_stellar_address, partial(address_intent, Chain.stellar)),
    _Rule("ethereum_address", is_valid_ethereum_address, partial(address_intent, Chain.ethereum)),
    _Rule("ethereum_uri", is_ethereum_uri, parse_ethereum),
    _Rule("stellar_uri", is_stellar_uri, parse_stellar),
    _Rule("solana_uri", is_solana_uri, parse_solana),
    _Rule("website", is_website_url, parse_website),
)


def parse_deeplink_with_source(text: str) -> ParseResult:
    """Parse text into a DeeplinkIntent.

    Predicates see the input with surrounding whitespace stripped; parsers receive the original
    text so `raw.data` is always the input verbatim.

    Raises:
        UnrecognizedFormatError: If no rule matches.
    """

    candidate = (text or "").strip()
    if candidate:
        for rule in _RULES:
            if not rule.matches(candidate):
                continue

            intent = rule.parse(text)
            if intent is None:
                break
            logger.debug("matched rule=%s type=%s", rule.name, intent.type)
            return ParseResult(intent=intent, source=rule.name)

    raise UnrecognizedFormatError("Unrecognized deeplink format")


def parse_deeplink(text: str) -> DeeplinkIntent:
    """Parse text into a DeeplinkIntent (convenience wrapper)."""

    return parse_deeplink_with_source(text).intent
