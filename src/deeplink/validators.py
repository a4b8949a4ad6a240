"""Address validators, one pure predicate per chain family."""

from __future__ import annotations

import re

from eth_utils import is_checksum_address, is_hex_address
from solders.pubkey import Pubkey
from stellar_sdk import StrKey

# Shape only (no checksum): used where a URI position merely needs to look like an address.
ETH_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")

_SOLANA_PUBKEY_LEN = 32
_BASE58_ALPHABET = frozenset("123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz")


def is_eth_address_shape(value: str) -> bool:
    return ETH_ADDRESS_RE.fullmatch(value) is not None


def is_valid_ethereum_address(value: str) -> bool:
    """Whether `value` is `0x` + 40 hex chars with a valid EIP-55 checksum when mixed-case."""

    if not is_eth_address_shape(value) or not is_hex_address(value):
        return False
    digits = value[2:]
    if digits.lower() != digits and digits.upper() != digits:
        return is_checksum_address(value)
    return True


def is_valid_stellar_address(value: str) -> bool:
    """Whether `value` is a strkey-encoded ed25519 public key (`G...`)."""

    return StrKey.is_valid_ed25519_public_key(value)


def is_valid_solana_address(value: str) -> bool:
    """Whether `value` Base58-decodes to exactly a 32-byte public key."""

    if not value or not set(value) <= _BASE58_ALPHABET:
        return False
    try:
        pubkey = Pubkey.from_string(value)
    except ValueError:
        return False
    return len(bytes(pubkey)) == _SOLANA_PUBKEY_LEN
