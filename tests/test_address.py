"""Tests for bare-address validators and chain classification."""

from __future__ import annotations

import pytest

from src.deeplink.address import classify_address, detect_chain
from src.deeplink.schema import AddressIntent, Chain
from src.deeplink.validators import (
    is_valid_ethereum_address,
    is_valid_solana_address,
    is_valid_stellar_address,
)

SOLANA_ADDRESS = "mvines9iiHiQTysrwkJjGf2gb9Ex9jXJX8ns3qwf2kN"
STELLAR_ADDRESS = "GC65CUPW2IMTJJY6CII7F3OBPVG4YGASEPBBLM4V3LBKX62P6LA24OFV"
ETH_ADDRESS = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def test_solana_validator() -> None:
    assert is_valid_solana_address(SOLANA_ADDRESS)
    assert is_valid_solana_address("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
    assert not is_valid_solana_address("mvines9iiHiQTysrwkJjGf2gb9Ex9jXJX8ns3qwf2k")
    assert not is_valid_solana_address("INVALID_SOLANA_ADDRESS")
    assert not is_valid_solana_address("0OIl" * 11)
    assert not is_valid_solana_address("")


def test_stellar_validator() -> None:
    assert is_valid_stellar_address(STELLAR_ADDRESS)
    assert not is_valid_stellar_address(STELLAR_ADDRESS[:-1])
    assert not is_valid_stellar_address("A" + STELLAR_ADDRESS[1:])
    assert not is_valid_stellar_address("")


def test_ethereum_validator() -> None:
    assert is_valid_ethereum_address(ETH_ADDRESS)
    assert is_valid_ethereum_address(ETH_ADDRESS.lower())
    assert is_valid_ethereum_address("0x" + ETH_ADDRESS[2:].upper())
    assert not is_valid_ethereum_address(ETH_ADDRESS[2:])
    assert not is_valid_ethereum_address("0x5AAeb6053F3E94C9b9A09f33669435E7Ef1BeAed")
    assert not is_valid_ethereum_address("0x1234")


@pytest.mark.parametrize(
    "value",
    [
        "0x5AAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
        "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAeD",
        "0x71c7656EC7ab88b098defB751B7401B5f6d8976F",
    ],
)
def test_ethereum_validator_rejects_mixed_case_with_bad_checksum(value: str) -> None:
    assert not is_valid_ethereum_address(value)


@pytest.mark.parametrize(
    ("text", "chain"),
    [
        (SOLANA_ADDRESS, Chain.solana),
        (STELLAR_ADDRESS, Chain.stellar),
        (ETH_ADDRESS, Chain.ethereum),
        (f" {ETH_ADDRESS}\n", Chain.ethereum),
        ("not-an-address", None),
    ],
)
def test_detect_chain(text: str, chain: Chain | None) -> None:
    assert detect_chain(text) == chain


def test_classify_address() -> None:
    intent = classify_address(STELLAR_ADDRESS)
    assert isinstance(intent, AddressIntent)
    assert intent.to_dict() == {
        "type": "address",
        "chain": "stellar",
        "address": STELLAR_ADDRESS,
        "raw": {"data": STELLAR_ADDRESS},
    }
    assert classify_address("solana:abc") is None
