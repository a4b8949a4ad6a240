"""Bare-address detection.

Detectors run most specific encoding first: Solana (Base58, 32-byte key) -> Stellar (strkey) ->
Ethereum (0x + 40 hex). The encodings do not overlap, but the order is still fixed so results are
deterministic.
"""

from __future__ import annotations

from collections.abc import Callable

from src.deeplink.schema import (
    AddressIntent,
    BlockchainIntent,
    Chain,
    EthereumIntent,
    RawPayload,
    SolanaIntent,
    StellarIntent,
)
from src.deeplink.validators import (
    is_valid_ethereum_address,
    is_valid_solana_address,
    is_valid_stellar_address,
)

_DETECTORS: tuple[tuple[Chain, Callable[[str], bool]], ...] = (
    (Chain.solana, is_valid_solana_address),
    (Chain.stellar, is_valid_stellar_address),
    (Chain.ethereum, is_valid_ethereum_address),
)

_CHAIN_MODELS: dict[Chain, type[BlockchainIntent]] = {
    Chain.solana: SolanaIntent,
    Chain.stellar: StellarIntent,
    Chain.ethereum: EthereumIntent,
}


def detect_chain(text: str) -> Chain | None:
    """Return the first chain family whose address validator accepts `text`."""

    candidate = text.strip()
    for chain, is_valid in _DETECTORS:
        if is_valid(candidate):
            return chain
    return None


def address_intent(chain: Chain, text: str) -> BlockchainIntent:
    """Build the minimal address-only intent (no operation) for `chain`."""

    return _CHAIN_MODELS[chain](address=text.strip(), raw=RawPayload(data=text))


def classify_address(text: str) -> AddressIntent | None:
    """Tag a bare address with its chain family, without building a chain-specific record."""

    chain = detect_chain(text)
    if chain is None:
        return None
    return AddressIntent(chain=chain, address=text.strip(), raw=RawPayload(data=text))
