"""Deeplink intent schema (Pydantic models).

This schema is the contract between the scheme parsers and whatever renders or acts on a parsed
deeplink (the bot, the CLI, a wallet UI). Every parser must return one of these models; fields that
are not meaningful for a variant are left unset and omitted by `to_dict()`.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class Chain(StrEnum):
    """Supported chain families."""

    ethereum = "ethereum"
    stellar = "stellar"
    solana = "solana"


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class AssetInfo(_Record):
    """Token/asset identity: a contract (EVM, SPL mint) or a Stellar code + issuer pair."""

    code: str | None = None
    issuer: str | None = None
    contract: str | None = None


class FeeInfo(_Record):
    """Gas fields carried by an EIP-681 URI."""

    gas_limit: str | None = None
    gas_price: str | None = None
    max_fee_per_gas: str | None = None
    max_priority_fee_per_gas: str | None = None


class RawPayload(_Record):
    """The untouched input plus dialect-specific opaque payloads."""

    data: str
    xdr: str | None = None


class _Intent(_Record):
    raw: RawPayload

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting unset fields."""

        return self.model_dump(mode="json", exclude_none=True)


class BlockchainIntent(_Intent):
    """Fields shared by every blockchain variant."""

    operation: str | None = None
    address: str | None = None
    amount: str | None = None
    asset: AssetInfo | None = None
    memo: str | None = None
    memo_type: str | None = None
    callback: str | None = None
    origin_domain: str | None = None
    signature: str | None = None
    message: str | None = None
    extra_params: dict[str, str] | None = None

    @model_validator(mode="after")
    def validate_operation(self) -> BlockchainIntent:
        """Operations are canonical lower-case tokens."""

        if self.operation is not None and self.operation != self.operation.lower():
            raise ValueError("operation must be lower-case")
        return self


class EthereumIntent(BlockchainIntent):
    type: Literal["ethereum"] = "ethereum"
    chain_id: int | None = None
    fee: FeeInfo | None = None


class StellarIntent(BlockchainIntent):
    type: Literal["stellar"] = "stellar"
    network_passphrase: str | None = None


class SolanaIntent(BlockchainIntent):
    type: Literal["solana"] = "solana"


class GenericBlockchainIntent(BlockchainIntent):
    """An intent for a chain this package does not parse itself (deserialization only)."""

    type: Literal["blockchain"] = "blockchain"
    chain: str
    chain_id: str | None = None


class AddressIntent(_Intent):
    """A bare address tagged with the chain family it validated against."""

    type: Literal["address"] = "address"
    chain: Chain
    address: str


class WebsiteIntent(_Intent):
    type: Literal["website"] = "website"
    url: str

    @model_validator(mode="after")
    def validate_url(self) -> WebsiteIntent:
        """Website intents only ever carry http(s) links."""

        if not self.url.lower().startswith(("http://", "https://")):
            raise ValueError("url must start with http:// or https://")
        return self


DeeplinkIntent = Annotated[
    EthereumIntent
    | StellarIntent
    | SolanaIntent
    | GenericBlockchainIntent
    | AddressIntent
    | WebsiteIntent,
    Field(discriminator="type"),
]

_INTENT_ADAPTER: TypeAdapter[DeeplinkIntent] = TypeAdapter(DeeplinkIntent)


def intent_from_obj(obj: Any) -> DeeplinkIntent:
    """Validate and parse a DeeplinkIntent from an arbitrary decoded JSON object."""

    return _INTENT_ADAPTER.validate_python(obj)
