"""EIP-681 Ethereum URI parser.

Supported grammar (subset of EIP-681):

    ethereum:[pay-]<target>[/<function>][@<chainId>][?<query>]

The target is either a recipient address (native transfer) or a contract address followed by a
function name (token transfer / contract call). For ERC-20 style calls the real recipient is the
`address` query parameter, which therefore overrides the target-derived recipient.
"""

from __future__ import annotations

import logging
import re

from src.deeplink.query import MalformedEncodingError, collect_extras, first_values, split_query
from src.deeplink.schema import AssetInfo, EthereumIntent, FeeInfo, RawPayload
from src.deeplink.validators import is_eth_address_shape

logger = logging.getLogger(__name__)

ETHEREUM_SCHEME = "ethereum:"

_PAY_PREFIX = "pay-"
_FUNCTION_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_HEX_CHAIN_ID_RE = re.compile(r"^0[xX][0-9a-fA-F]+$")
_DEC_CHAIN_ID_RE = re.compile(r"^[0-9]+$")

# Query key -> FeeInfo field. `gas` is an alias for `gasLimit` and is checked first.
_FEE_KEYS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("gas", "gasLimit"), "gas_limit"),
    (("gasPrice",), "gas_price"),
    (("maxFeePerGas",), "max_fee_per_gas"),
    (("maxPriorityFeePerGas",), "max_priority_fee_per_gas"),
)


def is_ethereum_uri(text: str) -> bool:
    return text[: len(ETHEREUM_SCHEME)].lower() == ETHEREUM_SCHEME


def _malformed(raw: RawPayload, what: str) -> EthereumIntent:
    logger.debug("malformed ethereum uri reason=%s", what)
    return EthereumIntent(
        message=f"Error: Invalid Ethereum URI - could not parse {what}",
        raw=raw,
    )


def _parse_chain_id(value: str) -> int | None:
    """Parse `@<chainId>`: hexadecimal when prefixed `0x`, else decimal."""

    if _HEX_CHAIN_ID_RE.fullmatch(value):
        return int(value, 16)
    if _DEC_CHAIN_ID_RE.fullmatch(value):
        return int(value, 10)
    return None


def parse_ethereum(text: str) -> EthereumIntent | None:
    """Parse an `ethereum:` URI.

    Returns:
        `None` if the input does not carry the `ethereum:` scheme. Otherwise an intent; a URI whose
        target, chain id, or encoding cannot be parsed yields an intent with an error `message`.
    """

    candidate = text.strip()
    if not is_ethereum_uri(candidate):
        return None

    raw = RawPayload(data=text)
    body = candidate[len(ETHEREUM_SCHEME):]
    target_and_chain, _, query = body.partition("?")
    target, has_chain, chain_part = target_and_chain.partition("@")
    if target.startswith(_PAY_PREFIX):
        target = target[len(_PAY_PREFIX):]

    recipient: str | None = None
    contract: str | None = None
    operation: str | None = None

    if "/" in target:
        contract_part, _, function = target.partition("/")
        if not is_eth_address_shape(contract_part) or not _FUNCTION_RE.fullmatch(function):
            return _malformed(raw, "target")
        contract = contract_part
        operation = function.lower()
    elif is_eth_address_shape(target):
        recipient = target
    else:
        return _malformed(raw, "target")

    chain_id: int | None = None
    if has_chain:
        chain_id = _parse_chain_id(chain_part)
        if chain_id is None:
            return _malformed(raw, "chain id")

    try:
        pairs = [(k, v) for k, v in split_query(query, form=False) if k and v]
    except MalformedEncodingError:
        return _malformed(raw, "query")

    values = first_values(pairs)
    consumed: list[str] = []

    amount: str | None = None
    for key in ("value", "uint256"):
        if key in values:
            amount = values[key]
            consumed.append(key)
            break

    address_param = values.get("address")
    if address_param is not None and is_eth_address_shape(address_param):
        # ERC-20 form: a plain target is the token contract, the parameter is the recipient.
        if contract is None and recipient is not None:
            contract = recipient
        recipient = address_param
        consumed.append("address")

    fee_fields: dict[str, str] = {}
    for keys, field in _FEE_KEYS:
        for key in keys:
            if key in values:
                fee_fields[field] = values[key]
                consumed.append(key)
                break

    return EthereumIntent(
        operation=operation,
        address=recipient,
        amount=amount,
        asset=AssetInfo(contract=contract) if contract else None,
        chain_id=chain_id,
        fee=FeeInfo(**fee_fields) if fee_fields else None,
        extra_params=collect_extras(pairs, consumed),
        raw=raw,
    )
