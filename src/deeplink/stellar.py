"""SEP-0007 Stellar URI parser.

Supported operations:
    - `web+stellar:pay?destination=...` (payment request)
    - `web+stellar:tx?xdr=...` (sign a pre-built transaction envelope)

A bare strkey ed25519 public key (`G...`) is accepted as a plain Stellar address.
"""

from __future__ import annotations

import logging
import re

from src.deeplink.query import (
    MalformedEncodingError,
    QueryPairs,
    collect_extras,
    first_values,
    split_query,
)
from src.deeplink.schema import AssetInfo, RawPayload, StellarIntent
from src.deeplink.validators import is_valid_stellar_address

logger = logging.getLogger(__name__)

STELLAR_SCHEME = "web+stellar:"

_OPERATION_RE = re.compile(r"^(?P<operation>pay|tx)(?:\?(?P<query>.*))?$", flags=re.DOTALL)

_COMMON_KEYS = frozenset(
    {
        "memo",
        "memo_type",
        "callback",
        "msg",
        "network_passphrase",
        "origin_domain",
        "signature",
    }
)
_PAY_KEYS = _COMMON_KEYS | {"destination", "amount", "asset_code", "asset_issuer"}
_TX_KEYS = _COMMON_KEYS | {"xdr"}

MISSING_DESTINATION = "Error: Invalid Stellar payment URI - missing destination"
INVALID_DESTINATION = "Error: Invalid Stellar payment URI - invalid destination address"
MISSING_XDR = "Error: Invalid Stellar transaction URI - missing XDR"
UNSUPPORTED_OPERATION = "Error: Invalid Stellar URI - unsupported operation"
MALFORMED_QUERY = "Error: Invalid Stellar URI - malformed query"


def is_stellar_uri(text: str) -> bool:
    return text[: len(STELLAR_SCHEME)].lower() == STELLAR_SCHEME


def _param(values: dict[str, str], key: str) -> str | None:
    """Return the trimmed first value of `key`, or `None` when absent or blank."""

    value = values.get(key, "").strip()
    return value or None


def _common_fields(values: dict[str, str]) -> dict[str, str | None]:
    return {
        "memo": _param(values, "memo"),
        "memo_type": _param(values, "memo_type"),
        "callback": _param(values, "callback"),
        "network_passphrase": _param(values, "network_passphrase"),
        "origin_domain": _param(values, "origin_domain"),
        "signature": _param(values, "signature"),
    }


def _payment_message(amount: str | None, asset: AssetInfo | None, msg: str | None) -> str:
    label = (asset.code or asset.contract) if asset is not None else None

    summary = "Stellar payment"
    if amount:
        summary += f" for {amount}"
        if label:
            summary += f" {label}"
    elif label:
        summary += f" in {label}"

    if msg:
        summary += f" - {msg}"
    return summary


def _transaction_message(msg: str | None) -> str:
    return f"Stellar transaction - {msg}" if msg else "Stellar transaction"


def _parse_pay(pairs: QueryPairs, raw: RawPayload) -> StellarIntent:
    values = first_values(pairs)

    destination = _param(values, "destination")
    if destination is None:
        return StellarIntent(operation="pay", message=MISSING_DESTINATION, raw=raw)
    if not is_valid_stellar_address(destination):
        return StellarIntent(operation="pay", message=INVALID_DESTINATION, raw=raw)

    amount = _param(values, "amount")
    asset_code = _param(values, "asset_code")
    asset_issuer = _param(values, "asset_issuer")
    asset = AssetInfo(code=asset_code, issuer=asset_issuer) if asset_code or asset_issuer else None

    return StellarIntent(
        operation="pay",
        address=destination,
        amount=amount,
        asset=asset,
        message=_payment_message(amount, asset, _param(values, "msg")),
        extra_params=collect_extras(pairs, _PAY_KEYS),
        raw=raw,
        **_common_fields(values),
    )


def _parse_tx(pairs: QueryPairs, raw: RawPayload) -> StellarIntent:
    values = first_values(pairs)

    xdr = _param(values, "xdr")
    if xdr is None:
        return StellarIntent(operation="tx", message=MISSING_XDR, raw=raw)

    return StellarIntent(
        operation="tx",
        message=_transaction_message(_param(values, "msg")),
        extra_params=collect_extras(pairs, _TX_KEYS),
        raw=RawPayload(data=raw.data, xdr=xdr),
        **_common_fields(values),
    )


def parse_stellar(text: str) -> StellarIntent | None:
    """Parse a `web+stellar:` URI or a bare Stellar address.

    Returns:
        `None` if the input is neither. A recognized URI with a missing or invalid required field
        yields an intent whose `message` describes the defect.
    """

    candidate = text.strip()
    if not is_stellar_uri(candidate):
        if is_valid_stellar_address(candidate):
            return StellarIntent(address=candidate, raw=RawPayload(data=text))
        return None

    raw = RawPayload(data=text)
    match = _OPERATION_RE.fullmatch(candidate[len(STELLAR_SCHEME):])
    if match is None:
        logger.debug("unsupported stellar operation")
        return StellarIntent(message=UNSUPPORTED_OPERATION, raw=raw)

    operation = match.group("operation")
    try:
        pairs = split_query(match.group("query") or "", form=True)
    except MalformedEncodingError:
        logger.debug("malformed stellar query")
        return StellarIntent(operation=operation, message=MALFORMED_QUERY, raw=raw)

    if operation == "pay":
        return _parse_pay(pairs, raw)
    return _parse_tx(pairs, raw)
