"""Solana Pay URI parser.

Two request kinds share the `solana:` scheme:
    - transfer request: `solana:<recipient>?amount=...&spl-token=...&reference=...`
    - transaction request: `solana:<url-encoded https link>`; the wallet fetches the transaction
      from that link, so the link becomes the intent's `callback`.
"""

from __future__ import annotations

import logging

from src.deeplink.query import (
    MalformedEncodingError,
    QueryPairs,
    collect_extras,
    decode_component,
    first_values,
    split_query,
)
from src.deeplink.schema import AssetInfo, RawPayload, SolanaIntent
from src.deeplink.validators import is_valid_solana_address

logger = logging.getLogger(__name__)

SOLANA_SCHEME = "solana:"

_TRANSFER_KEYS = frozenset({"amount", "spl-token", "label", "memo", "reference"})
_TRANSACTION_KEYS = frozenset({"label", "memo", "reference"})


def is_solana_uri(text: str) -> bool:
    return text[: len(SOLANA_SCHEME)].lower() == SOLANA_SCHEME


def _is_http_url(value: str) -> bool:
    lowered = value.lower()
    for prefix in ("http://", "https://"):
        if lowered.startswith(prefix) and len(value) > len(prefix):
            return True
    return False


def _references(pairs: QueryPairs) -> dict[str, str] | None:
    # Multi-value: every `reference` is kept, comma-joined in original order.
    references = [value for key, value in pairs if key == "reference"]
    return {"reference": ",".join(references)} if references else None


def _transaction_request(link: str, pairs: QueryPairs, raw: RawPayload) -> SolanaIntent:
    values = first_values(pairs)
    return SolanaIntent(
        operation="transaction",
        callback=link,
        origin_domain=values.get("label"),
        memo=values.get("memo"),
        extra_params=collect_extras(pairs, _TRANSACTION_KEYS, seed=_references(pairs)),
        raw=raw,
    )


def _transfer_request(recipient: str, pairs: QueryPairs, raw: RawPayload) -> SolanaIntent:
    values = first_values(pairs)
    spl_token = values.get("spl-token")
    return SolanaIntent(
        operation="transfer",
        address=recipient,
        amount=values.get("amount"),
        asset=AssetInfo(contract=spl_token) if spl_token else None,
        # Solana Pay `label` names the requester; it bridges onto `origin_domain`.
        origin_domain=values.get("label"),
        memo=values.get("memo"),
        extra_params=collect_extras(pairs, _TRANSFER_KEYS, seed=_references(pairs)),
        raw=raw,
    )


def parse_solana(text: str) -> SolanaIntent | None:
    """Parse a `solana:` URI or a bare Solana address.

    Returns:
        `None` if the input is neither. A transfer request whose recipient is not a valid address
        yields an intent with only `type`, `operation` and `raw`; `address` is deliberately left
        out rather than populated with an invalid value.
    """

    candidate = text.strip()
    if not is_solana_uri(candidate):
        if is_valid_solana_address(candidate):
            return SolanaIntent(address=candidate, raw=RawPayload(data=text))
        return None

    raw = RawPayload(data=text)
    path, _, query = candidate[len(SOLANA_SCHEME):].partition("?")

    try:
        target = decode_component(path)
        pairs = split_query(query, form=True)
    except MalformedEncodingError:
        logger.debug("malformed solana uri encoding")
        return SolanaIntent(operation="transfer", raw=raw)

    if _is_http_url(target):
        return _transaction_request(target, pairs, raw)

    if not is_valid_solana_address(target):
        logger.debug("invalid solana recipient")
        return SolanaIntent(operation="transfer", raw=raw)

    return _transfer_request(target, pairs, raw)
