"""Percent-decoding and query-string helpers shared by the scheme parsers.

Decoding is strict about UTF-8: a byte sequence that does not decode raises
`MalformedEncodingError`, which each parser turns into its own malformed-result intent. Nothing
here is allowed to leak any other exception type.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from urllib.parse import parse_qsl, unquote


class MalformedEncodingError(ValueError):
    """Raised when a URI component is not valid percent-encoded UTF-8."""


QueryPairs = list[tuple[str, str]]


def decode_component(value: str) -> str:
    """Percent-decode a single URI component (`+` is kept literally)."""

    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedEncodingError(f"invalid percent-encoding: {value!r}") from exc


def split_query(query: str, *, form: bool) -> QueryPairs:
    """Split a query string into decoded `(key, value)` pairs, preserving order and duplicates.

    Args:
        query: The text after `?` (may be empty).
        form: Use `application/x-www-form-urlencoded` rules (`+` means space). Otherwise each
            component is decoded like a plain URI component.
    """

    if not query:
        return []

    if form:
        try:
            return parse_qsl(query, keep_blank_values=True, errors="strict")
        except UnicodeDecodeError as exc:
            raise MalformedEncodingError(f"invalid percent-encoding in query: {query!r}") from exc

    pairs: QueryPairs = []
    for piece in query.split("&"):
        key, _, value = piece.partition("=")
        pairs.append((decode_component(key), decode_component(value)))
    return pairs


def first_values(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Map each key to its first occurrence."""

    values: dict[str, str] = {}
    for key, value in pairs:
        values.setdefault(key, value)
    return values


def collect_extras(
        pairs: Iterable[tuple[str, str]],
        consumed: Iterable[str],
        *,
        seed: Mapping[str, str] | None = None,
) -> dict[str, str] | None:
    """Collect every pair whose key was not mapped onto a named field.

    Repeated keys are comma-joined in original order so that no value is dropped. Returns `None`
    when there is nothing to report (intents leave `extra_params` unset rather than empty).
    """

    skip = set(consumed)
    grouped: dict[str, list[str]] = {}
    for key, value in pairs:
        if key in skip:
            continue
        grouped.setdefault(key, []).append(value)

    extras = dict(seed or {})
    for key, values in grouped.items():
        extras[key] = ",".join(values)
    return extras or None
