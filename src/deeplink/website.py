"""Website passthrough: any http(s) link is returned as-is, minus surrounding whitespace."""

from __future__ import annotations

from src.deeplink.schema import RawPayload, WebsiteIntent

_WEB_PREFIXES = ("http://", "https://")


def is_website_url(text: str) -> bool:
    return text.lower().startswith(_WEB_PREFIXES)


def parse_website(text: str) -> WebsiteIntent | None:
    candidate = text.strip()
    if not is_website_url(candidate):
        return None
    return WebsiteIntent(url=candidate, raw=RawPayload(data=text))
