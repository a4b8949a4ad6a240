"""Parse deeplinks from the command line and print each intent as JSON.

Example:
    python -m src.cli "solana:mvines9iiHiQTysrwkJjGf2gb9Ex9jXJX8ns3qwf2kN?amount=1"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from dotenv import load_dotenv

from src.config.logging import configure_logging
from src.deeplink.parser import UnrecognizedFormatError, parse_deeplink_with_source

logger = logging.getLogger(__name__)


def run(inputs: Sequence[str], *, indent: int | None, with_source: bool) -> int:
    """Parse every input, print results, and return the process exit status."""

    status = 0
    for text in inputs:
        try:
            result = parse_deeplink_with_source(text)
        except UnrecognizedFormatError as exc:
            print(f"{text!r}: {exc}", file=sys.stderr)
            status = 1
            continue

        payload = result.intent.to_dict()
        if with_source:
            payload = {"source": result.source, "intent": payload}
        print(json.dumps(payload, ensure_ascii=False, indent=indent))
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for parsing deeplinks."""

    parser = argparse.ArgumentParser(description="Parse payment deeplinks into normalized intents.")
    parser.add_argument("inputs", nargs="+", help="Deeplinks, addresses, or URLs to parse.")
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print JSON with the given indent (compact by default).",
    )
    parser.add_argument(
        "--with-source",
        action="store_true",
        help="Wrap each result with the name of the rule that recognized it.",
    )
    args = parser.parse_args(argv)

    load_dotenv(".env")
    configure_logging()

    return run(args.inputs, indent=args.indent, with_source=args.with_source)


if __name__ == "__main__":
    sys.exit(main())
