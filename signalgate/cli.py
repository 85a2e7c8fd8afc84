"""
signalgate: query crypto sentiment from the command line.

Usage:
    signalgate BTC
    signalgate ETH --env .env --json
    signalgate SOL --endpoint http://localhost:8402/api/sentiment-x402 -v
    signalgate --tools
"""

import argparse
import asyncio
import json
import logging
import sys

from .client import SignalGateClient
from .config import ClientConfig
from .errors import RequestError
from .models import TICKERS
from .sentiment_skill import build_sentiment_skill


def build_parser():
    parser = argparse.ArgumentParser(prog="signalgate", description="SignalGate x402 sentiment client")
    parser.add_argument("ticker", nargs="?", type=str.upper, choices=TICKERS, help="Crypto ticker to analyze")
    parser.add_argument("--env", "-e", default=None, help="Path to .env file")
    parser.add_argument("--endpoint", default=None, help="Override SIGNALGATE_URL")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds")
    parser.add_argument("--no-pay", action="store_true", help="Do not pay on 402 (deprecated behaviour)")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    parser.add_argument("--tools", action="store_true", help="Print the skill's tool schema and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None, transport=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)-12s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    if args.tools:
        print(json.dumps(build_sentiment_skill().tool_schema(), indent=2))
        return 0

    if not args.ticker:
        parser.error("ticker is required")

    try:
        config = ClientConfig.from_env(
            env_file=args.env,
            endpoint=args.endpoint,
            timeout=args.timeout,
            auto_pay=False if args.no_pay else None,
        )
    except ValueError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 2

    client = SignalGateClient(config, transport=transport)
    try:
        result = asyncio.run(client.get_sentiment(args.ticker))
    except RequestError as e:
        print(f"❌ {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.model_dump(exclude_none=True), indent=2))
    else:
        print(f"{result.ticker}: {result.signal.upper()} (confidence {result.confidence:.2f})")
        print(f"   {result.reasoning}")
        if result.timestamp:
            print(f"   as of {result.timestamp}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
