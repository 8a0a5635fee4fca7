"""
Command-line entrypoint: stoopidwallet <command> [args...].
Each command builds a StoopidWallet for the chosen crypto and prints JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

import requests

from . import __version__, config
from .providers.base import SUPPORTED_CRYPTOS, ProviderError
from .wallet import StoopidWallet

logger = logging.getLogger(__name__)


def _cmd_price(sw: StoopidWallet, args: argparse.Namespace) -> Any:
    return sw.get_price(args.fiat)


def _cmd_height(sw: StoopidWallet, args: argparse.Namespace) -> Any:
    return sw.get_last_block_number()


def _cmd_block(sw: StoopidWallet, args: argparse.Namespace) -> Any:
    return sw.get_block(args.number)


def _cmd_balance(sw: StoopidWallet, args: argparse.Namespace) -> Any:
    sw.get_wallet()["address"] = args.address
    return {"address": args.address, "balance": sw.get_balance()}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stoopidwallet",
        description="Query blockchain and price APIs through one wallet facade",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    parser.add_argument("--api", default=None, help="blockchain API (default from config)")
    parser.add_argument(
        "--crypto",
        choices=SUPPORTED_CRYPTOS,
        default=None,
        help="active crypto (default from config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("price", help="Fiat ticker from CoinMarketCap")
    p.add_argument("--fiat", default=None, help="fiat to convert into (default from config)")
    p.set_defaults(func=_cmd_price)

    p = subparsers.add_parser("height", help="Latest block number")
    p.set_defaults(func=_cmd_height)

    p = subparsers.add_parser("block", help="Block by height or hash")
    p.add_argument("number", help="block height or hash")
    p.set_defaults(func=_cmd_block)

    p = subparsers.add_parser("balance", help="Final balance of an address")
    p.add_argument("address")
    p.set_defaults(func=_cmd_balance)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    crypto = args.crypto or config.default_crypto()
    if crypto not in SUPPORTED_CRYPTOS:
        print(
            f"unsupported crypto '{crypto}' (choose from {', '.join(SUPPORTED_CRYPTOS)})",
            file=sys.stderr,
        )
        return 1

    sw = StoopidWallet(args.api, crypto)
    try:
        result = args.func(sw, args)
    except (ProviderError, requests.RequestException) as exc:
        print(f"{args.command} failed: {exc}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
