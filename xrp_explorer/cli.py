"""Command-line interface for the XRP wallet explorer."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys

from .config import load_config
from .errors import ConfigurationError, ExplorerError
from .logging_setup import configure_logging
from .models import WalletSnapshot
from .services import WalletExplorer


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="xrp-explorer",
        description="Look up an XRP address: balance, recent transactions, fiat value",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    explore_parser = sub.add_parser("explore", help="Explore a single XRP address")
    explore_parser.add_argument("address", help="Classic XRP address (r...)")

    return parser


async def _explore(args: argparse.Namespace) -> WalletSnapshot:
    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        raise ConfigurationError(str(e)) from e
    explorer = WalletExplorer(config)
    return await explorer.explore(args.address)


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)

    try:
        snapshot = asyncio.run(_explore(args))
    except ExplorerError as e:
        error = {"message": e.message, "status": e.status_code}
        print(json.dumps(error, indent=2), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(snapshot.to_dict(), indent=2, default=str))
