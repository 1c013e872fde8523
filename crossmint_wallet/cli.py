"""Command line entry point for the Crossmint wallet client."""

import argparse
import asyncio
import json
import sys

from loguru import logger

from crossmint_wallet.client import create_wallet, get_wallet, list_wallets
from crossmint_wallet.config import get_settings
from crossmint_wallet.models import WalletOperationResult


def setup_logging(level: str) -> None:
    """Configure loguru logging."""
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crossmint-wallet",
        description="Create, fetch and list Crossmint custodial wallets",
    )
    parser.add_argument(
        "--api-key",
        help="Crossmint API key (default: $CROSSMINT_API_KEY)",
    )
    parser.add_argument(
        "--base-url",
        help="Service root URL (default: $CROSSMINT_BASE_URL or staging)",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (default: $LOG_LEVEL or INFO)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create an MPC wallet")
    create.add_argument("linked_user", help="email:<address> or id:<identifier>")

    get = commands.add_parser("get", help="Fetch a wallet by id")
    get.add_argument("wallet_id")

    commands.add_parser("list", help="List wallets for the API key")

    return parser


async def run(args: argparse.Namespace) -> WalletOperationResult:
    settings = get_settings()
    api_key = args.api_key or settings.crossmint.api_key.get_secret_value()
    base_url = args.base_url or settings.crossmint.base_url

    if args.command == "create":
        return await create_wallet(args.linked_user, api_key, base_url=base_url)
    if args.command == "get":
        return await get_wallet(args.wallet_id, api_key, base_url=base_url)
    return await list_wallets(api_key, base_url=base_url)


def main(argv: list[str] | None = None) -> int:
    """Run one wallet command and print its result as JSON.

    Returns:
        0 on a success result, 1 on an error result.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or get_settings().log.level)

    result = asyncio.run(run(args))
    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
