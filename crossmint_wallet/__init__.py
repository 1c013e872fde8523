"""Async client for the Crossmint custodial wallet API."""

from crossmint_wallet.client import create_wallet, get_wallet, list_wallets
from crossmint_wallet.models import (
    WalletError,
    WalletListResult,
    WalletOperationResult,
    WalletRecord,
    WalletResult,
)

__all__ = [
    "WalletError",
    "WalletListResult",
    "WalletOperationResult",
    "WalletRecord",
    "WalletResult",
    "create_wallet",
    "get_wallet",
    "list_wallets",
]
