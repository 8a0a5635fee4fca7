"""Per-coin wallet delegates used by the StoopidWallet facade."""
from __future__ import annotations

from .bitcoin import BitcoinWallet
from .errors import WalletError
from .ethereum import EthereumWallet

__all__ = ["BitcoinWallet", "EthereumWallet", "WalletError"]
