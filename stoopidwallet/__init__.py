"""
Top-level public API surface.
Canonical entrypoint: from stoopidwallet import StoopidWallet.
Does not import cli.
"""

from __future__ import annotations

from ._version import __version__
from .coins import BitcoinWallet, EthereumWallet, WalletError
from .providers import (
    ApiRegistry,
    BlockCypher,
    CoinMarketCap,
    HTTPStatusError,
    ProviderError,
    UnsupportedCryptoError,
)
from .wallet import StoopidWallet

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "StoopidWallet",
    "BitcoinWallet",
    "EthereumWallet",
    "WalletError",
    "ApiRegistry",
    "BlockCypher",
    "CoinMarketCap",
    "ProviderError",
    "HTTPStatusError",
    "UnsupportedCryptoError",
]
