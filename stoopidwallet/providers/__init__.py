"""
Provider clients for blockchain data and fiat prices.

BlockCypher serves chain/address/transaction calls; CoinMarketCap serves
price tickers. Blockchain providers are looked up by name via ApiRegistry.
"""

from __future__ import annotations

from .base import (
    SUPPORTED_CRYPTOS,
    BlockchainApi,
    HTTPStatusError,
    PriceProvider,
    ProviderError,
    UnsupportedCryptoError,
)
from .blockcypher import BlockCypher
from .coinmarketcap import CoinMarketCap
from .registry import ApiRegistry, create_default_registry

__all__ = [
    "SUPPORTED_CRYPTOS",
    "BlockchainApi",
    "PriceProvider",
    "ProviderError",
    "HTTPStatusError",
    "UnsupportedCryptoError",
    "BlockCypher",
    "CoinMarketCap",
    "ApiRegistry",
    "create_default_registry",
]
