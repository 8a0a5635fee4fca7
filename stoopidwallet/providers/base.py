"""
Provider interfaces and error types.

Blockchain providers implement BlockchainApi and price feeds implement
PriceProvider. Responses are returned as parsed JSON dicts, unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

SUPPORTED_CRYPTOS = ("bitcoin", "ethereum")


class ProviderError(RuntimeError):
    """Base error for a failed provider call."""


class HTTPStatusError(ProviderError):
    """Provider answered with a non-2xx status."""

    def __init__(self, status_code: int, provider_name: str = "") -> None:
        super().__init__(f"statusCode={status_code}")
        self.status_code = status_code
        self.provider_name = provider_name


class UnsupportedCryptoError(ProviderError):
    """Provider does not serve the requested crypto."""

    def __init__(self, crypto: str, provider_name: str) -> None:
        super().__init__(f"{provider_name} does not support crypto '{crypto}'")
        self.crypto = crypto
        self.provider_name = provider_name


def check_response(resp: Any, provider_name: str) -> None:
    """Raise HTTPStatusError unless the response status is 2xx."""
    status = resp.status_code
    if status < 200 or status >= 300:
        logger.warning("%s returned HTTP %s", provider_name, status)
        raise HTTPStatusError(status, provider_name)


@runtime_checkable
class BlockchainApi(Protocol):
    """Protocol for blockchain data providers (BlockCypher, etc.)."""

    name: str
    crypto: str

    def get_last_block_number(self) -> int: ...

    def get_block(self, number: int | str) -> Dict[str, Any]: ...

    def get_balance(self, address: str) -> int: ...


@runtime_checkable
class PriceProvider(Protocol):
    """Protocol for fiat price feeds."""

    @property
    def provider_name(self) -> str: ...

    def get_price(self, crypto: str, fiat: str = "usd") -> Any: ...

