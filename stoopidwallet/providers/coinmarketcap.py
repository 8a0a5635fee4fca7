"""
CoinMarketCap price provider.

Uses the public v1 ticker endpoint (no authentication required):
  GET https://api.coinmarketcap.com/v1/ticker/{crypto}/?convert={fiat}
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .. import config
from .base import check_response

logger = logging.getLogger(__name__)


class CoinMarketCap:
    """Fetch ticker data from CoinMarketCap."""

    def __init__(self, base_url: Optional[str] = None, timeout_s: Optional[float] = None) -> None:
        self.base_url = (base_url or config.coinmarketcap_base_url()).rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else config.http_timeout_s()

    @property
    def provider_name(self) -> str:
        return "coinmarketcap"

    def get_price(self, crypto: str, fiat: str = "usd") -> Any:
        """Return the parsed ticker body for ``crypto`` converted to ``fiat``."""
        url = f"{self.base_url}/v1/ticker/{crypto}/"
        logger.debug("GET %s convert=%s", url, fiat)

        resp = requests.get(url, params={"convert": fiat}, timeout=self.timeout_s)
        check_response(resp, self.provider_name)
        return resp.json()
