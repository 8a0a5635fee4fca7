"""
BlockCypher blockchain provider.

Uses the BlockCypher REST API (token optional, rate-limited without one):
  GET  https://api.blockcypher.com/v1/{coin}/{network}
  GET  .../blocks/{height}
  GET  .../addrs/{address}[/balance]
  POST .../addrs
  POST .../txs/micro
  POST .../txs/push

Micro transactions are signed server-side from the supplied private key, so no
signing happens locally.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .. import config
from .base import UnsupportedCryptoError, check_response

logger = logging.getLogger(__name__)

_CRYPTO_TO_COIN = {
    "bitcoin": "btc",
    "ethereum": "eth",
}


class BlockCypher:
    """Blockchain data and transaction relay via BlockCypher."""

    name = "blockcypher"

    def __init__(
        self,
        crypto: str = "bitcoin",
        *,
        network: Optional[str] = None,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self.crypto = crypto
        self.network = network or config.blockcypher_network()
        self.token = token if token is not None else config.blockcypher_token()
        self.base_url = (base_url or config.blockcypher_base_url()).rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else config.http_timeout_s()

    @property
    def provider_name(self) -> str:
        return self.name

    def _chain_url(self, network: Optional[str] = None) -> str:
        coin = _CRYPTO_TO_COIN.get(self.crypto)
        if coin is None:
            raise UnsupportedCryptoError(self.crypto, self.name)
        return f"{self.base_url}/v1/{coin}/{network or self.network}"

    def _params(self) -> Dict[str, str]:
        return {"token": self.token} if self.token else {}

    def _get(self, path: str = "", network: Optional[str] = None) -> Any:
        url = self._chain_url(network) + path
        logger.debug("GET %s", url)
        resp = requests.get(url, params=self._params(), timeout=self.timeout_s)
        check_response(resp, self.name)
        return resp.json()

    def _post(self, path: str, payload: Optional[Dict[str, Any]] = None, network: Optional[str] = None) -> Any:
        url = self._chain_url(network) + path
        logger.debug("POST %s", url)
        resp = requests.post(url, params=self._params(), json=payload, timeout=self.timeout_s)
        check_response(resp, self.name)
        return resp.json()

    def get_chain(self) -> Dict[str, Any]:
        """Chain summary: height, hash, fees, etc."""
        return self._get()

    def get_last_block_number(self) -> int:
        return int(self.get_chain()["height"])

    def get_block(self, number: int | str) -> Dict[str, Any]:
        """Fetch a block by height or hash."""
        return self._get(f"/blocks/{number}")

    def get_address(self, address: str) -> Dict[str, Any]:
        return self._get(f"/addrs/{address}")

    def get_balance(self, address: str, network: Optional[str] = None) -> int:
        """Final balance of ``address`` in base units (satoshi / wei)."""
        data = self._get(f"/addrs/{address}/balance", network=network)
        return int(data["final_balance"])

    def generate_address(self, network: Optional[str] = None) -> Dict[str, Any]:
        """Generate a new keypair and address, returned as private/public/address(/wif)."""
        return self._post("/addrs", network=network)

    def send_micro(
        self, from_private: str, to_address: str, value: int, network: Optional[str] = None
    ) -> Dict[str, Any]:
        """Send ``value`` base units from the key's address; returns the tx (with ``hash``)."""
        payload = {
            "from_private": from_private,
            "to_address": to_address,
            "value_satoshis": int(value),
        }
        return self._post("/txs/micro", payload, network=network)

    def push_transaction(self, tx_hex: str) -> Dict[str, Any]:
        """Broadcast an already-signed raw transaction."""
        return self._post("/txs/push", {"tx": tx_hex})
