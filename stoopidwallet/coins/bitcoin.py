"""Bitcoin wallet delegate backed by a BlockCypher client pinned to bitcoin."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..providers.blockcypher import BlockCypher
from .errors import WalletError

logger = logging.getLogger(__name__)


class BitcoinWallet:
    """Create/import bitcoin wallet records, read balances and send coins."""

    crypto = "bitcoin"

    def __init__(self, client: Optional[BlockCypher] = None) -> None:
        self.client = client or BlockCypher(self.crypto)

    def create_wallet(self, network: str = "", key: Optional[str] = None) -> Dict[str, Any]:
        """
        Generate a new address on ``network`` (client default when empty), or
        wrap an existing private key when ``key`` is given.
        """
        if key:
            record: Dict[str, Any] = {"private": key}
            if network:
                record["network"] = network
            return record

        keypair = self.client.generate_address(network=network or None)
        record = {k: keypair[k] for k in ("address", "private", "public", "wif") if k in keypair}
        record["network"] = network or self.client.network
        logger.info("Created bitcoin wallet %s on %s", record.get("address"), record["network"])
        return record

    def get_balance(self, address: Optional[str], network: Optional[str] = None) -> int:
        if not address:
            raise WalletError("bitcoin wallet has no address")
        return self.client.get_balance(address, network=network or None)

    def send_bitcoin(self, amount: int, to_addr: str, wallet: Dict[str, Any]) -> str:
        """Send ``amount`` satoshis to ``to_addr``; returns the transaction hash."""
        private = wallet.get("wif") or wallet.get("private")
        if not private:
            raise WalletError("bitcoin wallet has no private key")
        if int(amount) <= 0:
            raise ValueError(f"amount must be positive, got {amount}")
        tx = self.client.send_micro(private, to_addr, amount, network=wallet.get("network") or None)
        return tx["hash"]
