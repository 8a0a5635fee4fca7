"""Ethereum wallet delegate backed by a BlockCypher client pinned to ethereum."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..providers.blockcypher import BlockCypher
from .errors import WalletError

logger = logging.getLogger(__name__)


def _strip_0x(value: str) -> str:
    return value[2:] if value.lower().startswith("0x") else value


class EthereumWallet:
    """Ethereum wallet records plus a two-step create/send transaction flow."""

    crypto = "ethereum"

    def __init__(self, client: Optional[BlockCypher] = None) -> None:
        self.client = client or BlockCypher(self.crypto)

    def create_wallet(self) -> Dict[str, Any]:
        keypair = self.client.generate_address()
        record = {k: keypair[k] for k in ("address", "private", "public") if k in keypair}
        logger.info("Created ethereum wallet %s", record.get("address"))
        return record

    def import_wallet(self, key: str, address: Optional[str] = None) -> Dict[str, Any]:
        """Wrap an existing private key. The address is not derived locally."""
        record: Dict[str, Any] = {"private": _strip_0x(key)}
        if address:
            record["address"] = _strip_0x(address)
        return record

    def get_balance(self, address: Optional[str]) -> int:
        if not address:
            raise WalletError("ethereum wallet has no address")
        return self.client.get_balance(_strip_0x(address))

    def create_transaction(self, to_addr: str, amount: int, wallet: Dict[str, Any]) -> Dict[str, Any]:
        """Build the relay payload for sending ``amount`` wei to ``to_addr``."""
        private = wallet.get("private")
        if not private:
            raise WalletError("ethereum wallet has no private key")
        if int(amount) <= 0:
            raise ValueError(f"amount must be positive, got {amount}")
        return {
            "raw_transaction": {
                "from_private": private,
                "to_address": _strip_0x(to_addr),
                "value": int(amount),
            }
        }

    def send_transaction(self, raw_transaction: Dict[str, Any]) -> str:
        """Relay a transaction built by create_transaction; returns its hash."""
        tx = self.client.send_micro(
            raw_transaction["from_private"],
            raw_transaction["to_address"],
            raw_transaction["value"],
        )
        return tx["hash"]
