"""
StoopidWallet: one object in front of several coins and blockchain APIs.

The facade keeps the active crypto and the active blockchain API, and routes
balance/block/transaction calls to the matching coin delegate or provider.
Selections outside the known cryptos and registered APIs are silent no-ops.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from . import config
from .coins import BitcoinWallet, EthereumWallet
from .providers.base import BlockchainApi, PriceProvider, ProviderError
from .providers.coinmarketcap import CoinMarketCap
from .providers.registry import ApiRegistry, create_default_registry

logger = logging.getLogger(__name__)


class StoopidWallet:
    """
    Connects the coin delegates and providers behind a single endpoint.

    Usage:
        sw = StoopidWallet()              # blockcypher + bitcoin
        sw.set_crypto("ethereum")
        sw.create_wallet()
        sw.get_balance()
    """

    def __init__(
        self,
        api: Optional[str] = None,
        crypto: Optional[str] = None,
        *,
        registry: Optional[ApiRegistry] = None,
        coins: Optional[Dict[str, Any]] = None,
        prices: Optional[PriceProvider] = None,
    ) -> None:
        self.wallet: Dict[str, Dict[str, Any]] = {
            "bitcoin": {},
            "ethereum": {},
        }
        self.crypto = crypto or config.default_crypto()
        self._registry = registry or create_default_registry()
        self._coins = coins if coins is not None else {
            "bitcoin": BitcoinWallet(),
            "ethereum": EthereumWallet(),
        }
        self._prices = prices
        self.api: Optional[BlockchainApi] = None

        api = api or config.default_api()
        if api in self._registry:
            self.api = self._registry.get(api, self.crypto)

    def set_crypto(self, crypto: str) -> str:
        """Set the active crypto; returns it."""
        self.crypto = crypto
        if self.api is not None:
            self.api.crypto = crypto
        return self.crypto

    def get_crypto(self) -> str:
        return self.crypto

    def set_api(self, api: str) -> Optional[str]:
        """Switch to a registered API; unknown names keep the current one."""
        if api in self._registry:
            self.api = self._registry.get(api, self.crypto)
        else:
            logger.debug("Ignoring unknown API '%s'", api)
        return self.get_api()

    def get_api(self) -> Optional[str]:
        return self.api.name if self.api is not None else None

    def _require_api(self) -> BlockchainApi:
        if self.api is None:
            raise ProviderError("No blockchain API selected")
        return self.api

    def get_last_block_number(self) -> int:
        return self._require_api().get_last_block_number()

    def get_block(self, number: int | str) -> Dict[str, Any]:
        return self._require_api().get_block(number)

    def get_all_wallets(self) -> Dict[str, Dict[str, Any]]:
        return self.wallet

    def get_wallet(self) -> Optional[Dict[str, Any]]:
        """The wallet record of the active crypto, or None if unrecognized."""
        if self.crypto == "bitcoin":
            return self.wallet["bitcoin"]
        if self.crypto == "ethereum":
            return self.wallet["ethereum"]
        return None

    def get_balance(self) -> Optional[int]:
        """Balance of the active wallet in base units."""
        if self.crypto == "bitcoin":
            btc = self.wallet["bitcoin"]
            return self._coins["bitcoin"].get_balance(btc.get("address"), btc.get("network"))
        if self.crypto == "ethereum":
            return self._coins["ethereum"].get_balance(self.wallet["ethereum"].get("address"))
        return None

    def create_wallet(self, network: str = "", key: Optional[str] = None) -> Dict[str, Dict[str, Any]]:
        """
        Create or re-create the wallet for the active crypto.

        Bitcoin honours ``network`` and ``key``; ethereum imports ``key`` when
        given and generates a fresh keypair otherwise. Unrecognized cryptos leave
        the wallets untouched. Returns all wallets.
        """
        if self.crypto == "bitcoin":
            self.wallet["bitcoin"] = self._coins["bitcoin"].create_wallet(network, key)
        if self.crypto == "ethereum":
            if key is None:
                self.wallet["ethereum"] = self._coins["ethereum"].create_wallet()
            else:
                self.wallet["ethereum"] = self._coins["ethereum"].import_wallet(key)

        return self.wallet

    def send_coin(self, amount: int, to_addr: str) -> Optional[str]:
        """Send ``amount`` base units of the active crypto; returns the tx hash."""
        if self.crypto == "bitcoin":
            return self._coins["bitcoin"].send_bitcoin(amount, to_addr, self.wallet["bitcoin"])
        if self.crypto == "ethereum":
            eth = self._coins["ethereum"]
            transaction = eth.create_transaction(to_addr, amount, self.wallet["ethereum"])
            return eth.send_transaction(transaction["raw_transaction"])
        return None

    def get_price(self, fiat: Optional[str] = None) -> Any:
        """CoinMarketCap ticker for the active crypto."""
        if self._prices is None:
            self._prices = CoinMarketCap()
        return self._prices.get_price(self.crypto, fiat or config.default_fiat())
