"""Fake blockchain clients and price feeds for wallet tests (no live network)."""

from .providers import (
    FAKE_KEYPAIR,
    FAKE_TX_HASH,
    FakeBlockchainClient,
    FakeBlockchainClientAlwaysFail,
    FakePriceProvider,
)

__all__ = [
    "FAKE_KEYPAIR",
    "FAKE_TX_HASH",
    "FakeBlockchainClient",
    "FakeBlockchainClientAlwaysFail",
    "FakePriceProvider",
]
