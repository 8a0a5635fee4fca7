"""
Tests for fake clients: deterministic data and always-fail behavior.

No live network; validates that fakes behave as the wallet tests expect.
"""

from __future__ import annotations

import pytest

from stoopidwallet.providers.base import BlockchainApi, HTTPStatusError, PriceProvider

from .providers import (
    FAKE_KEYPAIR,
    FAKE_TX_HASH,
    FakeBlockchainClient,
    FakeBlockchainClientAlwaysFail,
    FakePriceProvider,
)


class TestFakeBlockchainClient:
    def test_satisfies_protocol(self):
        assert isinstance(FakeBlockchainClient(), BlockchainApi)

    def test_deterministic_data(self):
        c = FakeBlockchainClient(height=123, balances={"addr": 42})
        assert c.get_last_block_number() == 123
        assert c.get_balance("addr") == 42
        assert c.get_balance("other") == 0
        assert c.generate_address() == FAKE_KEYPAIR
        assert c.call_count == 4

    def test_records_sends(self):
        c = FakeBlockchainClient()
        tx = c.send_micro("key", "dest", 1000)
        assert tx["hash"] == FAKE_TX_HASH
        assert c.sent == [{"from_private": "key", "to_address": "dest", "value": 1000}]


class TestFakeBlockchainClientAlwaysFail:
    def test_every_call_raises(self):
        c = FakeBlockchainClientAlwaysFail(status_code=500)
        with pytest.raises(HTTPStatusError, match="statusCode=500"):
            c.get_last_block_number()
        with pytest.raises(HTTPStatusError):
            c.get_balance("addr")
        assert c.call_count == 2


class TestFakePriceProvider:
    def test_satisfies_protocol(self):
        assert isinstance(FakePriceProvider(), PriceProvider)

    def test_ticker_shape(self):
        p = FakePriceProvider({"bitcoin": 60000.0})
        assert p.get_price("bitcoin", "eur") == [{"id": "bitcoin", "price_eur": "60000.0"}]
        assert p.calls == [("bitcoin", "eur")]
