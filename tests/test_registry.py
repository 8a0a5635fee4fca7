"""Tests for the blockchain API registry."""
from __future__ import annotations

import pytest

from stoopidwallet.providers.blockcypher import BlockCypher
from stoopidwallet.providers.registry import ApiRegistry, create_default_registry
from tests.fakes.providers import FakeBlockchainClient


def test_default_registry_has_only_blockcypher():
    registry = create_default_registry()
    assert registry.names == ["blockcypher"]
    api = registry.get("blockcypher", "ethereum")
    assert isinstance(api, BlockCypher)
    assert api.crypto == "ethereum"


def test_get_builds_fresh_instances():
    registry = ApiRegistry()
    registry.register("fakechain", FakeBlockchainClient)
    first = registry.get("fakechain", "bitcoin")
    second = registry.get("fakechain", "ethereum")
    assert first is not second
    assert (first.crypto, second.crypto) == ("bitcoin", "ethereum")


def test_contains_and_unknown_name():
    registry = ApiRegistry()
    registry.register("fakechain", FakeBlockchainClient)
    assert "fakechain" in registry
    assert "etherscan" not in registry
    with pytest.raises(KeyError, match="Available: \\['fakechain'\\]"):
        registry.get("etherscan", "bitcoin")
