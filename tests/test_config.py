"""Config layering: defaults <- config.yaml <- env."""
from __future__ import annotations

import pytest

from stoopidwallet import config

_ENV_VARS = (
    "STOOPID_CONFIG",
    "STOOPID_API",
    "STOOPID_CRYPTO",
    "STOOPID_FIAT",
    "STOOPID_HTTP_TIMEOUT",
    "BLOCKCYPHER_TOKEN",
    "BLOCKCYPHER_NETWORK",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Point at a file that does not exist so a local config.yaml is ignored.
    monkeypatch.setenv("STOOPID_CONFIG", str(tmp_path / "missing.yaml"))


def test_defaults():
    assert config.default_api() == "blockcypher"
    assert config.default_crypto() == "bitcoin"
    assert config.default_fiat() == "usd"
    assert config.http_timeout_s() == 15.0
    assert config.blockcypher_base_url() == "https://api.blockcypher.com"
    assert config.blockcypher_network() == "main"
    assert config.blockcypher_token() is None
    assert config.coinmarketcap_base_url() == "https://api.coinmarketcap.com"


def test_yaml_overrides_defaults(monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "defaults:\n  crypto: ethereum\nblockcypher:\n  network: test3\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("STOOPID_CONFIG", str(path))

    cfg = config.get_config()
    assert cfg["defaults"]["crypto"] == "ethereum"
    # untouched keys keep their defaults
    assert cfg["defaults"]["api"] == "blockcypher"
    assert cfg["blockcypher"]["network"] == "test3"
    assert cfg["blockcypher"]["base_url"] == "https://api.blockcypher.com"


def test_env_overrides_yaml(monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("defaults:\n  fiat: gbp\n", encoding="utf-8")
    monkeypatch.setenv("STOOPID_CONFIG", str(path))
    monkeypatch.setenv("STOOPID_FIAT", "eur")
    monkeypatch.setenv("STOOPID_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("BLOCKCYPHER_TOKEN", "secret")

    assert config.default_fiat() == "eur"
    assert config.http_timeout_s() == 2.5
    assert config.blockcypher_token() == "secret"


def test_non_mapping_yaml_ignored(monkeypatch, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("STOOPID_CONFIG", str(path))
    assert config.default_api() == "blockcypher"
