"""
Load config from config.yaml with optional env overrides.
Single source of truth for default API/crypto selection, provider URLs and HTTP timeout.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml

# Defaults if no YAML or env
_DEFAULTS = {
    "defaults": {
        "api": "blockcypher",
        "crypto": "bitcoin",
        "fiat": "usd",
    },
    "http": {"timeout_s": 15.0},
    "blockcypher": {
        "base_url": "https://api.blockcypher.com",
        "network": "main",
        "token": None,
    },
    "coinmarketcap": {"base_url": "https://api.coinmarketcap.com"},
}


def _config_yaml_path() -> Path:
    """Config.yaml lives at repo root (parent of package dir), or STOOPID_CONFIG."""
    override = os.environ.get("STOOPID_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parent.parent / "config.yaml"


def _load_yaml() -> dict:
    config_path = _config_yaml_path()
    if not config_path.exists():
        return {}
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    api = os.environ.get("STOOPID_API")
    if api:
        overrides.setdefault("defaults", {})["api"] = api
    crypto = os.environ.get("STOOPID_CRYPTO")
    if crypto:
        overrides.setdefault("defaults", {})["crypto"] = crypto
    fiat = os.environ.get("STOOPID_FIAT")
    if fiat:
        overrides.setdefault("defaults", {})["fiat"] = fiat
    timeout = os.environ.get("STOOPID_HTTP_TIMEOUT")
    if timeout:
        overrides.setdefault("http", {})["timeout_s"] = float(timeout)
    token = os.environ.get("BLOCKCYPHER_TOKEN")
    if token:
        overrides.setdefault("blockcypher", {})["token"] = token
    network = os.environ.get("BLOCKCYPHER_NETWORK")
    if network:
        overrides.setdefault("blockcypher", {})["network"] = network
    return overrides


def get_config() -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(_DEFAULTS, _load_yaml())
    merged = _deep_merge(merged, _env_overrides())
    return merged


# Convenience accessors
def default_api() -> str:
    return get_config()["defaults"]["api"]


def default_crypto() -> str:
    return get_config()["defaults"]["crypto"]


def default_fiat() -> str:
    return get_config()["defaults"]["fiat"]


def http_timeout_s() -> float:
    return float(get_config()["http"]["timeout_s"])


def blockcypher_base_url() -> str:
    return get_config()["blockcypher"]["base_url"]


def blockcypher_network() -> str:
    return get_config()["blockcypher"]["network"]


def blockcypher_token() -> Optional[str]:
    return get_config()["blockcypher"]["token"]


def coinmarketcap_base_url() -> str:
    return get_config()["coinmarketcap"]["base_url"]
