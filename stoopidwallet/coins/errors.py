from __future__ import annotations


class WalletError(ValueError):
    """Wallet record is missing what an operation needs (address, key)."""
