"""
API registry: catalog of blockchain providers the wallet can switch between.

Providers are registered by name with a factory that takes the active crypto.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List

from .base import BlockchainApi
from .blockcypher import BlockCypher

logger = logging.getLogger(__name__)

ApiFactory = Callable[[str], BlockchainApi]


class ApiRegistry:
    """
    Registry mapping provider names to factories.

    Usage:
        registry = ApiRegistry()
        registry.register("blockcypher", BlockCypher)

        api = registry.get("blockcypher", "ethereum")
    """

    def __init__(self) -> None:
        self._factories: Dict[str, ApiFactory] = {}

    def register(self, name: str, factory: ApiFactory) -> None:
        """Register a blockchain provider by name."""
        self._factories[name] = factory
        logger.debug("Registered blockchain API: %s", name)

    def get(self, name: str, crypto: str) -> BlockchainApi:
        """Build a fresh provider instance for ``crypto``."""
        factory = self._factories.get(name)
        if factory is None:
            raise KeyError(
                f"Unknown blockchain API '{name}'. "
                f"Available: {list(self._factories)}"
            )
        return factory(crypto)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    @property
    def names(self) -> List[str]:
        return list(self._factories)


def create_default_registry() -> ApiRegistry:
    """Create a registry with the built-in providers."""
    registry = ApiRegistry()
    registry.register("blockcypher", BlockCypher)
    return registry
