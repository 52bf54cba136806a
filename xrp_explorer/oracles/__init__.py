"""Price oracles."""
from __future__ import annotations

from typing import Any, Callable

from ..config import PriceOracleConfig
from ..interfaces.price_oracle import PriceOracle
from .coingecko import CoinGeckoOracle

# Registry of price oracle factories keyed by provider name.
_ORACLE_FACTORIES: dict[str, Callable[[PriceOracleConfig], Any]] = {
    "coingecko": lambda cfg: CoinGeckoOracle(cfg.coingecko),
}


def build_price_oracle(config: PriceOracleConfig) -> PriceOracle:
    """Instantiate the oracle selected by ``config.provider``."""
    factory = _ORACLE_FACTORIES.get(config.provider)
    if factory is None:
        raise ValueError(f"Unknown price provider '{config.provider}'")
    return factory(config)


__all__ = ["CoinGeckoOracle", "build_price_oracle"]
