"""Configuration loader: reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LedgerConfig:
    rpc_url: str = "https://s1.ripple.com:51234/"
    rpc_timeout: int = 15
    transaction_limit: int = 10


@dataclass(frozen=True)
class CoinGeckoConfig:
    api_url: str = "https://api.coingecko.com/api/v3/simple/price"
    asset_id: str = "ripple"
    vs_currency: str = "usd"
    timeout: int = 10


@dataclass(frozen=True)
class PriceOracleConfig:
    provider: str = "coingecko"
    fallback_price: Decimal = Decimal("0.50")
    coingecko: CoinGeckoConfig = field(default_factory=CoinGeckoConfig)


@dataclass(frozen=True)
class CacheConfig:
    ttl_seconds: int = 300
    max_entries: int | None = None


@dataclass(frozen=True)
class AppConfig:
    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    price_oracle: PriceOracleConfig = field(default_factory=PriceOracleConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)


SUPPORTED_PRICE_PROVIDERS = ("coingecko",)

# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML -> dataclass builders
# ---------------------------------------------------------------------------


def _to_decimal(value: Any, name: str) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"'{name}' must be a number, got {value!r}") from e


def _build_ledger(raw: dict[str, Any]) -> LedgerConfig:
    return LedgerConfig(
        rpc_url=raw.get("rpc_url", LedgerConfig.rpc_url),
        rpc_timeout=int(raw.get("rpc_timeout", 15)),
        transaction_limit=int(raw.get("transaction_limit", 10)),
    )


def _build_price_oracle(raw: dict[str, Any]) -> PriceOracleConfig:
    cg_raw = raw.get("coingecko", {})
    return PriceOracleConfig(
        provider=raw.get("provider", "coingecko"),
        fallback_price=_to_decimal(raw.get("fallback_price", "0.50"), "fallback_price"),
        coingecko=CoinGeckoConfig(
            api_url=cg_raw.get("api_url", CoinGeckoConfig.api_url),
            asset_id=cg_raw.get("asset_id", "ripple"),
            vs_currency=cg_raw.get("vs_currency", "usd"),
            timeout=int(cg_raw.get("timeout", 10)),
        ),
    )


def _build_cache(raw: dict[str, Any]) -> CacheConfig:
    max_entries = raw.get("max_entries")
    return CacheConfig(
        ttl_seconds=int(raw.get("ttl_seconds", 300)),
        max_entries=int(max_entries) if max_entries not in (None, "") else None,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        ledger=_build_ledger(raw.get("ledger") or {}),
        price_oracle=_build_price_oracle(raw.get("price_oracle") or {}),
        cache=_build_cache(raw.get("cache") or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.ledger.rpc_url:
        raise ValueError("Ledger rpc_url must be configured")
    if cfg.ledger.rpc_timeout <= 0:
        raise ValueError("Ledger rpc_timeout must be positive")
    if cfg.ledger.transaction_limit < 1:
        raise ValueError("Ledger transaction_limit must be at least 1")

    oracle = cfg.price_oracle
    if oracle.provider not in SUPPORTED_PRICE_PROVIDERS:
        raise ValueError(f"Unknown price provider '{oracle.provider}'")
    if oracle.fallback_price < 0:
        raise ValueError("Price fallback_price must not be negative")
    if oracle.coingecko.timeout <= 0:
        raise ValueError("CoinGecko timeout must be positive")

    if cfg.cache.ttl_seconds < 0:
        raise ValueError("Cache ttl_seconds must not be negative")
    if cfg.cache.max_entries is not None and cfg.cache.max_entries < 1:
        raise ValueError("Cache max_entries must be at least 1 when set")
