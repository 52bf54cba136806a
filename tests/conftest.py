"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest

from xrp_explorer.config import (
    AppConfig,
    CacheConfig,
    CoinGeckoConfig,
    LedgerConfig,
    PriceOracleConfig,
)
from xrp_explorer.models import WalletSnapshot

VALID_ADDRESS = "rHb9CJAWyB4rj91VRWn96DkukG4bwdtyTh"
OTHER_ADDRESS = "rPT1Sjq2YGrBMTttX4GZHjKu9dyfzbpAYe"


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_ledger_config() -> LedgerConfig:
    return LedgerConfig(
        rpc_url="https://xrpl.example.com:51234/",
        rpc_timeout=15,
        transaction_limit=10,
    )


@pytest.fixture()
def sample_coingecko_config() -> CoinGeckoConfig:
    return CoinGeckoConfig(
        api_url="https://prices.example.com/api/v3/simple/price",
        asset_id="ripple",
        vs_currency="usd",
        timeout=10,
    )


@pytest.fixture()
def sample_app_config(
    sample_ledger_config: LedgerConfig,
    sample_coingecko_config: CoinGeckoConfig,
) -> AppConfig:
    return AppConfig(
        ledger=sample_ledger_config,
        price_oracle=PriceOracleConfig(
            provider="coingecko",
            fallback_price=Decimal("0.50"),
            coingecko=sample_coingecko_config,
        ),
        cache=CacheConfig(ttl_seconds=300, max_entries=None),
    )


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_transactions() -> tuple[dict[str, Any], ...]:
    return (
        {
            "meta": {"TransactionResult": "tesSUCCESS"},
            "tx": {"TransactionType": "Payment", "Amount": "1000000", "hash": "AB12"},
            "validated": True,
        },
        {
            "meta": {"TransactionResult": "tesSUCCESS"},
            "tx": {"TransactionType": "OfferCreate", "hash": "CD34"},
            "validated": True,
        },
    )


@pytest.fixture()
def sample_snapshot(sample_transactions: tuple[dict[str, Any], ...]) -> WalletSnapshot:
    return WalletSnapshot(
        address=VALID_ADDRESS,
        balance=Decimal("12.345"),
        transactions=sample_transactions,
        price=Decimal("0.52"),
        fiat_value=Decimal("6.41940"),
    )


# ---------------------------------------------------------------------------
# Sample ledger responses
# ---------------------------------------------------------------------------


def account_info_response(balance: str = "12345000") -> dict[str, Any]:
    return {
        "result": {
            "account_data": {
                "Account": VALID_ADDRESS,
                "Balance": balance,
                "Flags": 0,
                "Sequence": 42,
            },
            "ledger_current_index": 90000001,
            "status": "success",
            "validated": True,
        }
    }


def account_not_found_response() -> dict[str, Any]:
    return {
        "result": {
            "account": VALID_ADDRESS,
            "error": "actNotFound",
            "error_code": 19,
            "error_message": "Account not found.",
            "status": "error",
            "validated": True,
        }
    }


def account_tx_response(transactions: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "result": {
            "account": VALID_ADDRESS,
            "limit": 10,
            "transactions": transactions,
            "status": "success",
        }
    }


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    ledger:
      rpc_url: "https://xrpl.example.com:51234/"
      rpc_timeout: 20
      transaction_limit: 5
    price_oracle:
      provider: coingecko
      fallback_price: "0.75"
      coingecko:
        api_url: "https://prices.example.com/simple/price"
        asset_id: ripple
        vs_currency: eur
        timeout: 8
    cache:
      ttl_seconds: 120
      max_entries: 50
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
