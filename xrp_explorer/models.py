"""Data models, all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class WalletSnapshot:
    """Aggregated view of one address at the time it was fetched."""

    address: str
    balance: Decimal
    transactions: tuple[dict[str, Any], ...]
    price: Decimal
    fiat_value: Decimal
    price_is_fallback: bool = False

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; decimals are rendered as strings."""
        return {
            "address": self.address,
            "balance_xrp": str(self.balance),
            "transactions": list(self.transactions),
            "xrp_price": str(self.price),
            "usd_value": str(self.fiat_value),
        }


@dataclass(frozen=True)
class CacheEntry:
    """Snapshot held by the cache until ``expires_at`` (monotonic seconds)."""

    snapshot: WalletSnapshot
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
