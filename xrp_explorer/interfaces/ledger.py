"""Ledger client protocol: balance and history lookups."""
from decimal import Decimal
from typing import Any, Protocol


class LedgerClient(Protocol):
    """Abstract interface for XRP Ledger RPC interactions."""

    async def fetch_balance(self, address: str) -> Decimal: ...

    async def fetch_transactions(
        self, address: str, limit: int | None = None
    ) -> tuple[dict[str, Any], ...]: ...
