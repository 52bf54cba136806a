"""Price oracle protocol: single fiat quote."""
from decimal import Decimal
from typing import Protocol


class PriceOracle(Protocol):
    """Abstract interface for fetching the fiat price of XRP."""

    async def fetch_price(self) -> Decimal | None: ...
