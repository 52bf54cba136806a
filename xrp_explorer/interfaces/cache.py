"""Result cache protocol."""
from typing import Protocol

from ..models import WalletSnapshot


class ResultCache(Protocol):
    """Address-keyed store of snapshots with a per-entry TTL."""

    def get(self, address: str) -> WalletSnapshot | None: ...

    def put(self, address: str, snapshot: WalletSnapshot, ttl: float) -> None: ...
