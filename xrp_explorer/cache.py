"""In-process snapshot cache with fixed TTL and optional LRU bound."""
from __future__ import annotations

import logging
import time
from collections import OrderedDict
from typing import Callable

from .models import CacheEntry, WalletSnapshot

logger = logging.getLogger(__name__)


class TTLCache:
    """Address-keyed snapshot cache.

    Entries expire a fixed time after they were stored; reading an entry
    never extends its lifetime. When ``max_entries`` is set, the least
    recently used entry is evicted once the cache is full.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, address: str) -> WalletSnapshot | None:
        entry = self._entries.get(address)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[address]
            logger.debug("Cache entry expired for %s", address)
            return None
        self._entries.move_to_end(address)
        return entry.snapshot

    def put(self, address: str, snapshot: WalletSnapshot, ttl: float) -> None:
        if ttl <= 0:
            return
        self._entries[address] = CacheEntry(
            snapshot=snapshot, expires_at=self._clock() + ttl
        )
        self._entries.move_to_end(address)

        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted cache entry for %s", evicted)

    def clear(self) -> None:
        self._entries.clear()
