"""Wallet exploration: validation, caching and upstream orchestration."""
from __future__ import annotations

import asyncio
import logging
from decimal import Decimal, localcontext
from typing import Any

from ..cache import TTLCache
from ..chains.xrpl import XrplClient
from ..config import AppConfig
from ..errors import (
    AccountNotFound,
    AccountNotFoundError,
    UpstreamError,
    UpstreamFailure,
    ValidationError,
)
from ..interfaces.cache import ResultCache
from ..interfaces.ledger import LedgerClient
from ..interfaces.price_oracle import PriceOracle
from ..models import WalletSnapshot
from ..oracles import build_price_oracle
from ..validation import validate_address

logger = logging.getLogger(__name__)


def compute_fiat_value(balance: Decimal, price: Decimal) -> Decimal:
    """Exact ``balance * price``."""
    digits = len(balance.as_tuple().digits) + len(price.as_tuple().digits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return balance * price


class WalletExplorer:
    """Builds wallet snapshots from the ledger node and the price oracle.

    The balance is essential: any failure fetching it aborts the request.
    Transaction history and price are enrichments: their failures are logged
    and replaced by an empty history and the configured fallback price.
    """

    def __init__(
        self,
        config: AppConfig,
        ledger: LedgerClient | None = None,
        oracle: PriceOracle | None = None,
        cache: ResultCache | None = None,
    ) -> None:
        self._config = config
        self._ledger = ledger if ledger is not None else XrplClient(config.ledger)
        self._oracle = (
            oracle if oracle is not None else build_price_oracle(config.price_oracle)
        )
        self._cache = (
            cache if cache is not None else TTLCache(max_entries=config.cache.max_entries)
        )
        self._inflight: dict[str, asyncio.Task[WalletSnapshot]] = {}

    async def explore(self, raw_address: Any) -> WalletSnapshot:
        """Return the snapshot for ``raw_address``.

        Raises:
            ValidationError: the address is malformed (no I/O was made).
            AccountNotFound: the account was never activated.
            UpstreamFailure: the balance could not be fetched.
        """
        logger.info("Wallet explore request received: %s", raw_address)
        try:
            address = validate_address(raw_address)
        except ValidationError as e:
            logger.error("Validation error for %r: %s", raw_address, e)
            raise

        cached = self._cache.get(address)
        if cached is not None:
            logger.info("Serving cached wallet data for %s", address)
            return cached

        task = self._inflight.get(address)
        if task is None:
            task = asyncio.ensure_future(self._aggregate(address))
            self._inflight[address] = task
            task.add_done_callback(lambda _t: self._inflight.pop(address, None))
        return await asyncio.shield(task)

    async def _aggregate(self, address: str) -> WalletSnapshot:
        logger.info("Fetching wallet data for: %s", address)

        balance = await self._fetch_balance(address)
        transactions, (price, is_fallback) = await asyncio.gather(
            self._fetch_transactions(address), self._fetch_price()
        )

        snapshot = WalletSnapshot(
            address=address,
            balance=balance,
            transactions=transactions,
            price=price,
            fiat_value=compute_fiat_value(balance, price),
            price_is_fallback=is_fallback,
        )
        self._cache.put(address, snapshot, self._config.cache.ttl_seconds)

        logger.info(
            "Wallet data compiled successfully: %s balance=%s XRP "
            "transactions=%d price=%s value=%s",
            address,
            snapshot.balance,
            len(snapshot.transactions),
            snapshot.price,
            snapshot.fiat_value,
        )
        return snapshot

    async def _fetch_balance(self, address: str) -> Decimal:
        try:
            balance = await self._ledger.fetch_balance(address)
        except AccountNotFoundError as e:
            logger.error("Account info fetch failed: %s", e)
            raise AccountNotFound(e.message) from e
        except UpstreamError as e:
            logger.error("Account info fetch failed: %s", e)
            raise UpstreamFailure(
                f"Failed to fetch account information: {e.message}"
            ) from e

        logger.info("Account balance found: %s XRP", balance)
        return balance

    async def _fetch_transactions(self, address: str) -> tuple[dict[str, Any], ...]:
        try:
            return await self._ledger.fetch_transactions(
                address, self._config.ledger.transaction_limit
            )
        except Exception as e:
            logger.warning("Transaction fetch failed: %s", e)
            return ()

    async def _fetch_price(self) -> tuple[Decimal, bool]:
        try:
            price = await self._oracle.fetch_price()
        except Exception as e:
            logger.warning("Price oracle raised: %s", e)
            price = None
        if price is None:
            fallback = self._config.price_oracle.fallback_price
            logger.warning("Price fetch failed, using fallback price %s", fallback)
            return fallback, True
        return price, False
