"""XRP Ledger JSON-RPC client."""
from __future__ import annotations

import asyncio
import logging
import ssl
from decimal import Decimal
from typing import Any

import aiohttp
import certifi

from ...config import LedgerConfig
from ...errors import AccountNotFoundError, UpstreamError, UpstreamErrorKind

logger = logging.getLogger(__name__)

DROPS_PER_XRP = Decimal(1_000_000)

ACCOUNT_NOT_FOUND_CODE = "actNotFound"
_ACCOUNT_NOT_FOUND_MARKERS = ("actNotFound", "Account not found")


def _is_account_not_found(error: UpstreamError) -> bool:
    """Prefer the structured error code; only inspect the text without one."""
    if error.kind is not UpstreamErrorKind.BUSINESS:
        return False
    if error.code:
        return error.code == ACCOUNT_NOT_FOUND_CODE
    return any(marker in error.message for marker in _ACCOUNT_NOT_FOUND_MARKERS)


def _parse_drops(balance: Any) -> int:
    """Drops arrive as an integer string; floats and bools are rejected."""
    if isinstance(balance, int) and not isinstance(balance, bool):
        return balance
    if isinstance(balance, str):
        try:
            return int(balance)
        except ValueError as e:
            raise _malformed_balance() from e
    raise _malformed_balance()


def _malformed_balance() -> UpstreamError:
    return UpstreamError(
        UpstreamErrorKind.MALFORMED,
        "Account balance not found in response",
        "account_info",
    )


class XrplClient:
    """Talks to a single XRP Ledger node over JSON-RPC."""

    def __init__(self, config: LedgerConfig) -> None:
        self.rpc_url = config.rpc_url
        self.timeout = config.rpc_timeout
        self.transaction_limit = config.transaction_limit

    async def rpc_call(self, method: str, params: dict[str, Any]) -> dict[str, Any]:
        """Send one RPC request and return its ``result`` object.

        Raises:
            UpstreamError: on connection failure, non-2xx status, a body
                without a ``result`` object, or a ``result.status`` other
                than ``"success"``.
        """
        payload = {"method": method, "params": [params]}

        ssl_context = ssl.create_default_context(cafile=certifi.where())

        try:
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.post(
                    self.rpc_url,
                    json=payload,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if not 200 <= response.status < 300:
                        raise UpstreamError(
                            UpstreamErrorKind.STATUS,
                            f"XRPL API request failed with status: {response.status}",
                            method,
                            status=response.status,
                        )
                    data = await response.json(content_type=None)
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
            raise UpstreamError(
                UpstreamErrorKind.CONNECTION,
                f"Failed to connect to XRPL network: {str(e) or type(e).__name__}",
                method,
            ) from e
        except aiohttp.ClientError as e:
            raise UpstreamError(
                UpstreamErrorKind.STATUS,
                f"XRPL request failed: {str(e) or type(e).__name__}",
                method,
            ) from e
        except ValueError as e:
            raise UpstreamError(
                UpstreamErrorKind.MALFORMED, "Invalid XRPL API response format", method
            ) from e

        return self._unwrap(method, data)

    @staticmethod
    def _unwrap(method: str, data: Any) -> dict[str, Any]:
        result = data.get("result") if isinstance(data, dict) else None
        if not isinstance(result, dict):
            raise UpstreamError(
                UpstreamErrorKind.MALFORMED, "Invalid XRPL API response format", method
            )

        if result.get("status") != "success":
            error = result.get("error") or "Unknown XRPL error"
            error_message = result.get("error_message") or error
            raise UpstreamError(
                UpstreamErrorKind.BUSINESS,
                f"XRPL API error: {error_message}",
                method,
                code=result.get("error"),
            )

        return result

    async def fetch_balance(self, address: str) -> Decimal:
        """Return the validated XRP balance of ``address``."""
        logger.info("Fetching account info for: %s", address)
        try:
            result = await self.rpc_call(
                "account_info", {"account": address, "ledger_index": "validated"}
            )
        except UpstreamError as e:
            if _is_account_not_found(e):
                raise AccountNotFoundError(method=e.method, code=e.code) from e
            raise

        account_data = result.get("account_data")
        balance = account_data.get("Balance") if isinstance(account_data, dict) else None
        return Decimal(_parse_drops(balance)) / DROPS_PER_XRP

    async def fetch_transactions(
        self, address: str, limit: int | None = None
    ) -> tuple[dict[str, Any], ...]:
        """Return the most recent ``limit`` transactions of ``address``."""
        if limit is None:
            limit = self.transaction_limit

        logger.info("Fetching transactions for: %s", address)
        result = await self.rpc_call(
            "account_tx",
            {
                "account": address,
                "limit": limit,
                "ledger_index_min": -1,
                "binary": False,
            },
        )

        transactions = result.get("transactions", [])
        if not isinstance(transactions, list):
            raise UpstreamError(
                UpstreamErrorKind.MALFORMED,
                "Invalid transaction list in XRPL response",
                "account_tx",
            )

        logger.info("Found %d transactions", len(transactions))
        return tuple(transactions)
