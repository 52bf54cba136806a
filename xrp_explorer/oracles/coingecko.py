"""CoinGecko simple-price oracle."""
from __future__ import annotations

import json
import logging
import ssl
from decimal import Decimal
from functools import partial

import aiohttp
import certifi

from ..config import CoinGeckoConfig

logger = logging.getLogger(__name__)

_loads = partial(json.loads, parse_float=Decimal)


class CoinGeckoOracle:
    """Fetch the fiat quote of one asset from CoinGecko."""

    def __init__(self, config: CoinGeckoConfig) -> None:
        self.api_url = config.api_url
        self.asset_id = config.asset_id
        self.vs_currency = config.vs_currency
        self.timeout = config.timeout

    async def fetch_price(self) -> Decimal | None:
        """Return the current quote, or ``None`` if it could not be fetched.

        Failures are logged and never raised; the caller decides on a
        fallback.
        """
        params = {"ids": self.asset_id, "vs_currencies": self.vs_currency}

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        logger.info("Fetching %s price from CoinGecko", self.asset_id)
        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.get(
                    self.api_url,
                    params=params,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if not 200 <= response.status < 300:
                        logger.warning(
                            "CoinGecko API request failed: HTTP %s", response.status
                        )
                        return None

                    data = await response.json(content_type=None, loads=_loads)

            quote = data.get(self.asset_id, {}).get(self.vs_currency)
            if quote is None or isinstance(quote, bool):
                logger.warning(
                    "CoinGecko response has no %s.%s price",
                    self.asset_id,
                    self.vs_currency,
                )
                return None

            price = Decimal(str(quote))
            if not price.is_finite():
                logger.warning("CoinGecko returned a non-finite price: %s", quote)
                return None

        except Exception as e:
            logger.warning("Error fetching price from CoinGecko: %s", e)
            return None

        logger.info("%s price fetched: %s %s", self.asset_id, price, self.vs_currency)
        return price
