"""XEC price lookups backing fiat-denominated entry."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Protocol

from xec_send.config import SendConfig
from xec_send.shared.network import NetworkClient, NetworkError

logger = logging.getLogger(__name__)

COINGECKO_COIN_ID = "ecash"


class ExchangeRateProvider(Protocol):
    def current_rate(self) -> Decimal | None: ...


class CoinGeckoRateProvider:
    """Fetches the XEC price in the configured fiat currency.

    ``current_rate`` returns the last fetched price, or None when no fetch has
    succeeded, so fiat entry degrades instead of converting against zero.
    """

    def __init__(self, config: SendConfig, client: NetworkClient | None = None):
        self.fiat_currency = config.fiat_currency
        self._client = client or NetworkClient(
            base_url=config.price_api_url,
            timeout_config=config.timeout_config,
            retry_config=config.retry_config,
        )
        self._rate: Decimal | None = None

    def current_rate(self) -> Decimal | None:
        return self._rate

    def refresh(self) -> Decimal | None:
        try:
            data = self._client.get(
                "/simple/price",
                context="Fetch XEC price",
                params={"ids": COINGECKO_COIN_ID, "vs_currencies": self.fiat_currency},
            )
        except NetworkError as e:
            logger.warning("Price fetch failed: %s", e.message)
            self._rate = None
            return None

        try:
            rate = Decimal(str(data[COINGECKO_COIN_ID][self.fiat_currency]))
        except (KeyError, TypeError, InvalidOperation, ValueError):
            logger.warning("Unexpected price response: %s", data)
            self._rate = None
            return None

        self._rate = rate if rate.is_finite() and rate > 0 else None
        logger.info("XEC price updated: %s %s", self._rate, self.fiat_currency.upper())
        return self._rate
