from __future__ import annotations

import logging
from typing import Optional

from .base import RateProvider
from .table import ExchangeRateTable
from currency_converter.services.http_client import HttpError

logger = logging.getLogger("currency_converter.rates")

"""Session-wide holder of the exchange-rate table.

The table is fetched once when the application starts. A failed fetch is
logged and leaves the previous table (initially empty) in place, so later
conversions fail with RateUnavailableError instead of crashing startup.
``refresh()`` repeats the fetch on demand.
"""


class RateStore:
    def __init__(self, provider: RateProvider):
        self._provider = provider
        self._table = ExchangeRateTable.empty(provider.base_currency)
        self._last_error: Optional[str] = None

    @property
    def table(self) -> ExchangeRateTable:
        return self._table

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    def load(self) -> ExchangeRateTable:
        try:
            table = self._provider.fetch_table()
        except HttpError as e:
            self._last_error = str(e)
            logger.exception("failed to fetch exchange rates")
            return self._table
        self._table = table
        self._last_error = None
        return table

    def refresh(self) -> ExchangeRateTable:
        logger.info("refreshing exchange rates")
        return self.load()
