from __future__ import annotations

"""Rate provider abstraction.

A provider produces a complete ExchangeRateTable in one call; the store decides
when to call it and what to do when it fails.
"""
from abc import ABC, abstractmethod

from .table import ExchangeRateTable


class RateProvider(ABC):
    base_currency: str = "USD"

    @abstractmethod
    def fetch_table(self) -> ExchangeRateTable:
        """Return rates for every known currency relative to base_currency."""
        raise NotImplementedError
