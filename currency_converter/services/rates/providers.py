from __future__ import annotations

"""Concrete rate providers and factory.

'static' serves a fixed table so the form works offline and tests never touch
the network; 'external-http' reads the public exchange-rate API.
"""
import logging
from typing import Callable, Dict, Type

from .base import RateProvider
from .table import ExchangeRateTable
from currency_converter.core.config import Settings
from currency_converter.services.http_client import get_json, HttpError

logger = logging.getLogger("currency_converter.rates")

# USD based; rough values, only meant for offline use
_STATIC_RATES: Dict[str, float] = {
    "USD": 1.0,
    "INR": 83.0,
    "EUR": 0.92,
    "GBP": 0.79,
    "JPY": 149.5,
    "SGD": 1.34,
    "MYR": 4.7,
    "AED": 3.6725,
}


class StaticRateProvider(RateProvider):
    def __init__(self, rates: Dict[str, float] | None = None):
        self._rates = dict(rates if rates is not None else _STATIC_RATES)

    def fetch_table(self) -> ExchangeRateTable:  # type: ignore[override]
        return ExchangeRateTable.from_mapping(self._rates, base=self.base_currency)


class ExternalHTTPRateProvider(RateProvider):
    """GET the latest rates; the payload carries a ``rates`` object keyed by code."""

    def __init__(
        self,
        url: str,
        *,
        base_currency: str = "USD",
        timeout: float = 5.0,
        retries: int = 0,
        backoff: float = 0.5,
        fetch: Callable[..., dict] = get_json,
    ):
        self.url = url
        self.base_currency = base_currency.upper()
        self._timeout = timeout
        self._retries = retries
        self._backoff = backoff
        self._fetch = fetch

    def fetch_table(self) -> ExchangeRateTable:  # type: ignore[override]
        data = self._fetch(
            self.url, timeout=self._timeout, retries=self._retries, backoff=self._backoff
        )
        rates = data.get("rates")
        if not isinstance(rates, dict):
            raise HttpError(f"Response from {self.url} has no 'rates' object")
        base = str(data.get("base") or self.base_currency)
        table = ExchangeRateTable.from_mapping(rates, base=base)
        logger.info("fetched %d rates (base %s) from %s", len(table), table.base, self.url)
        return table


_PROVIDER_REGISTRY: Dict[str, Type[RateProvider]] = {
    "static": StaticRateProvider,
    "external-http": ExternalHTTPRateProvider,
}


def make_rate_provider(settings: Settings) -> RateProvider:
    kind = settings.exchange_rate_provider
    cls = _PROVIDER_REGISTRY.get(kind)
    if not cls:
        raise ValueError(f"Unknown rate provider kind '{kind}'")
    if cls is ExternalHTTPRateProvider:
        return ExternalHTTPRateProvider(
            str(settings.exchange_api_url),
            base_currency=settings.base_currency,
            timeout=settings.http_timeout_seconds,
            retries=settings.http_retries,
            backoff=settings.http_backoff_seconds,
        )
    provider = cls()
    provider.base_currency = settings.base_currency
    return provider
