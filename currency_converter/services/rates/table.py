from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

logger = logging.getLogger("currency_converter.rates")


class RateUnavailableError(LookupError):
    """No usable rate for a currency (table empty, code absent or rate not positive)."""

    def __init__(self, currency: str, reason: str = "no exchange rate loaded"):
        super().__init__(f"{currency}: {reason}")
        self.currency = currency
        self.reason = reason


@dataclass(frozen=True)
class ExchangeRateTable:
    """Read-only currency -> rate mapping, all rates relative to ``base``."""

    base: str = "USD"
    rates: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    fetched_at: Optional[datetime] = None

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any],
        base: str = "USD",
        fetched_at: Optional[datetime] = None,
    ) -> "ExchangeRateTable":
        """Build a table, dropping entries that are not positive finite numbers."""
        clean: Dict[str, float] = {}
        for code, value in raw.items():
            if isinstance(value, bool):
                value = None
            try:
                rate = float(value)
            except (TypeError, ValueError):
                rate = math.nan
            if not math.isfinite(rate) or rate <= 0:
                logger.warning("dropping unusable rate %r for %s", value, code)
                continue
            clean[str(code).upper()] = rate
        return cls(
            base=base.upper(),
            rates=MappingProxyType(clean),
            fetched_at=fetched_at or datetime.now(timezone.utc),
        )

    @classmethod
    def empty(cls, base: str = "USD") -> "ExchangeRateTable":
        return cls(base=base.upper())

    def __len__(self) -> int:
        return len(self.rates)

    @property
    def is_empty(self) -> bool:
        return not self.rates

    def codes(self) -> List[str]:
        return sorted(self.rates)

    def rate(self, currency: str) -> float:
        code = (currency or "").upper()
        if self.is_empty:
            raise RateUnavailableError(code, "exchange rates have not been loaded")
        try:
            value = self.rates[code]
        except KeyError:
            raise RateUnavailableError(code, "unknown currency") from None
        if value <= 0:
            raise RateUnavailableError(code, "rate is not positive")
        return value
