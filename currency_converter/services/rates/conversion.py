from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from currency_converter.services.amounts import AmountFormatError
from currency_converter.services.money import round2, to_decimal
from .table import ExchangeRateTable, RateUnavailableError

"""Cross-rate conversion.

Both table rates are expressed against the same base currency, so
rates[to] / rates[from] is the direct rate between the two codes. Rounding
(round2) is applied once, to the converted amount.
"""


@dataclass(frozen=True)
class ConversionResult:
    amount: Decimal
    from_currency: str
    to_currency: str
    rate: Decimal
    converted: Decimal


def cross_rate(from_currency: str, to_currency: str, table: ExchangeRateTable) -> Decimal:
    from_rate = to_decimal(table.rate(from_currency))
    to_rate = to_decimal(table.rate(to_currency))
    if from_rate <= 0:
        raise RateUnavailableError(from_currency.upper(), "rate is not positive")
    return to_rate / from_rate


def convert(
    amount: Decimal | float | int,
    from_currency: str,
    to_currency: str,
    table: ExchangeRateTable,
) -> ConversionResult:
    from_code = from_currency.upper()
    to_code = to_currency.upper()
    value = to_decimal(amount)
    rate = cross_rate(from_code, to_code, table)
    try:
        rounded = round2(value)
        converted = round2(value * rate)
    except InvalidOperation as e:
        raise AmountFormatError(
            f"{value} {from_code} is too large to convert to {to_code}", currency=from_code
        ) from e
    return ConversionResult(
        amount=rounded,
        from_currency=from_code,
        to_currency=to_code,
        rate=rate,
        converted=converted,
    )
