"""Pydantic request/response models for the currency converter."""

from .constants import (
    BASE_CURRENCY,
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
    REQUIRED_CURRENCY_MESSAGE,
)  # re-export
from .conversion import (
    ConversionIn,
    ConversionOut,
    AmountCheckIn,
    AmountCheckOut,
    RateTableOut,
    CurrencyListOut,
)

__all__ = [
    "BASE_CURRENCY",
    "DEFAULT_FROM_CURRENCY",
    "DEFAULT_TO_CURRENCY",
    "REQUIRED_CURRENCY_MESSAGE",
    "ConversionIn",
    "ConversionOut",
    "AmountCheckIn",
    "AmountCheckOut",
    "RateTableOut",
    "CurrencyListOut",
]
