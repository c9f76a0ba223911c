from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from currency_converter.services.amounts import validate_amount, validation_message
from currency_converter.services.rates.conversion import ConversionResult
from .constants import REQUIRED_CURRENCY_MESSAGE


def _clean_code(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip().upper()
    return v or None


class ConversionIn(BaseModel):
    amount: str = Field(..., min_length=1, description="Amount in the from-currency grammar")
    from_currency: Optional[str] = Field(
        None, validate_default=True, description="Source currency code"
    )
    to_currency: Optional[str] = Field(
        None, validate_default=True, description="Target currency code"
    )

    @field_validator("amount")
    @classmethod
    def strip_amount(cls, v: str) -> str:
        return v.strip()

    @field_validator("from_currency", "to_currency")
    @classmethod
    def required_currency(cls, v: Optional[str]) -> str:
        code = _clean_code(v)
        if code is None:
            raise ValueError(REQUIRED_CURRENCY_MESSAGE)
        return code

    @model_validator(mode="after")
    def amount_matches_grammar(self) -> "ConversionIn":
        if self.from_currency and not validate_amount(self.amount, self.from_currency):
            raise ValueError(validation_message(self.from_currency))
        return self


class ConversionOut(BaseModel):
    amount: Decimal
    from_currency: str
    to_currency: str
    rate: Decimal
    converted: Decimal

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionOut":
        return cls(
            amount=result.amount,
            from_currency=result.from_currency,
            to_currency=result.to_currency,
            rate=result.rate,
            converted=result.converted,
        )


class AmountCheckIn(BaseModel):
    amount: str
    currency: str

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.strip().upper()


class AmountCheckOut(BaseModel):
    valid: bool
    currency: str
    normalized: Optional[Decimal] = None
    message: Optional[str] = None


class RateTableOut(BaseModel):
    base: str
    fetched_at: Optional[datetime] = None
    count: int
    rates: Dict[str, float]


class CurrencyListOut(BaseModel):
    base: str
    currencies: List[str]
