"""Amount parsing for the conversion form.

Two steps, always in this order:

1. ``validate_amount(raw, currency)`` checks the text against the grammar of
   the currency the amount is expressed in (the "from" currency):

   - INR: Indian digit grouping (``1,00,000``, ``12,34,567.50``) with an
     optional magnitude/unit word (``2 lakh``, ``1.5 crore``, ``500 rupees``).
   - USD: Western grouping (``1,234,567.89``).
   - anything else: whole digits only, no separators.

2. ``normalize(raw)`` strips grouping commas, applies the magnitude word and
   returns a ``Decimal`` with exactly two fractional digits.

``parse_amount`` chains both and raises ``AmountFormatError`` on rejection.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional

from .money import round2

MAGNITUDE_FACTORS: Dict[str, int] = {
    "lakh": 100_000,
    "lakhs": 100_000,
    "crore": 10_000_000,
    "crores": 10_000_000,
    "rupee": 1,
    "rupees": 1,
}

_INR_PATTERN = re.compile(
    r"^(?:\d{1,2}(?:,\d{2})*,\d{3}|\d+)(?:\.\d+)?(?:\s*(?:lakhs?|crores?|rupees?))?$",
    re.IGNORECASE,
)
_USD_PATTERN = re.compile(r"^(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?$")
_DIGITS_PATTERN = re.compile(r"^\d+$")

GRAMMARS: Dict[str, "re.Pattern[str]"] = {
    "INR": _INR_PATTERN,
    "USD": _USD_PATTERN,
}

_MESSAGES: Dict[str, str] = {
    "INR": (
        "Invalid INR format or comma placement. The first comma comes after the "
        "first three digits from the right (for thousands), and subsequent commas "
        "appear after every two digits."
    ),
    "USD": (
        "Invalid USD format or comma placement. The comma should come after "
        "every 3 digits."
    ),
}
_FALLBACK_MESSAGE = "Invalid amount for {currency}. Only whole digits without separators are accepted."

# Head and optional word once grouping commas are gone
_PARTS = re.compile(r"^(?P<number>\d+(?:\.\d+)?|\.\d+)\s*(?P<word>[^\W\d_]+)?$")


class AmountFormatError(ValueError):
    """Raised when an amount string cannot be turned into a number."""

    def __init__(self, message: str, currency: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.currency = currency


def grammar_for(currency: str) -> "re.Pattern[str]":
    return GRAMMARS.get((currency or "").upper(), _DIGITS_PATTERN)


def validation_message(currency: str) -> str:
    code = (currency or "").upper()
    return _MESSAGES.get(code, _FALLBACK_MESSAGE.format(currency=code or "this currency"))


def validate_amount(raw: str, currency: str) -> bool:
    if raw is None:
        return False
    return grammar_for(currency).match(raw.strip()) is not None


def normalize(raw: str) -> Decimal:
    """Return ``raw`` as a two-decimal value, applying lakh/crore words.

    >>> normalize("1,00,000")
    Decimal('100000.00')
    >>> normalize("1.5 crore")
    Decimal('15000000.00')
    """
    text = (raw or "").replace(",", "").strip()
    match = _PARTS.match(text)
    if not match:
        raise AmountFormatError(f"'{raw}' is not a number")
    word = match.group("word")
    factor = 1
    if word:
        try:
            factor = MAGNITUDE_FACTORS[word.lower()]
        except KeyError:
            raise AmountFormatError(f"Unknown magnitude word '{word}'") from None
    try:
        return round2(Decimal(match.group("number")) * factor)
    except InvalidOperation as e:
        # more digits than the decimal context can hold at two places
        raise AmountFormatError(f"'{raw}' is too large") from e


def parse_amount(raw: str, currency: str) -> Decimal:
    if not validate_amount(raw, currency):
        raise AmountFormatError(validation_message(currency), currency=currency.upper())
    try:
        return normalize(raw)
    except AmountFormatError as e:
        raise AmountFormatError(e.message, currency=currency.upper()) from e
