"""Form state for one converter page.

``ConversionSession`` is an immutable value; every user action is a function
returning a new session. Rendering code only reads it, so the swap and
validation interplay can be exercised without a browser.

Swap semantics: the two displayed codes are exchanged directly, so two swaps
with no edits in between give back the original pair. The amount is
re-validated against the grammar of the new "from" currency after each swap.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from currency_converter.models.constants import (
    DEFAULT_FROM_CURRENCY,
    DEFAULT_TO_CURRENCY,
    REQUIRED_CURRENCY_MESSAGE,
)
from .amounts import AmountFormatError, parse_amount, validate_amount, validation_message
from .money import format2
from .rates.conversion import ConversionResult, convert
from .rates.table import ExchangeRateTable, RateUnavailableError


@dataclass(frozen=True)
class ConversionSession:
    amount: str = ""
    from_currency: Optional[str] = DEFAULT_FROM_CURRENCY
    to_currency: Optional[str] = DEFAULT_TO_CURRENCY
    result: Optional[ConversionResult] = None
    amount_error: Optional[str] = None
    from_error: Optional[str] = None
    to_error: Optional[str] = None
    rate_error: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return any((self.amount_error, self.from_error, self.to_error, self.rate_error))

    @property
    def display_result(self) -> str:
        return format2(self.result.converted) if self.result else ""


def _code(value: Optional[str]) -> Optional[str]:
    value = (value or "").strip().upper()
    return value or None


def _amount_error(amount: str, currency: Optional[str]) -> Optional[str]:
    # Nothing typed yet is not an error until submit
    if not amount or currency is None:
        return None
    if validate_amount(amount, currency):
        return None
    return validation_message(currency)


def new_session(
    from_currency: str = DEFAULT_FROM_CURRENCY, to_currency: str = DEFAULT_TO_CURRENCY
) -> ConversionSession:
    return ConversionSession(from_currency=_code(from_currency), to_currency=_code(to_currency))


def set_amount(session: ConversionSession, amount: str) -> ConversionSession:
    amount = (amount or "").strip()
    return replace(
        session,
        amount=amount,
        result=None,
        amount_error=_amount_error(amount, session.from_currency),
    )


def select_from(session: ConversionSession, currency: Optional[str]) -> ConversionSession:
    code = _code(currency)
    return replace(
        session,
        from_currency=code,
        from_error=None if code else REQUIRED_CURRENCY_MESSAGE,
        result=None,
        amount_error=_amount_error(session.amount, code),
    )


def select_to(session: ConversionSession, currency: Optional[str]) -> ConversionSession:
    code = _code(currency)
    return replace(
        session,
        to_currency=code,
        to_error=None if code else REQUIRED_CURRENCY_MESSAGE,
        result=None,
    )


def swap(session: ConversionSession) -> ConversionSession:
    new_from, new_to = session.to_currency, session.from_currency
    return replace(
        session,
        from_currency=new_from,
        to_currency=new_to,
        from_error=session.to_error,
        to_error=session.from_error,
        result=None,
        rate_error=None,
        amount_error=_amount_error(session.amount, new_from),
    )


def submit(session: ConversionSession, table: ExchangeRateTable) -> ConversionSession:
    """Validate every field and, when all pass, convert against ``table``."""
    from_error = None if session.from_currency else REQUIRED_CURRENCY_MESSAGE
    to_error = None if session.to_currency else REQUIRED_CURRENCY_MESSAGE
    amount_error = None
    if not session.amount:
        amount_error = "Please enter an amount."
    elif session.from_currency and not validate_amount(session.amount, session.from_currency):
        amount_error = validation_message(session.from_currency)
    checked = replace(
        session,
        from_error=from_error,
        to_error=to_error,
        amount_error=amount_error,
        rate_error=None,
        result=None,
    )
    if checked.has_errors:
        return checked
    try:
        value = parse_amount(session.amount, session.from_currency)  # type: ignore[arg-type]
        result = convert(value, session.from_currency, session.to_currency, table)  # type: ignore[arg-type]
    except AmountFormatError as e:
        return replace(checked, amount_error=e.message)
    except RateUnavailableError as e:
        return replace(checked, rate_error=f"Exchange rate unavailable for {e.currency}: {e.reason}.")
    return replace(checked, result=result)
