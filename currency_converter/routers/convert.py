from fastapi import APIRouter, Depends

from currency_converter.models import (
    AmountCheckIn,
    AmountCheckOut,
    ConversionIn,
    ConversionOut,
    CurrencyListOut,
)
from currency_converter.services.amounts import (
    AmountFormatError,
    normalize,
    parse_amount,
    validate_amount,
    validation_message,
)
from currency_converter.services.rates.conversion import convert
from currency_converter.services.rates.table import ExchangeRateTable
from .rates import get_rate_table

router = APIRouter(prefix="/api", tags=["convert"])


@router.post("/convert", response_model=ConversionOut, summary="Convert an amount")
async def convert_amount(
    payload: ConversionIn, table: ExchangeRateTable = Depends(get_rate_table)
):
    # AmountFormatError / RateUnavailableError are mapped by the app handlers
    amount = parse_amount(payload.amount, payload.from_currency)  # type: ignore[arg-type]
    result = convert(amount, payload.from_currency, payload.to_currency, table)  # type: ignore[arg-type]
    return ConversionOut.from_result(result)


@router.post("/validate", response_model=AmountCheckOut, summary="Check an amount string")
async def validate(payload: AmountCheckIn):
    if not validate_amount(payload.amount, payload.currency):
        return AmountCheckOut(
            valid=False,
            currency=payload.currency,
            message=validation_message(payload.currency),
        )
    try:
        normalized = normalize(payload.amount)
    except AmountFormatError as e:
        return AmountCheckOut(valid=False, currency=payload.currency, message=e.message)
    return AmountCheckOut(valid=True, currency=payload.currency, normalized=normalized)


@router.get("/currencies", response_model=CurrencyListOut, summary="Selectable currencies")
async def list_currencies(table: ExchangeRateTable = Depends(get_rate_table)):
    return CurrencyListOut(base=table.base, currencies=table.codes())
