from pathlib import Path
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from currency_converter.services.rates.table import ExchangeRateTable
from currency_converter.services.session import (
    ConversionSession,
    new_session,
    select_from,
    select_to,
    set_amount,
    submit,
    swap,
)
from .rates import get_rate_table

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _currency_options(table: ExchangeRateTable, session: ConversionSession) -> List[str]:
    """Codes for the selectors; keeps the current picks visible even if the table lacks them."""
    codes = set(table.codes())
    for code in (session.from_currency, session.to_currency):
        if code:
            codes.add(code)
    return sorted(codes)


def _render(
    request: Request,
    session: ConversionSession,
    table: ExchangeRateTable,
    status_code: int = 200,
) -> HTMLResponse:
    context: Dict[str, Any] = {
        "session": session,
        "currencies": _currency_options(table, session),
        "rates_loaded": not table.is_empty,
        "version": request.app.version,
    }
    return templates.TemplateResponse(
        request, "converter.html", context, status_code=status_code
    )


def _session_from_form(amount: str, from_currency: str, to_currency: str) -> ConversionSession:
    session = select_from(new_session(), from_currency)
    session = select_to(session, to_currency)
    return set_amount(session, amount)


@router.get("/", response_class=HTMLResponse)
async def converter_page(
    request: Request, table: ExchangeRateTable = Depends(get_rate_table)
):
    settings = request.app.state.settings
    session = new_session(settings.default_from_currency, settings.default_to_currency)
    return _render(request, session, table)


@router.post("/", response_class=HTMLResponse)
async def converter_submit(
    request: Request,
    amount: str = Form(""),
    from_currency: str = Form(""),
    to_currency: str = Form(""),
    table: ExchangeRateTable = Depends(get_rate_table),
):
    session = submit(_session_from_form(amount, from_currency, to_currency), table)
    return _render(request, session, table, status_code=422 if session.has_errors else 200)


@router.post("/swap", response_class=HTMLResponse)
async def converter_swap(
    request: Request,
    amount: str = Form(""),
    from_currency: str = Form(""),
    to_currency: str = Form(""),
    table: ExchangeRateTable = Depends(get_rate_table),
):
    session = swap(_session_from_form(amount, from_currency, to_currency))
    return _render(request, session, table)
