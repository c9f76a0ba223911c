from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from currency_converter.models import RateTableOut
from currency_converter.services.rates.store import RateStore
from currency_converter.services.rates.table import ExchangeRateTable

"""Rates router exposing the session rate table.

Endpoints:
    - GET  /api/rates          -> current table (may be empty if the fetch failed)
    - POST /api/rates/refresh  -> fetch again from the configured provider
"""

router = APIRouter(prefix="/api/rates", tags=["rates"])


def get_rate_store(request: Request) -> RateStore:
    return request.app.state.rate_store


def get_rate_table(store: RateStore = Depends(get_rate_store)) -> ExchangeRateTable:
    return store.table


def _table_out(table: ExchangeRateTable) -> RateTableOut:
    return RateTableOut(
        base=table.base,
        fetched_at=table.fetched_at,
        count=len(table),
        rates=dict(table.rates),
    )


@router.get("", response_model=RateTableOut, summary="Current exchange-rate table")
async def read_rates(table: ExchangeRateTable = Depends(get_rate_table)):
    return _table_out(table)


@router.post("/refresh", response_model=RateTableOut, summary="Re-fetch exchange rates")
def refresh_rates(store: RateStore = Depends(get_rate_store)):
    # sync handler: FastAPI runs it in the threadpool, the fetch blocks on urllib
    return _table_out(store.refresh())
