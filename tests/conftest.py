import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app
from currency_converter.services.http_client import HttpError
from currency_converter.services.rates.providers import ExternalHTTPRateProvider
from currency_converter.services.rates.store import RateStore
from currency_converter.services.rates.table import ExchangeRateTable


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, exchange_rate_provider="static", debug=False)


@pytest.fixture
def client(settings):
    app = create_app(settings_override=settings)
    with TestClient(app) as c:  # context manager runs the lifespan (rate fetch)
        yield c


@pytest.fixture
def usd_inr_table() -> ExchangeRateTable:
    return ExchangeRateTable.from_mapping({"USD": 1, "INR": 83})


@pytest.fixture
def offline_client(settings):
    def fetch(url, **kwargs):
        raise HttpError("network down")

    store = RateStore(ExternalHTTPRateProvider("https://rates.example.test/latest", fetch=fetch))
    app = create_app(settings_override=settings, rate_store=store)
    with TestClient(app) as c:
        yield c
