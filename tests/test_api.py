import http.client
from decimal import Decimal

from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app
from currency_converter.services import http_client


def _convert(client, **payload):
    return client.post("/api/convert", json=payload)


def test_health_reports_loaded_rates(client):
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["rates_loaded"] == 8
    assert body["last_error"] is None


def test_convert_usd_to_inr(client):
    resp = _convert(client, amount="100", from_currency="USD", to_currency="INR")
    assert resp.status_code == 200
    body = resp.json()
    assert body["converted"] == "8300.00"
    assert body["amount"] == "100.00"
    assert Decimal(body["rate"]) == Decimal("83")
    assert resp.headers["x-request-id"]


def test_convert_normalizes_lakh_amount(client):
    resp = _convert(client, amount="1 lakh", from_currency="inr", to_currency="usd")
    assert resp.status_code == 200
    assert resp.json()["amount"] == "100000.00"
    assert resp.json()["converted"] == "1204.82"


def test_convert_rejects_wrong_grouping(client):
    resp = _convert(client, amount="12,3,45", from_currency="USD", to_currency="INR")
    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "validation_error"
    assert "Invalid USD format" in body["detail"][0]["msg"]


def test_convert_requires_currency(client):
    resp = _convert(client, amount="100", to_currency="INR")
    assert resp.status_code == 422
    messages = [e["msg"] for e in resp.json()["detail"]]
    assert any("Please select a currency." in m for m in messages)


def test_convert_unknown_currency_is_unavailable(client):
    resp = _convert(client, amount="100", from_currency="USD", to_currency="XYZ")
    assert resp.status_code == 503
    body = resp.json()
    assert body["error"] == "rates_unavailable"
    assert body["currency"] == "XYZ"


def test_validate_endpoint(client):
    ok = client.post("/api/validate", json={"amount": "2 lakh", "currency": "inr"}).json()
    assert ok == {"valid": True, "currency": "INR", "normalized": "200000.00", "message": None}
    bad = client.post("/api/validate", json={"amount": "1,00,000", "currency": "USD"}).json()
    assert bad["valid"] is False
    assert "Invalid USD format" in bad["message"]


def test_currencies_and_rates(client):
    currencies = client.get("/api/currencies").json()
    assert currencies["base"] == "USD"
    assert currencies["currencies"] == sorted(currencies["currencies"])
    assert {"USD", "INR"} <= set(currencies["currencies"])
    rates = client.get("/api/rates").json()
    assert rates["count"] == 8
    assert rates["rates"]["INR"] == 83.0
    refreshed = client.post("/api/rates/refresh")
    assert refreshed.status_code == 200
    assert refreshed.json()["count"] == 8


def test_unknown_route_is_json_404(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def test_failed_rate_fetch_degrades(offline_client):
    health = offline_client.get("/health").json()
    assert health["status"] == "degraded"
    assert health["rates_loaded"] == 0
    assert "network down" in health["last_error"]
    resp = _convert(offline_client, amount="100", from_currency="USD", to_currency="INR")
    assert resp.status_code == 503
    assert offline_client.get("/api/currencies").json()["currencies"] == []


def test_convert_oversized_amount_is_rejected(client):
    resp = _convert(client, amount="1" * 27, from_currency="USD", to_currency="INR")
    assert resp.status_code == 422
    body = resp.json()
    assert body["error"] == "invalid_amount"
    assert body["currency"] == "USD"


def test_connection_reset_on_startup_degrades(monkeypatch):
    def fake_urlopen(request, timeout):
        raise http.client.RemoteDisconnected("Remote end closed connection without response")

    monkeypatch.setattr(http_client.urllib.request, "urlopen", fake_urlopen)
    settings = Settings(
        _env_file=None,
        exchange_rate_provider="external-http",
        exchange_api_url="https://rates.example.test/latest",
    )
    with TestClient(create_app(settings_override=settings)) as client:
        health = client.get("/health").json()
        assert health["status"] == "degraded"
        assert health["rates_loaded"] == 0
        assert "Remote end closed" in health["last_error"]
