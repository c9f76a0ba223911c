"""Smoke script for the converter API.

Builds the app with the static provider (or external-http when --live is
passed), runs a few conversions and prints the JSON responses.

NOTE: This is a lightweight diagnostic and not a formal test.
"""

import json
import sys

from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app


def run(live: bool = False):
    settings = Settings(exchange_rate_provider="external-http" if live else "static")
    app = create_app(settings_override=settings)
    results = {}
    with TestClient(app) as client:
        results["health"] = client.get("/health").json()
        for name, payload in {
            "usd_to_inr": {"amount": "1,234.50", "from_currency": "USD", "to_currency": "INR"},
            "inr_lakh_to_usd": {"amount": "2 lakh", "from_currency": "INR", "to_currency": "USD"},
            "inr_grouped_to_eur": {"amount": "1,00,000", "from_currency": "INR", "to_currency": "EUR"},
            "usd_bad_grouping": {"amount": "12,3,45", "from_currency": "USD", "to_currency": "INR"},
        }.items():
            resp = client.post("/api/convert", json=payload)
            results[name] = {"status": resp.status_code, "body": resp.json()}
    print(json.dumps(results, indent=2))


if __name__ == "__main__":
    run(live="--live" in sys.argv)
