"""Shared fixtures — canned Alpha Vantage payloads."""
import pytest

API_KEY = "test-key-1234"


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def daily_series():
    # Newest first, as Alpha Vantage returns it
    return {
        "Meta Data": {"2. Symbol": "AAPL"},
        "Time Series (Daily)": {
            "2024-01-02": {
                "1. open": "187.15",
                "2. high": "188.44",
                "3. low": "183.885",
                "4. close": "185.64",
                "5. volume": "82488674",
            },
            "2023-12-29": {
                "1. open": "193.90",
                "2. high": "194.40",
                "3. low": "191.725",
                "4. close": "192.53",
                "5. volume": "42672148",
            },
        },
    }


@pytest.fixture
def dividends_payload():
    return {
        "symbol": "AAPL",
        "data": [
            {"ex_dividend_date": "2024-02-09", "declaration_date": "2024-02-01", "amount": "0.24"},
        ],
    }


@pytest.fixture
def holdings_payload():
    return {
        "net_assets": "284000000000",
        "holdings": [
            {"symbol": "AAPL", "description": "APPLE INC", "weight": "0.0889"},
            {"symbol": "MSFT", "description": "MICROSOFT CORP", "weight": "0.0861"},
        ],
    }


@pytest.fixture
def exchange_payload():
    return {
        "Realtime Currency Exchange Rate": {
            "1. From_Currency Code": "USD",
            "3. To_Currency Code": "EUR",
            "5. Exchange Rate": "0.9123",
            "6. Last Refreshed": "2024-01-02 10:00:01",
        }
    }
