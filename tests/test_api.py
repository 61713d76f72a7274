"""
FastAPI endpoint tests for the Spelled Numbers API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

import api
import pytest
from api import app
from fastapi.testclient import TestClient

from spelled_numbers.config import Settings

client = TestClient(app)


@pytest.fixture(scope="module", autouse=True)
def _warm_settings() -> None:
    """Initialise settings once for all API tests (bypasses lifespan)."""
    api._settings = Settings()
    yield  # type: ignore[misc]
    api._settings = None


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["locales_loaded"] == 5


class TestConvertEndpoint:
    def test_plain_number(self) -> None:
        resp = client.post("/convert", json={"number": 123})
        assert resp.status_code == 200
        assert resp.json() == {"text": "one hundred twenty-three", "locale": "en", "format": "plain"}

    def test_string_number_keeps_precision(self) -> None:
        data = client.post("/convert", json={"number": "0.1", "locale": "en"}).json()
        assert data["text"] == "zero point one"

    def test_locale_and_format(self) -> None:
        resp = client.post(
            "/convert", json={"number": "5.22", "locale": "ru", "format": "currency"}
        )
        assert resp.status_code == 200
        assert resp.json()["text"] == "пять рублей двадцать две копейки"

    def test_year_with_era(self) -> None:
        resp = client.post(
            "/convert", json={"number": 1900, "format": "year", "include_era": True}
        )
        assert resp.json()["text"] == "nineteen hundred AD"

    def test_options_forwarded(self) -> None:
        resp = client.post(
            "/convert", json={"number": 105, "locale": "vi", "alternate_link": True}
        )
        assert resp.json()["text"] == "một trăm lẻ năm"

    def test_currency_override(self) -> None:
        resp = client.post(
            "/convert",
            json={"number": "1.999", "format": "currency", "currency": "GBP", "round": True},
        )
        assert resp.json()["text"] == "two pounds"

    def test_magnitude_error_is_422(self) -> None:
        resp = client.post("/convert", json={"number": "1" + "0" * 24})
        assert resp.status_code == 422
        data = resp.json()
        assert data["code"] == "MAGNITUDE_EXCEEDED"
        assert data["details"] == {"digits": 25, "limit": 24}

    def test_invalid_numeral_is_422(self) -> None:
        resp = client.post("/convert", json={"number": "twelve"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "INVALID_INPUT"

    def test_unknown_locale_is_404(self) -> None:
        resp = client.post("/convert", json={"number": 1, "locale": "xx"})
        assert resp.status_code == 404
        assert resp.json()["code"] == "UNSUPPORTED_LOCALE"

    def test_unknown_currency_is_404(self) -> None:
        resp = client.post(
            "/convert", json={"number": 1, "format": "currency", "currency": "XYZ"}
        )
        assert resp.status_code == 404
        assert resp.json()["code"] == "UNSUPPORTED_CURRENCY"

    def test_bad_format_rejected_by_schema(self) -> None:
        resp = client.post("/convert", json={"number": 1, "format": "roman"})
        assert resp.status_code == 422

    def test_missing_number(self) -> None:
        resp = client.post("/convert", json={})
        assert resp.status_code == 422

    @pytest.mark.parametrize("flag", [True, False])
    def test_boolean_number_rejected(self, flag: bool) -> None:
        resp = client.post("/convert", json={"number": flag})
        assert resp.status_code == 422
        assert "text" not in resp.json()

    def test_huge_exponent_is_422(self) -> None:
        resp = client.post("/convert", json={"number": "1e99999999999999999"})
        assert resp.status_code == 422
        assert resp.json()["code"] == "MAGNITUDE_EXCEEDED"


class TestReferenceEndpoints:
    def test_locales(self) -> None:
        data = client.get("/locales").json()
        codes = [entry["code"] for entry in data]
        assert codes == ["en", "pl", "ru", "uk", "vi"]
        assert {"code": "ru", "name": "Русский", "default_currency": "RUB"} in data

    def test_currencies(self) -> None:
        data = client.get("/currencies").json()
        assert "USD" in data
        assert "VND" in data


class TestNotInitialised:
    def test_503_without_settings(self) -> None:
        saved = api._settings
        api._settings = None
        try:
            assert client.get("/health").status_code == 503
        finally:
            api._settings = saved
