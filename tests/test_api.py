"""
FastAPI endpoint tests for the Currency Formatter API.

Uses httpx + FastAPI TestClient — no real server needed.
"""

from __future__ import annotations

from api import app
from fastapi.testclient import TestClient

client = TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_200(self) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200

    def test_health_response_shape(self) -> None:
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["default_locale"] == "en_US"


class TestFormatEndpoint:
    def test_default_formatting(self) -> None:
        resp = client.post("/format", json={"amount": "1234.5", "locale": "en_US"})
        assert resp.status_code == 200
        assert resp.json() == {"locale": "en_US", "formatted": "$1,234.50"}

    def test_group_size(self) -> None:
        data = client.post(
            "/format", json={"amount": "543756765", "locale": "en_US", "group_size": 2}
        ).json()
        assert data["formatted"] == "$5,43,75,67,65.00"

    def test_separators_and_symbol(self) -> None:
        data = client.post(
            "/format",
            json={
                "amount": "1234.57",
                "locale": "en_US",
                "decimal_separator": "/",
                "currency_symbol": "₽",
            },
        ).json()
        assert data["formatted"] == "₽1,234/57"

    def test_locale_defaults_from_environment(self) -> None:
        data = client.post("/format", json={"amount": "1"}).json()
        assert data["locale"] == "en_US"

    def test_invalid_fraction_digits_returns_422(self) -> None:
        resp = client.post("/format", json={"amount": "1", "fraction_digits": -1})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_CONFIGURATION"


class TestSpellEndpoint:
    def test_fraction_as_number(self) -> None:
        resp = client.post(
            "/spell",
            json={
                "amount": "1.05",
                "locale": "en_US",
                "mode": "FRACTION_AS_NUMBER",
                "integer_unit_name": "ruble",
                "fraction_unit_name": "kopeck",
            },
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["spelled"] == "one ruble 05 kopecks"
        assert data["integer_part"] == 1
        assert data["fraction"] == "05"

    def test_default_mode_is_all(self) -> None:
        data = client.post(
            "/spell",
            json={"amount": "0", "integer_unit_name": "ruble", "fraction_unit_name": "kopeck"},
        ).json()
        assert data["mode"] == "ALL"
        assert data["spelled"] == "zero rubles zero kopecks"

    def test_russian(self) -> None:
        data = client.post(
            "/spell",
            json={
                "amount": "5",
                "locale": "ru_RU",
                "mode": "INT",
                "integer_unit_name": "рубль",
            },
        ).json()
        assert data["spelled"] == "пять рублей"


class TestRequestValidation:
    def test_empty_body_returns_422(self) -> None:
        resp = client.post("/spell", json={})
        assert resp.status_code == 422

    def test_unknown_mode_returns_422(self) -> None:
        resp = client.post("/spell", json={"amount": "1", "mode": "EVERYTHING"})
        assert resp.status_code == 422

    def test_non_finite_amount_returns_422(self) -> None:
        resp = client.post("/format", json={"amount": "Infinity"})
        assert resp.status_code == 422

    def test_locale_without_inflector_returns_422(self) -> None:
        resp = client.post("/spell", json={"amount": "1", "locale": "de_DE"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INFLECTOR_NOT_CONFIGURED"

    def test_unknown_locale_returns_422(self) -> None:
        resp = client.post("/spell", json={"amount": "1", "locale": "xx_YY"})
        assert resp.status_code == 422
        assert resp.json()["detail"]["code"] == "INVALID_CONFIGURATION"
