"""
Tests for the web API

Tests covering:
1. Health checks
2. Valuation with and without a mortgage balance
3. Invalid input mapped to 400, malformed body to 422
4. Comparison report download
5. Delivery failures never change the response status
"""

import pytest
import requests
from fastapi.testclient import TestClient

from delivery.gateway import GatewayClient
from utils.config import Config
from web.app import create_app


# =============================================================================
# Test Fixtures
# =============================================================================

PROPERTY = {
    "zip_code": "75201",
    "property_type": "single_family",
    "square_feet": 2000,
    "bedrooms": 3,
    "bathrooms": 2,
    "condition": "good",
}


@pytest.fixture
def unconfigured_client():
    """App whose messaging gateway has no credentials."""
    config = Config(gateway_api_key=None, gateway_location_id=None)
    return TestClient(create_app(config))


@pytest.fixture
def configured_client():
    config = Config(
        gateway_base_url="https://gateway.test",
        gateway_api_key="secret-key",
        gateway_location_id="loc-123",
    )
    return TestClient(create_app(config))


# =============================================================================
# Test: Health
# =============================================================================

class TestHealth:
    """Health checks have no dependencies."""

    def test_root(self, unconfigured_client):
        assert unconfigured_client.get("/").json() == {"status": "ok"}

    def test_health(self, unconfigured_client):
        assert unconfigured_client.get("/health").status_code == 200

    def test_api_health_reports_delivery(self, unconfigured_client):
        data = unconfigured_client.get("/api/health").json()

        assert data["status"] == "healthy"
        assert data["delivery_configured"] is False


# =============================================================================
# Test: Valuation and Comparison
# =============================================================================

class TestValuationEndpoint:
    """Tests for /api/valuation and /api/comparison."""

    def test_valuation_only(self, unconfigured_client):
        response = unconfigured_client.post("/api/valuation", json=PROPERTY)

        assert response.status_code == 200
        data = response.json()
        assert data["valuation"]["estimated_value"] == 700000
        assert data["valuation"]["confidence"] == "high"
        assert data["equity"] is None
        assert data["comparison"] is None

    def test_valuation_with_balance(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/valuation", json={**PROPERTY, "mortgage_balance": 450000},
        )

        data = response.json()
        assert data["equity"]["equity"] == 250000
        assert len(data["comparison"]["options"]) == 3
        assert sum(opt["recommended"] for opt in data["comparison"]["options"]) == 1

    def test_comparison(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/comparison", json={"property_value": 500000, "mortgage_balance": 400000},
        )

        assert response.status_code == 200
        options = response.json()["options"]
        recommended = [opt["type"] for opt in options if opt["recommended"]]
        assert recommended == ["cash_offer"]


class TestErrorMapping:
    """Tests for error to status code mapping."""

    def test_invalid_input_is_400(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/valuation", json={**PROPERTY, "square_feet": 0},
        )

        assert response.status_code == 400
        data = response.json()
        assert "check your inputs" in data["detail"]
        assert "square_feet must be positive" in data["errors"]

    def test_negative_value_comparison_is_400(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/comparison", json={"property_value": -1, "mortgage_balance": 0},
        )

        assert response.status_code == 400

    def test_unknown_property_type_is_422(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/valuation", json={**PROPERTY, "property_type": "castle"},
        )

        assert response.status_code == 422

    @pytest.mark.parametrize("body", [
        '{"zip_code": "75201", "square_feet": 2000, "bedrooms": 3, "bathrooms": NaN}',
        '{"zip_code": "75201", "square_feet": 2000, "bedrooms": 3, "bathrooms": Infinity}',
        '{"zip_code": "75201", "square_feet": 2000, "bedrooms": 3, "bathrooms": 2, '
        '"mortgage_balance": NaN}',
    ])
    def test_non_finite_property_is_422(self, unconfigured_client, body):
        response = unconfigured_client.post(
            "/api/valuation",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    def test_non_finite_comparison_is_422(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/comparison",
            content='{"property_value": NaN, "mortgage_balance": 0}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422

    def test_report_without_balance_is_400(self, unconfigured_client):
        response = unconfigured_client.post("/api/comparison-report", json=PROPERTY)

        assert response.status_code == 400


# =============================================================================
# Test: Report Download
# =============================================================================

class TestReportEndpoint:
    """Tests for /api/comparison-report."""

    def test_returns_pdf(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/comparison-report", json={**PROPERTY, "mortgage_balance": 450000},
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "sale-options-comparison-" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")


# =============================================================================
# Test: Send Comparison
# =============================================================================

class TestSendComparison:
    """Delivery is best effort and never changes the status."""

    def test_delivery_failure_still_200(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/send-comparison",
            json={
                **PROPERTY,
                "mortgage_balance": 450000,
                "email": "contact-42",
                "phone": "2145550100",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["analysis"]["comparison"] is not None
        assert data["delivery"]["all_delivered"] is False
        assert len(data["delivery"]["outcomes"]) == 2

    def test_successful_delivery(self, configured_client, monkeypatch):
        sent = []

        def _fake_post(self, payload):
            sent.append(payload)
            return {"messageId": "msg-1"}

        monkeypatch.setattr(GatewayClient, "post_message", _fake_post)

        response = configured_client.post(
            "/api/send-comparison",
            json={**PROPERTY, "mortgage_balance": 450000, "email": "contact-42"},
        )

        assert response.status_code == 200
        assert response.json()["delivery"]["all_delivered"] is True
        assert len(sent) == 1
        assert sent[0]["type"] == "Email"
        assert sent[0]["attachments"][0]["contentType"] == "application/pdf"

    def test_transport_error_still_200(self, configured_client, monkeypatch):
        def _reset(self, url, json=None, timeout=None):
            raise ConnectionResetError("socket closed by peer")

        monkeypatch.setattr(requests.Session, "post", _reset)

        response = configured_client.post(
            "/api/send-comparison",
            json={
                **PROPERTY,
                "mortgage_balance": 450000,
                "email": "contact-42",
                "phone": "2145550100",
            },
        )

        assert response.status_code == 200
        outcomes = response.json()["delivery"]["outcomes"]
        assert [o["delivered"] for o in outcomes] == [False, False]

    def test_no_destinations(self, unconfigured_client):
        response = unconfigured_client.post(
            "/api/send-comparison", json={**PROPERTY, "mortgage_balance": 450000},
        )

        assert response.status_code == 200
        assert response.json()["delivery"]["outcomes"] == []
