"""Pytest configuration and fixtures for the WeFund Webhook API tests.

Every test gets its own application instance with:
- a fixed clock, so timestamps are predictable
- a fresh in-memory webhook store
- a temporary public directory holding the frontend page
"""

from datetime import datetime, timezone
from typing import Any, Dict

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from webhook_api.core.config import Settings

FIXED_NOW = datetime(2026, 1, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)
FIXED_ISO = "2026-01-15T10:30:00.123Z"

INDEX_HTML = "<html><body><h1>WeFund Webhook API</h1></body></html>"


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing the public directory at a temporary folder."""
    (tmp_path / "index.html").write_text(INDEX_HTML)
    return Settings(PUBLIC_DIR=tmp_path)


@pytest.fixture
def app(test_settings: Settings, fixed_clock) -> FastAPI:
    from main import create_app

    return create_app(app_settings=test_settings, clock=fixed_clock)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def sample_payload() -> Dict[str, Any]:
    """A WooCommerce order webhook body with billing and one line item."""
    return {
        "id": 1,
        "status": "processing",
        "total": "297.00",
        "transaction_id": "txn_1",
        "payment_method": "paytiko_test",
        "billing": {
            "first_name": "John",
            "last_name": "Doe",
            "email": "j@x.com",
            "country": "PH",
        },
        "line_items": [
            {"name": "Pack A", "quantity": 1, "product_id": 101},
        ],
    }
