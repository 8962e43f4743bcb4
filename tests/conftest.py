"""Pytest fixtures for the x402 weather API."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from server import create_app

PAY_TO = "0x5b12EA8DC4f37F4998d5A1BCf63Ac9d6fd89bd4e"


@pytest.fixture
def free_client() -> TestClient:
    """Client for an app without a receiving address (paywall off)."""
    return TestClient(create_app(pay_to=None))


@pytest.fixture
def paid_client() -> TestClient:
    """Client for an app with the paywall installed."""
    return TestClient(create_app(pay_to=PAY_TO, facilitator_url="https://x402.org/facilitator"))


@pytest.fixture
def hoje() -> date:
    return date(2024, 12, 28)
