"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from rent_vs_buy.api.main import create_app
from rent_vs_buy.domain.models import ProjectionInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_input() -> ProjectionInput:
    """$500k home, 20% down at 5% over 25 years, compared over 10 years"""
    return ProjectionInput(
        monthly_rent=2000,
        home_price=500000,
        down_payment_pct=20,
        mortgage_rate=5,
        amortization_years=25,
        property_tax_rate=1,
        appreciation_rate=3,
        horizon_years=10,
    )


@pytest.fixture
def sample_payload() -> dict:
    """JSON body matching sample_input"""
    return {
        "monthly_rent": 2000,
        "home_price": 500000,
        "down_payment_pct": 20,
        "mortgage_rate": 5,
        "amortization_years": 25,
        "property_tax_rate": 1,
        "appreciation_rate": 3,
        "horizon_years": 10,
    }
