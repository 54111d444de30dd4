"""
E2E tests for household scenarios run through the full HTTP stack.

Scenarios:
- short_stay: cheap rent, short horizon, falling prices → rent
- settled_family: the worked example, 10 years in a $500k home → buy
- long_haul: 30 years in a home on a 25-year mortgage → buy, flagged
- cash_buyer: no mortgage at all
"""

import pytest
from fastapi.testclient import TestClient


def test_short_stay_prefers_renting(client: TestClient):
    """
    short_stay: $1000 rent for 3 years vs a depreciating $500k home
    Expected: Rent, buy bar taller than rent bar
    """
    response = client.post(
        "/v1/projection",
        json={
            "monthly_rent": 1000,
            "home_price": 500000,
            "down_payment_pct": 5,
            "mortgage_rate": 6,
            "amortization_years": 30,
            "property_tax_rate": 1.5,
            "appreciation_rate": -2,
            "horizon_years": 3,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_rent_cost"] == 36000
    assert data["recommendation"] == "rent", "Short stays with falling prices should rent"
    assert data["view"]["recommendation_text"] == "Recommendation: Better to Rent"
    heights = [bar["height_pct"] for bar in data["view"]["chart"]["bars"]]
    assert heights[1] == 100
    assert heights[0] < 100


def test_settled_family_prefers_buying(client: TestClient, sample_payload: dict):
    """
    settled_family: $2000 rent vs $500k home over 10 years
    Expected: Buy, no warnings
    """
    response = client.post("/v1/projection", json=sample_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["recommendation"] == "buy"
    assert data["buy"]["net_cost"] < data["total_rent_cost"]
    assert data["warnings"] == []


def test_long_haul_equity_outweighs_costs(client: TestClient, sample_payload: dict):
    """
    long_haul: horizon outlasts the mortgage term
    Expected: Buy with a negative net cost, a warning, and an empty buy bar
    """
    response = client.post(
        "/v1/projection",
        json={**sample_payload, "monthly_rent": 2500, "horizon_years": 30},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_rent_cost"] == 900000
    assert data["recommendation"] == "buy"
    assert data["buy"]["net_cost"] < 0
    assert len(data["warnings"]) == 1
    bars = data["view"]["chart"]["bars"]
    assert [bar["height_pct"] for bar in bars] == [100, 0]
    assert bars[1]["value_label"].startswith("$-")


def test_cash_buyer_has_no_mortgage(client: TestClient, sample_payload: dict):
    """
    cash_buyer: 100% down payment
    Expected: No mortgage payments or principal, net cost = price + tax - appreciation
    """
    response = client.post(
        "/v1/projection",
        json={**sample_payload, "down_payment_pct": 100, "appreciation_rate": 0},
    )

    assert response.status_code == 200
    buy = response.json()["buy"]
    assert buy["mortgage_amount"] == 0
    assert buy["total_mortgage_payments"] == 0
    assert buy["principal_repaid"] == 0
    assert buy["net_cost"] == pytest.approx(550000)
