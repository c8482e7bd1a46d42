"""Integration tests for the GraphQL valuation queries."""

import math

from fastapi.testclient import TestClient

from fixings_api.main import app


client = TestClient(app)

MARKET = """
  market: {
    evaluationDate: "2024-01-10"
    flatCurves: [
      { name: "EUR_DISC", referenceDate: "2024-01-10", rate: 0.025 }
      { name: "EUR_FWD", referenceDate: "2024-01-10", rate: 0.03 }
    ]
  }
"""


def _swap_query(swap_type: str = "PAYER", discount_curve: str = "EUR_DISC", extra: str = "") -> str:
    return f"""
    query {{
      priceZeroCouponSwap(
        swap: {{
          type: {swap_type}
          baseNominal: 1000000
          startDate: "2024-01-15"
          maturityDate: "2026-01-15"
          fixedRate: 0.03
          fixedDayCounter: "30/360"
          discountCurve: "{discount_curve}"
          index: {{ name: "EURIBOR6M", currency: "EUR", tenor: "6M", forwardingCurve: "EUR_FWD" }}
          {extra}
        }}
        {MARKET}
      ) {{
        npv
        fixedLegNpv
        floatingLegNpv
        fixedPayment
        floatingPayment
        paymentDate
        fairFixedRate
      }}
    }}
    """


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_price_zero_coupon_swap() -> None:
    response = client.post("/graphql", json={"query": _swap_query()})
    assert response.status_code == 200
    data = response.json()
    assert "errors" not in data
    result = data["data"]["priceZeroCouponSwap"]
    assert abs(result["fixedPayment"] - 1_000_000 * (1.03**2 - 1.0)) < 1e-6
    assert result["fixedLegNpv"] < 0
    assert result["floatingLegNpv"] > 0
    assert abs(result["npv"] - (result["fixedLegNpv"] + result["floatingLegNpv"])) < 1e-6
    assert result["paymentDate"] == "2026-01-15"
    assert result["floatingPayment"] > 0
    assert 0.0 < result["fairFixedRate"] < 0.1


def test_receiver_is_mirror_of_payer() -> None:
    payer = client.post("/graphql", json={"query": _swap_query("PAYER")}).json()
    receiver = client.post("/graphql", json={"query": _swap_query("RECEIVER")}).json()
    assert "errors" not in payer and "errors" not in receiver
    assert abs(
        payer["data"]["priceZeroCouponSwap"]["npv"] + receiver["data"]["priceZeroCouponSwap"]["npv"]
    ) < 1e-6


def test_simple_averaging_prices_lower_floating_leg() -> None:
    compound = client.post("/graphql", json={"query": _swap_query()}).json()
    simple = client.post(
        "/graphql", json={"query": _swap_query(extra="averaging: SIMPLE")}
    ).json()
    assert "errors" not in simple
    assert (
        simple["data"]["priceZeroCouponSwap"]["floatingPayment"]
        < compound["data"]["priceZeroCouponSwap"]["floatingPayment"]
    )


def test_missing_discount_curve_returns_error() -> None:
    response = client.post("/graphql", json={"query": _swap_query(discount_curve="MISSING")})
    assert response.status_code == 200
    data = response.json()
    assert "errors" in data
    assert any("curve" in e["message"].lower() for e in data["errors"])


def test_both_fixed_quotes_returns_error() -> None:
    response = client.post("/graphql", json={"query": _swap_query(extra="fixedPayment: 60000")})
    data = response.json()
    assert "errors" in data
    assert any("exactly one" in e["message"] for e in data["errors"])


def test_equity_index_forecast() -> None:
    query = """
    query {
      equityIndexFixing(
        index: { name: "SX5E", currency: "EUR", interestCurve: "EUR_INT", dividendCurve: "SX5E_DIV" }
        market: {
          evaluationDate: "2024-03-15"
          flatCurves: [
            { name: "EUR_INT", referenceDate: "2024-03-15", rate: 0.04 }
            { name: "SX5E_DIV", referenceDate: "2024-03-15", rate: 0.02 }
          ]
          fixings: [{ index: "SX5E", date: "2024-03-15", value: 100.0 }]
        }
        date: "2025-03-14"
      ) {
        index
        value
        forecast
      }
    }
    """
    response = client.post("/graphql", json={"query": query})
    data = response.json()
    assert "errors" not in data
    result = data["data"]["equityIndexFixing"]
    assert result["forecast"] is True
    assert abs(result["value"] - 100.0 * math.exp(0.02 * 364 / 365)) < 1e-8


def test_equity_index_without_curves_returns_error() -> None:
    query = """
    query {
      equityIndexFixing(
        index: { name: "SX5E", currency: "EUR" }
        market: {
          evaluationDate: "2024-03-15"
          flatCurves: [{ name: "EUR_INT", referenceDate: "2024-03-15", rate: 0.04 }]
          fixings: [{ index: "SX5E", date: "2024-03-15", value: 100.0 }]
        }
        date: "2025-03-14"
      ) { value }
    }
    """
    data = client.post("/graphql", json={"query": query}).json()
    assert "errors" in data
    assert any("curve" in e["message"].lower() for e in data["errors"])


def test_average_rates() -> None:
    query = """
    query {
      simple: averageRates(averaging: SIMPLE, periods: [{fraction: 0.5, fixing: 0.02}, {fraction: 0.5, fixing: 0.03}]) {
        aggregateRate
      }
      compound: averageRates(averaging: COMPOUND, periods: [{fraction: 0.5, fixing: 0.02}, {fraction: 0.5, fixing: 0.03}]) {
        aggregateRate
      }
    }
    """
    data = client.post("/graphql", json={"query": query}).json()
    assert "errors" not in data
    assert abs(data["data"]["simple"]["aggregateRate"] - 0.025) < 1e-12
    assert abs(data["data"]["compound"]["aggregateRate"] - 0.02515) < 1e-12


def test_average_rates_empty_window_returns_error() -> None:
    query = "query { averageRates(averaging: SIMPLE, periods: []) { aggregateRate } }"
    data = client.post("/graphql", json={"query": query}).json()
    assert "errors" in data
    assert any("empty" in e["message"] for e in data["errors"])
