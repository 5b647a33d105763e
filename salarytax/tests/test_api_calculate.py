"""
End-to-end API tests for POST /api/calculate, POST /api/compare and GET /api/health.

Tests the full stack: HTTP request → schema validation → business-rule validation
→ tax engine → HTTP response. No external services are needed.

Expected values are the hand-computed figures from demo_profiles.py.
"""
from __future__ import annotations

import pytest
from httpx import AsyncClient

from demo_profiles import DEMO_PROFILES


# ---------------------------------------------------------------------------
# Test Group 1: POST /api/calculate - happy paths
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["asha", "vikram", "meera"])
@pytest.mark.parametrize("regime", ["old", "new"])
async def test_calculate_demo_profiles(client: AsyncClient, name: str, regime: str) -> None:
    data = DEMO_PROFILES[name]
    response = await client.post(
        "/api/calculate", json={"inputs": data["inputs"], "regime": regime}
    )
    assert response.status_code == 200, (
        f"{name}: Expected 200, got {response.status_code}. Body: {response.text}"
    )

    result = response.json()
    assert result["regime"] == regime
    for field_name, value in data["expected"][regime].items():
        assert result[field_name] == pytest.approx(value, abs=0.01), (
            f"{name}/{regime}: {field_name} expected {value}, got {result[field_name]}"
        )


@pytest.mark.asyncio
async def test_calculate_omitted_regime_uses_new(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate", json={"inputs": DEMO_PROFILES["asha"]["inputs"]}
    )
    assert response.status_code == 200
    assert response.json()["regime"] == "new"


@pytest.mark.asyncio
async def test_calculate_response_structure(client: AsyncClient) -> None:
    """Every breakdown field the presentation layer renders must be present."""
    response = await client.post(
        "/api/calculate",
        json={"inputs": DEMO_PROFILES["asha"]["inputs"], "regime": "old"},
    )
    result = response.json()

    for key in (
        "taxable_income", "slab_taxes", "surcharge", "cess", "yearly_tax",
        "monthly_tax", "monthly_deductions", "in_hand_salary", "deductions",
        "inputs", "hra_calculation",
    ):
        assert key in result, f"{key} missing from response"

    assert set(result["hra_calculation"]) == {
        "actual_hra", "rent_paid_minus_basic", "metro_city_allowance", "final_exemption",
    }
    assert set(result["monthly_deductions"]) == {
        "pf", "tax", "professional_tax", "labour_welfare_fund",
    }
    assert len(result["slab_taxes"]) == 4
    # Unbounded top band serialises as null
    assert result["slab_taxes"][-1]["upper_bound"] is None
    # Resolved defaults are echoed
    assert result["inputs"]["is_metro_city"] is True


@pytest.mark.asyncio
async def test_calculate_echoes_defaulted_basic_salary(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate",
        json={"inputs": {"gross_salary": 1_000_000, "basic_salary": 0}, "regime": "old"},
    )
    assert response.status_code == 200
    assert response.json()["inputs"]["basic_salary"] == pytest.approx(400_000)


# ---------------------------------------------------------------------------
# Test Group 2: POST /api/calculate - validation errors
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_calculate_negative_gross_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate", json={"inputs": {"gross_salary": -1}, "regime": "old"}
    )
    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = [d["field"] for d in body["error"]["details"]]
    assert "inputs.gross_salary" in fields


@pytest.mark.asyncio
async def test_calculate_missing_gross_rejected(client: AsyncClient) -> None:
    response = await client.post("/api/calculate", json={"inputs": {"gratuity": 0}})
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_calculate_hra_percentage_over_100_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate",
        json={"inputs": {"gross_salary": 1_000_000, "hra_percentage": 150}},
    )
    assert response.status_code == 422
    fields = [d["field"] for d in response.json()["error"]["details"]]
    assert "inputs.hra_percentage" in fields


@pytest.mark.asyncio
async def test_calculate_unknown_field_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate",
        json={"inputs": {"gross_salary": 1_000_000, "section_80c": 150_000}},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_calculate_unknown_regime_rejected(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate",
        json={"inputs": {"gross_salary": 1_000_000}, "regime": "legacy"},
    )
    assert response.status_code == 422
    fields = [d["field"] for d in response.json()["error"]["details"]]
    assert "regime" in fields


@pytest.mark.asyncio
async def test_calculate_business_rules_collect_all_violations(client: AsyncClient) -> None:
    """basic > gross and PF+gratuity > gross are reported together."""
    response = await client.post(
        "/api/calculate",
        json={
            "inputs": {
                "gross_salary": 500_000,
                "basic_salary": 600_000,
                "pf_contribution": 400_000,
                "gratuity": 200_000,
            },
            "regime": "old",
        },
    )
    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in body["error"]["details"]}
    assert fields == {"inputs.basic_salary", "inputs.pf_contribution"}


# ---------------------------------------------------------------------------
# Test Group 3: POST /api/compare
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["asha", "vikram", "meera"])
async def test_compare_demo_profiles(client: AsyncClient, name: str) -> None:
    data = DEMO_PROFILES[name]
    response = await client.post("/api/compare", json={"inputs": data["inputs"]})
    assert response.status_code == 200

    result = response.json()
    expected = data["expected"]
    assert result["recommended_regime"] == expected["recommended_regime"]
    assert result["savings_amount"] == pytest.approx(expected["savings_amount"], abs=0.01)
    assert result["old_regime"]["yearly_tax"] == pytest.approx(
        expected["old"]["yearly_tax"], abs=0.01
    )
    assert result["new_regime"]["yearly_tax"] == pytest.approx(
        expected["new"]["yearly_tax"], abs=0.01
    )


@pytest.mark.asyncio
async def test_compare_business_rule_violation(client: AsyncClient) -> None:
    response = await client.post(
        "/api/compare",
        json={"inputs": {"gross_salary": 100_000, "basic_salary": 200_000}},
    )
    assert response.status_code == 422
    assert response.json()["error"]["details"][0]["field"] == "inputs.basic_salary"


# ---------------------------------------------------------------------------
# Test Group 4: System endpoints
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    response = await client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "version" in body


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


# ---------------------------------------------------------------------------
# Test Group 5: Error envelope consistency and blank-field defaults
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_calculate_gross_only(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate", json={"inputs": {"gross_salary": 1_200_000}}
    )
    assert response.status_code == 200
    assert response.json()["regime"] == "new"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path, payload",
    [
        # Schema validation (global RequestValidationError handler)
        ("/api/calculate", {"inputs": {"gross_salary": -1}}),
        # Business rules (route-level handling)
        ("/api/compare", {"inputs": {"gross_salary": 100_000, "basic_salary": 200_000}}),
    ],
)
async def test_validation_errors_share_envelope_shape(
    client: AsyncClient, path: str, payload: dict
) -> None:
    response = await client.post(path, json=payload)
    assert response.status_code == 422
    error = response.json()["error"]
    assert set(error) == {"code", "message", "details"}
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]
    for detail in error["details"]:
        assert set(detail) == {"field", "issue"}


@pytest.mark.asyncio
async def test_calculate_zero_hra_percentage_computed_as_forty(client: AsyncClient) -> None:
    response = await client.post(
        "/api/calculate",
        json={"inputs": {"gross_salary": 1_000_000, "hra_percentage": 0}, "regime": "old"},
    )
    assert response.status_code == 200
    result = response.json()
    assert result["inputs"]["hra_percentage"] == pytest.approx(40)
    # basic defaults to 400,000; 40% of it
    assert result["hra_calculation"]["actual_hra"] == pytest.approx(160_000)
