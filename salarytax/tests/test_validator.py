"""Unit tests for validate_business_rules() and the request payload constraints."""
from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from salarytax.api.schemas import CalculateRequest, TaxInputsPayload
from salarytax.api.validator import validate_business_rules
from salarytax.engine.schemas import Regime


def test_valid_inputs_pass() -> None:
    validate_business_rules(
        TaxInputsPayload(gross_salary=1_200_000, basic_salary=480_000, pf_contribution=72_000)
    )


def test_defaulted_basic_salary_passes() -> None:
    validate_business_rules(TaxInputsPayload(gross_salary=1_200_000))


def test_basic_above_gross_raises_json_violations() -> None:
    with pytest.raises(ValueError) as exc_info:
        validate_business_rules(TaxInputsPayload(gross_salary=100_000, basic_salary=200_000))
    violations = json.loads(str(exc_info.value))
    assert violations == [
        {
            "field": "inputs.basic_salary",
            "issue": "basic_salary (₹200,000) cannot exceed gross_salary (₹100,000)",
        }
    ]


def test_pf_plus_gratuity_above_gross_raises() -> None:
    with pytest.raises(ValueError) as exc_info:
        validate_business_rules(
            TaxInputsPayload(gross_salary=100_000, pf_contribution=60_000, gratuity=50_000)
        )
    violations = json.loads(str(exc_info.value))
    assert [v["field"] for v in violations] == ["inputs.pf_contribution"]


def test_payload_rejects_negative_money() -> None:
    with pytest.raises(ValidationError):
        TaxInputsPayload(gross_salary=1_000_000, rent_paid=-1)


def test_payload_rejects_hra_percentage_out_of_range() -> None:
    with pytest.raises(ValidationError):
        TaxInputsPayload(gross_salary=1_000_000, hra_percentage=101)


def test_calculate_request_regime_optional() -> None:
    req = CalculateRequest.model_validate({"inputs": {"gross_salary": 1}})
    assert req.regime is None
    req = CalculateRequest.model_validate({"inputs": {"gross_salary": 1}, "regime": "old"})
    assert req.regime == Regime.old
