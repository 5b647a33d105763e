"""
Tax engine HTTP routes - POST /api/calculate,
                          POST /api/compare

Both run the deterministic engine in-process; there is no state to load or
persist. Request bodies are validated structurally by Pydantic, then by
validate_business_rules().
"""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from salarytax.api.errors import make_error_response
from salarytax.api.schemas import CalculateRequest, CompareRequest
from salarytax.api.validator import validate_business_rules
from salarytax.config import settings
from salarytax.engine import compare_regimes, compute

router = APIRouter(prefix="/api", tags=["tax_engine"])
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_validation_error_response(violations_json: str) -> JSONResponse:
    """Parse JSON-encoded violations and return standard 422 error envelope."""
    try:
        violations: list[dict] = json.loads(violations_json)
    except (json.JSONDecodeError, ValueError):
        violations = [{"field": None, "issue": violations_json}]
    return make_error_response(
        code="VALIDATION_ERROR",
        message="Input validation failed",
        details=violations,
        status_code=422,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/calculate")
async def calculate_tax(request_body: CalculateRequest) -> JSONResponse:
    """
    Compute the tax breakdown for one regime.

    regime may be omitted; settings.default_regime applies (new unless overridden).
    """
    try:
        validate_business_rules(request_body.inputs)
    except ValueError as exc:
        return _make_validation_error_response(str(exc))

    regime = request_body.regime or settings.default_regime
    result = compute(request_body.inputs, regime)

    logger.info(
        "Tax calculated regime=%s yearly_tax=%.2f",
        result.regime.value,
        result.yearly_tax,
    )
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))


@router.post("/compare")
async def compare_tax(request_body: CompareRequest) -> JSONResponse:
    """Compute both regimes and recommend the cheaper one (ties → new)."""
    try:
        validate_business_rules(request_body.inputs)
    except ValueError as exc:
        return _make_validation_error_response(str(exc))

    result = compare_regimes(request_body.inputs)

    logger.info(
        "Regimes compared recommended=%s savings=%.2f",
        result.recommended_regime.value,
        result.savings_amount,
    )
    return JSONResponse(status_code=200, content=result.model_dump(mode="json"))
