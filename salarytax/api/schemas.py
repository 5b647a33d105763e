"""
schemas.py - HTTP request contracts and the cross-cutting error envelope.

Defines:
  - TaxInputsPayload   (TaxInputs with range constraints - structural validation)
  - CalculateRequest   (POST /api/calculate body)
  - CompareRequest     (POST /api/compare body)
  - ErrorDetail, ErrorBody, ErrorResponse  (standard error envelope)

The engine itself accepts any float. Range checks belong to the caller, so
they live here rather than on salarytax.engine.schemas.TaxInputs.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from salarytax.engine.schemas import Regime, TaxInputs


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class TaxInputsPayload(TaxInputs):
    """
    Compensation inputs as submitted by a client.

    All salary fields are ANNUAL; rent_paid is MONTHLY.
    extra='forbid' ensures unknown fields cause a 422 error.

    basic_salary and hra_percentage treat 0 the same as omitted, because
    clients send blank form fields as 0. A 0% HRA therefore cannot be
    expressed: hra_percentage=0 is computed as 40%.
    """
    model_config = ConfigDict(extra="forbid")

    gross_salary: float = Field(
        ..., ge=0,
        description="Annual gross salary (CTC) in INR.",
    )
    pf_contribution: float = Field(
        default=0, ge=0,
        description="Annual employee provident fund contribution.",
    )
    gratuity: float = Field(
        default=0, ge=0,
        description="Annual gratuity component.",
    )
    total_investments: float = Field(
        default=0, ge=0,
        description="Annual aggregate of all tax-saving investments (old regime only).",
    )
    rent_paid: float = Field(
        default=0, ge=0,
        description="MONTHLY rent paid. Set 0 if not paying rent.",
    )
    basic_salary: Optional[float] = Field(
        default=None, ge=0,
        description="Annual basic salary. Omit or send 0 to use 40% of gross_salary.",
    )
    hra_percentage: Optional[float] = Field(
        default=None, ge=0, le=100,
        description=(
            "HRA as a percentage of basic. Omit or send 0 to use 40; "
            "a 0% HRA cannot be expressed."
        ),
    )
    other_allowances: float = Field(
        default=0, ge=0,
        description="Annual other allowances - informational.",
    )
    employer_pf: float = Field(
        default=0, ge=0,
        description="Annual employer PF contribution - informational.",
    )
    is_metro_city: bool = Field(
        default=True,
        description="Metro city: HRA cap is 50% of basic, otherwise 40%.",
    )


class CalculateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inputs: TaxInputsPayload
    regime: Optional[Regime] = None     # None → settings.default_regime


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inputs: TaxInputsPayload


# ---------------------------------------------------------------------------
# Error response models - built by salarytax.api.errors.make_error_response
# ---------------------------------------------------------------------------

class ErrorDetail(BaseModel):
    """Single field-level validation or business-rule error."""
    model_config = ConfigDict(extra="forbid")

    field: Optional[str] = None   # Dot-notation field path, e.g. "inputs.basic_salary"
    issue: str                     # Human-readable description of the problem


class ErrorBody(BaseModel):
    """Error envelope body."""
    model_config = ConfigDict(extra="forbid")

    code: str                                      # VALIDATION_ERROR, NOT_FOUND, etc.
    message: str                                   # High-level error description
    details: List[ErrorDetail] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """
    Standard error response format for all SalaryTax endpoints.

    Structure: {"error": {"code": "...", "message": "...", "details": [...]}}
    """
    model_config = ConfigDict(extra="forbid")

    error: ErrorBody


__all__ = [
    "TaxInputsPayload",
    "CalculateRequest",
    "CompareRequest",
    "ErrorDetail",
    "ErrorBody",
    "ErrorResponse",
]
