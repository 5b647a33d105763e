"""
schemas.py - Tax engine Pydantic v2 data contracts.

Defines:
  - Regime               (old | new tag - selects every regime-dependent fact)
  - TaxInputs            (normalised numeric inputs the engine consumes)
  - ResolvedInputs       (TaxInputs after the defaulting step)
  - SlabBand, SurchargeTier, RegimeRules  (immutable rule-table records)
  - HRAExemptionResult, DeductionSet, SlabTaxLine, SlabTaxResult
  - MonthlyDeductions, TaxBreakdown       (public output of compute())
  - RegimeComparison                      (output of compare_regimes())

All monetary fields are in INR. Salary fields are ANNUAL unless stated
otherwise; rent_paid is MONTHLY.

The engine models carry no range constraints: inputs arrive already coerced
by the caller, and out-of-range values flow through arithmetically. Request
validation lives in salarytax.api.schemas.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Regime
# ---------------------------------------------------------------------------

class Regime(str, Enum):
    old = "old"
    new = "new"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class TaxInputs(BaseModel):
    """
    Compensation inputs for one computation.

    basic_salary and hra_percentage are optional: None (or 0, which is what a
    blank form field is coerced to) falls back to 40% of gross_salary and 40%
    respectively. See resolve_inputs() in tax_engine.py.
    """
    model_config = ConfigDict(extra="forbid")

    gross_salary: float
    pf_contribution: float = 0
    gratuity: float = 0
    total_investments: float = 0       # Aggregate of all tax-saving contributions
    rent_paid: float = 0               # MONTHLY
    basic_salary: Optional[float] = None
    hra_percentage: Optional[float] = None
    other_allowances: float = 0        # Informational only
    employer_pf: float = 0             # Informational only
    is_metro_city: bool = True


class ResolvedInputs(BaseModel):
    """TaxInputs with every optional field resolved to a concrete value."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    gross_salary: float
    pf_contribution: float
    gratuity: float
    total_investments: float
    rent_paid: float
    basic_salary: float
    hra_percentage: float
    other_allowances: float
    employer_pf: float
    is_metro_city: bool


# ---------------------------------------------------------------------------
# Rule-table records (immutable)
# ---------------------------------------------------------------------------

class SlabBand(BaseModel):
    """Half-open income band [lower_bound, upper_bound); upper_bound=None is unbounded."""
    model_config = ConfigDict(frozen=True)

    lower_bound: float
    upper_bound: Optional[float] = None
    rate: float

    @property
    def width(self) -> float:
        if self.upper_bound is None:
            return float("inf")
        return self.upper_bound - self.lower_bound


class SurchargeTier(BaseModel):
    """Income tier (lower_bound, upper_bound]; upper_bound=None is unbounded."""
    model_config = ConfigDict(frozen=True)

    lower_bound: float
    upper_bound: Optional[float] = None
    rate: float


class RegimeRules(BaseModel):
    """
    Every fact that differs between the two regimes, in one record.

    Adding a regime-dependent rule means adding a field here and a value in
    both entries of rules.REGIME_RULES - never a branch on Regime elsewhere.
    """
    model_config = ConfigDict(frozen=True)

    regime: Regime
    standard_deduction: float
    slab_table: Tuple[SlabBand, ...]
    surcharge_table: Tuple[SurchargeTier, ...]
    allows_hra_exemption: bool
    allows_investment_deduction: bool
    labour_welfare_fund_monthly: float


# ---------------------------------------------------------------------------
# Calculator results
# ---------------------------------------------------------------------------

class HRAExemptionResult(BaseModel):
    """The three compared candidates and the exemption chosen (minimum, floored at 0)."""
    model_config = ConfigDict(extra="forbid")

    actual_hra: float
    rent_paid_minus_basic: float
    metro_city_allowance: float
    final_exemption: float


class DeductionSet(BaseModel):
    """
    Deductions applied in one regime. Values are the amounts actually applied:
    hra_exemption and other_deductions are 0 when the regime disallows them.
    """
    model_config = ConfigDict(extra="forbid")

    standard_deduction: float = 0     # ₹50K old / ₹75K new
    hra_exemption: float = 0          # Old regime only
    other_deductions: float = 0       # Aggregate investments - old regime only
    professional_tax: float = 0       # Both regimes

    @property
    def total(self) -> float:
        return (
            self.standard_deduction
            + self.hra_exemption
            + self.other_deductions
            + self.professional_tax
        )


class SlabTaxLine(BaseModel):
    """Income allocated to one band and the tax on it. Unreached bands report 0."""
    model_config = ConfigDict(extra="forbid")

    lower_bound: float
    upper_bound: Optional[float] = None
    rate: float
    taxable_amount: float
    tax: float


class SlabTaxResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    total_tax: float
    lines: List[SlabTaxLine]


# ---------------------------------------------------------------------------
# Output records
# ---------------------------------------------------------------------------

class MonthlyDeductions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pf: float
    tax: float
    professional_tax: float
    labour_welfare_fund: float


class TaxBreakdown(BaseModel):
    """
    Complete result of compute() for one regime.

    Computation sequence:
      1. gross_after_basic_deductions = gross - pf - gratuity
      2. total_deductions = sum of the regime-eligible DeductionSet
      3. taxable_income = gross_after_basic_deductions - total_deductions (may be negative)
      4. tax = progressive slab tax on max(0, taxable_income)
      5. surcharge = tax × tier rate
      6. cess = 4% of (tax + surcharge)
      7. yearly_tax = tax + surcharge + cess
    """
    model_config = ConfigDict(extra="forbid")

    regime: Regime
    gross_after_basic_deductions: float
    deductions: DeductionSet
    total_deductions: float
    taxable_income: float
    slab_taxes: List[SlabTaxLine]
    tax: float                     # Sum of slab_taxes, before surcharge and cess
    surcharge_rate: float
    surcharge: float
    cess: float
    yearly_tax: float
    monthly_tax: float
    monthly_deductions: MonthlyDeductions
    in_hand_salary: float          # MONTHLY take-home
    inputs: ResolvedInputs
    hra_calculation: HRAExemptionResult


class RegimeComparison(BaseModel):
    """Both regimes side by side; ties recommend the new regime."""
    model_config = ConfigDict(extra="forbid")

    old_regime: TaxBreakdown
    new_regime: TaxBreakdown
    recommended_regime: Regime
    savings_amount: float


__all__ = [
    "Regime",
    "TaxInputs",
    "ResolvedInputs",
    "SlabBand",
    "SurchargeTier",
    "RegimeRules",
    "HRAExemptionResult",
    "DeductionSet",
    "SlabTaxLine",
    "SlabTaxResult",
    "MonthlyDeductions",
    "TaxBreakdown",
    "RegimeComparison",
]
