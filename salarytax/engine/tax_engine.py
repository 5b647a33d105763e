"""
SalaryTax Tax Engine - orchestrator.
Pure Python, deterministic. Same input → same output.

compute() runs a single pass:
  defaults → gross after PF/gratuity → HRA → regime deductions → taxable income
  → slab tax → surcharge → cess → yearly tax → monthly decomposition

Every regime-dependent fact comes from rules.REGIME_RULES; this module never
branches on the Regime value itself.
"""
from __future__ import annotations

import logging

from salarytax.engine.cess import calculate_cess
from salarytax.engine.hra import calculate_hra_exemption
from salarytax.engine.rules import (
    DEFAULT_BASIC_SALARY_PCT,
    DEFAULT_HRA_PERCENTAGE,
    PROFESSIONAL_TAX_ANNUAL,
    PROFESSIONAL_TAX_MONTHLY,
    rules_for,
)
from salarytax.engine.schemas import (
    DeductionSet,
    HRAExemptionResult,
    MonthlyDeductions,
    Regime,
    RegimeComparison,
    RegimeRules,
    ResolvedInputs,
    TaxBreakdown,
    TaxInputs,
)
from salarytax.engine.slab_tax import calculate_slab_tax
from salarytax.engine.surcharge import calculate_surcharge

logger = logging.getLogger(__name__)


# ===========================================================================
# INTERNAL HELPERS (pure functions - no side effects, no I/O)
# ===========================================================================

def resolve_inputs(inputs: TaxInputs) -> ResolvedInputs:
    """
    Apply the fallbacks for optional fields, once, before anything else runs.

    basic_salary   ← given value, else 40% of gross_salary
    hra_percentage ← given value, else 40

    A 0 counts as "not given": blank form fields reach the engine as 0.
    """
    basic_salary = inputs.basic_salary or inputs.gross_salary * DEFAULT_BASIC_SALARY_PCT
    hra_percentage = inputs.hra_percentage or DEFAULT_HRA_PERCENTAGE

    return ResolvedInputs(
        gross_salary=inputs.gross_salary,
        pf_contribution=inputs.pf_contribution,
        gratuity=inputs.gratuity,
        total_investments=inputs.total_investments,
        rent_paid=inputs.rent_paid,
        basic_salary=basic_salary,
        hra_percentage=hra_percentage,
        other_allowances=inputs.other_allowances,
        employer_pf=inputs.employer_pf,
        is_metro_city=inputs.is_metro_city,
    )


def build_deduction_set(
    rules: RegimeRules,
    resolved: ResolvedInputs,
    hra: HRAExemptionResult,
) -> DeductionSet:
    """
    Assemble the deductions the regime allows.

    Old: standard ₹50K + HRA exemption + aggregate investments + professional tax.
    New: standard ₹75K + professional tax. HRA and investments are zeroed.
    """
    return DeductionSet(
        standard_deduction=float(rules.standard_deduction),
        hra_exemption=hra.final_exemption if rules.allows_hra_exemption else 0.0,
        other_deductions=resolved.total_investments if rules.allows_investment_deduction else 0.0,
        professional_tax=float(PROFESSIONAL_TAX_ANNUAL),
    )


# ===========================================================================
# COMPUTE - public API
# ===========================================================================

def compute(inputs: TaxInputs, regime: Regime = Regime.new) -> TaxBreakdown:
    """
    Compute the full tax breakdown for one regime.

    Never raises for numeric input: out-of-range values (negative salary,
    hra_percentage above 100) are not rejected here. Validate at the caller.
    """
    rules = rules_for(regime)

    # Step 1: Resolve optional fields
    resolved = resolve_inputs(inputs)

    # Step 2: Gross after PF and gratuity
    gross_after_basic_deductions = (
        resolved.gross_salary - resolved.pf_contribution - resolved.gratuity
    )

    # Step 3: HRA exemption (computed for both regimes; only old applies it)
    hra_calculation = calculate_hra_exemption(
        basic_salary=resolved.basic_salary,
        hra_received=resolved.basic_salary * resolved.hra_percentage / 100,
        rent_paid=resolved.rent_paid,
        is_metro_city=resolved.is_metro_city,
    )

    # Step 4: Regime-gated deductions
    deductions = build_deduction_set(rules, resolved, hra_calculation)
    total_deductions = deductions.total

    # Step 5: Taxable income - NOT clamped; calculate_slab_tax clamps
    taxable_income = gross_after_basic_deductions - total_deductions

    # Step 6: Slab tax
    slab = calculate_slab_tax(taxable_income, rules.slab_table)
    tax = slab.total_tax

    # Step 7: Surcharge (flat multiplier on the whole slab tax)
    surcharge_rate, surcharge = calculate_surcharge(taxable_income, tax, rules.surcharge_table)

    # Step 8: Cess on tax + surcharge
    cess = calculate_cess(tax, surcharge)

    # Step 9: Yearly tax
    yearly_tax = round(tax + surcharge + cess, 2)

    # Step 10: Monthly decomposition
    monthly_deductions = MonthlyDeductions(
        pf=round(resolved.pf_contribution / 12, 2),
        tax=round(yearly_tax / 12, 2),
        professional_tax=float(PROFESSIONAL_TAX_MONTHLY),
        labour_welfare_fund=float(rules.labour_welfare_fund_monthly),
    )

    # Step 11: Monthly in-hand (labour welfare fund is reported, not deducted)
    in_hand_salary = round(
        gross_after_basic_deductions / 12
        - yearly_tax / 12
        - resolved.pf_contribution / 12
        - PROFESSIONAL_TAX_MONTHLY,
        2,
    )

    logger.debug(
        "Computed regime=%s taxable_income=%.2f yearly_tax=%.2f",
        rules.regime.value,
        taxable_income,
        yearly_tax,
    )

    # Step 12: Breakdown with echoed inputs and HRA detail
    return TaxBreakdown(
        regime=rules.regime,
        gross_after_basic_deductions=gross_after_basic_deductions,
        deductions=deductions,
        total_deductions=total_deductions,
        taxable_income=taxable_income,
        slab_taxes=slab.lines,
        tax=tax,
        surcharge_rate=surcharge_rate,
        surcharge=surcharge,
        cess=cess,
        yearly_tax=yearly_tax,
        monthly_tax=monthly_deductions.tax,
        monthly_deductions=monthly_deductions,
        in_hand_salary=in_hand_salary,
        inputs=resolved,
        hra_calculation=hra_calculation,
    )


# ===========================================================================
# COMPARE REGIMES
# ===========================================================================

def compare_regimes(inputs: TaxInputs) -> RegimeComparison:
    """
    Compute both regimes and recommend the one with lower yearly tax.
    Ties go to the new regime.
    """
    old = compute(inputs, Regime.old)
    new = compute(inputs, Regime.new)

    if old.yearly_tax < new.yearly_tax:
        recommended = Regime.old
    else:
        recommended = Regime.new

    return RegimeComparison(
        old_regime=old,
        new_regime=new,
        recommended_regime=recommended,
        savings_amount=round(abs(old.yearly_tax - new.yearly_tax), 2),
    )
