"""
rules.py - Regime rule tables (read-only configuration).

One RegimeRules record per regime holds the standard deduction, slab table,
surcharge table, deduction eligibility and labour welfare fund. Calculators
receive the table they need as a parameter; nothing here is mutated at runtime.

Slab breakpoints:
  Old: 2.5L/5L/10L
  New: 4L/8L/12L/16L/20L/24L
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from salarytax.engine.schemas import Regime, RegimeRules, SlabBand, SurchargeTier

# ===========================================================================
# OLD REGIME SLAB BREAKPOINTS
# ===========================================================================

OLD_SLAB_2_5L = 250_000
OLD_SLAB_5L   = 500_000
OLD_SLAB_10L  = 1_000_000

# ===========================================================================
# NEW REGIME SLAB BREAKPOINTS
# ===========================================================================

NEW_SLAB_4L  = 400_000
NEW_SLAB_8L  = 800_000
NEW_SLAB_12L = 1_200_000
NEW_SLAB_16L = 1_600_000
NEW_SLAB_20L = 2_000_000
NEW_SLAB_24L = 2_400_000

# ===========================================================================
# SURCHARGE TIER BREAKPOINTS (same in both regimes; top rate differs)
# ===========================================================================

SURCHARGE_50L  = 5_000_000
SURCHARGE_1CR  = 10_000_000
SURCHARGE_2CR  = 20_000_000
SURCHARGE_5CR  = 50_000_000

OLD_TOP_SURCHARGE_RATE = 0.37
NEW_TOP_SURCHARGE_RATE = 0.25    # New regime caps the >5Cr tier at 25%

# ===========================================================================
# FLAT CONSTANTS
# ===========================================================================

OLD_STD_DEDUCTION = 50_000
NEW_STD_DEDUCTION = 75_000

CESS_RATE = 0.04

PROFESSIONAL_TAX_MONTHLY = 200
PROFESSIONAL_TAX_ANNUAL  = PROFESSIONAL_TAX_MONTHLY * 12   # 2,400

OLD_LWF_MONTHLY = 25
NEW_LWF_MONTHLY = 0

# Fallbacks for optional inputs
DEFAULT_BASIC_SALARY_PCT = 0.40     # of gross_salary
DEFAULT_HRA_PERCENTAGE   = 40.0     # of basic_salary

# HRA Rule 2A factors
HRA_RENT_BASIC_OFFSET_PCT = 0.10
HRA_METRO_PCT             = 0.50
HRA_NON_METRO_PCT         = 0.40

# ===========================================================================
# SLAB TABLES
# ===========================================================================

OLD_REGIME_SLABS: tuple[SlabBand, ...] = (
    SlabBand(lower_bound=0,            upper_bound=OLD_SLAB_2_5L, rate=0.00),
    SlabBand(lower_bound=OLD_SLAB_2_5L, upper_bound=OLD_SLAB_5L,  rate=0.05),
    SlabBand(lower_bound=OLD_SLAB_5L,  upper_bound=OLD_SLAB_10L,  rate=0.20),
    SlabBand(lower_bound=OLD_SLAB_10L, upper_bound=None,          rate=0.30),
)

NEW_REGIME_SLABS: tuple[SlabBand, ...] = (
    SlabBand(lower_bound=0,            upper_bound=NEW_SLAB_4L,  rate=0.00),
    SlabBand(lower_bound=NEW_SLAB_4L,  upper_bound=NEW_SLAB_8L,  rate=0.05),
    SlabBand(lower_bound=NEW_SLAB_8L,  upper_bound=NEW_SLAB_12L, rate=0.10),
    SlabBand(lower_bound=NEW_SLAB_12L, upper_bound=NEW_SLAB_16L, rate=0.15),
    SlabBand(lower_bound=NEW_SLAB_16L, upper_bound=NEW_SLAB_20L, rate=0.20),
    SlabBand(lower_bound=NEW_SLAB_20L, upper_bound=NEW_SLAB_24L, rate=0.25),
    SlabBand(lower_bound=NEW_SLAB_24L, upper_bound=None,         rate=0.30),
)

# ===========================================================================
# SURCHARGE TABLES
# ===========================================================================

def _surcharge_table(top_rate: float) -> tuple[SurchargeTier, ...]:
    return (
        SurchargeTier(lower_bound=0,             upper_bound=SURCHARGE_50L, rate=0.00),
        SurchargeTier(lower_bound=SURCHARGE_50L, upper_bound=SURCHARGE_1CR, rate=0.10),
        SurchargeTier(lower_bound=SURCHARGE_1CR, upper_bound=SURCHARGE_2CR, rate=0.15),
        SurchargeTier(lower_bound=SURCHARGE_2CR, upper_bound=SURCHARGE_5CR, rate=0.25),
        SurchargeTier(lower_bound=SURCHARGE_5CR, upper_bound=None,          rate=top_rate),
    )


OLD_REGIME_SURCHARGE = _surcharge_table(OLD_TOP_SURCHARGE_RATE)
NEW_REGIME_SURCHARGE = _surcharge_table(NEW_TOP_SURCHARGE_RATE)

# ===========================================================================
# REGIME RULE TABLE - the single source of regime-dependent facts
# ===========================================================================

REGIME_RULES: Mapping[Regime, RegimeRules] = MappingProxyType({
    Regime.old: RegimeRules(
        regime=Regime.old,
        standard_deduction=OLD_STD_DEDUCTION,
        slab_table=OLD_REGIME_SLABS,
        surcharge_table=OLD_REGIME_SURCHARGE,
        allows_hra_exemption=True,
        allows_investment_deduction=True,
        labour_welfare_fund_monthly=OLD_LWF_MONTHLY,
    ),
    Regime.new: RegimeRules(
        regime=Regime.new,
        standard_deduction=NEW_STD_DEDUCTION,
        slab_table=NEW_REGIME_SLABS,
        surcharge_table=NEW_REGIME_SURCHARGE,
        allows_hra_exemption=False,
        allows_investment_deduction=False,
        labour_welfare_fund_monthly=NEW_LWF_MONTHLY,
    ),
})


def rules_for(regime: Regime) -> RegimeRules:
    """Look up the rule record for a regime (accepts the enum or its string value)."""
    return REGIME_RULES[Regime(regime)]
