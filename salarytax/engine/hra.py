"""
HRA exemption under Section 10(13A), Rule 2A.

Exemption is the minimum of three candidates:
  1. Actual HRA received (or basic × hra_percentage / 100)
  2. max(0, annual rent − 10% of basic)   ← MUST clip at 0
  3. 50% of basic (metro) or 40% (non-metro)
"""
from __future__ import annotations

from typing import Optional

from salarytax.engine.rules import (
    DEFAULT_HRA_PERCENTAGE,
    HRA_METRO_PCT,
    HRA_NON_METRO_PCT,
    HRA_RENT_BASIC_OFFSET_PCT,
)
from salarytax.engine.schemas import HRAExemptionResult


def calculate_hra_exemption(
    basic_salary: float,
    hra_received: Optional[float] = None,
    rent_paid: float = 0.0,
    is_metro_city: bool = True,
    hra_percentage: Optional[float] = None,
) -> HRAExemptionResult:
    """
    Compute the HRA exemption and the three candidates it was chosen from.

    hra_received wins over hra_percentage when both are given. rent_paid is
    MONTHLY. Degenerates to 0 when basic_salary is 0. Never raises.
    """
    if hra_received is None:
        pct = DEFAULT_HRA_PERCENTAGE if hra_percentage is None else hra_percentage
        hra_received = basic_salary * pct / 100

    metro_pct = HRA_METRO_PCT if is_metro_city else HRA_NON_METRO_PCT
    annual_rent = rent_paid * 12

    actual_hra = hra_received
    rent_paid_minus_basic = max(0.0, annual_rent - HRA_RENT_BASIC_OFFSET_PCT * basic_salary)
    metro_city_allowance = basic_salary * metro_pct

    return HRAExemptionResult(
        actual_hra=actual_hra,
        rent_paid_minus_basic=rent_paid_minus_basic,
        metro_city_allowance=metro_city_allowance,
        final_exemption=max(0.0, min(actual_hra, rent_paid_minus_basic, metro_city_allowance)),
    )
